"""
Unit tests for session bootstrap, login and logout
"""
import sys
from pathlib import Path
from unittest.mock import MagicMock, Mock

import pytest
import requests

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.leasify.client.api_client import LeasifyClient
from src.leasify.client.auth import AuthManager
from src.leasify.client.errors import ApiError
from src.leasify.client.session_store import FileTokenStorage, MemoryTokenStorage, SessionStore


def make_response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "OK" if status_code < 400 else "Error"
    response.headers = {}
    if payload is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def http_session():
    return MagicMock()


def build_auth(storage, http_session):
    client = LeasifyClient(SessionStore(storage), base_url="https://api.test", http_session=http_session)
    return AuthManager(client, device_name="Test Device")


def test_bootstrap_without_token_makes_no_calls(http_session):
    auth = build_auth(MemoryTokenStorage(), http_session)

    assert auth.bootstrap() is None

    assert not auth.is_authenticated
    assert not auth.client.is_authenticated()
    assert auth.bootstrapped
    http_session.request.assert_not_called()


def test_bootstrap_restores_user(tmp_path, http_session):
    token_file = tmp_path / "token"
    token_file.write_text("saved")
    http_session.request.return_value = make_response(payload={"id": 3, "name": "Saved User"})
    auth = build_auth(FileTokenStorage(token_file), http_session)

    user = auth.bootstrap()

    assert user.id == 3
    assert auth.is_authenticated
    headers = http_session.request.call_args[1]["headers"]
    assert headers["Authorization"] == "Bearer saved"


def test_bootstrap_failure_clears_stale_token(tmp_path, http_session):
    token_file = tmp_path / "token"
    token_file.write_text("stale")
    http_session.request.return_value = make_response(status_code=401, payload={"message": "Unauthenticated."})
    auth = build_auth(FileTokenStorage(token_file), http_session)

    assert auth.bootstrap() is None

    assert not auth.is_authenticated
    assert not auth.client.is_authenticated()
    assert not token_file.exists()


def test_bootstrap_transport_failure_clears_token(http_session):
    http_session.request.side_effect = requests.ConnectionError("offline")
    auth = build_auth(MemoryTokenStorage("saved"), http_session)

    assert auth.bootstrap() is None

    assert not auth.client.is_authenticated()


def test_bootstrap_accepts_company_object(http_session):
    http_session.request.return_value = make_response(
        payload={"id": 1, "name": "X", "company": {"id": 1, "name": "ACME Corp"}}
    )
    auth = build_auth(MemoryTokenStorage("t"), http_session)

    user = auth.bootstrap()

    assert user.company_name == "ACME Corp"
    assert auth.is_authenticated
    assert auth.client.is_authenticated()


@pytest.mark.parametrize("payload", [["unexpected"], {"id": "not-a-number"}])
def test_bootstrap_unreadable_user_clears_token(tmp_path, http_session, payload):
    token_file = tmp_path / "token"
    token_file.write_text("t")
    http_session.request.return_value = make_response(payload=payload)
    auth = build_auth(FileTokenStorage(token_file), http_session)

    assert auth.bootstrap() is None

    assert auth.bootstrapped
    assert not auth.is_authenticated
    assert not auth.client.is_authenticated()
    assert not token_file.exists()


def test_login_caches_user_and_sends_device_name(http_session):
    http_session.request.side_effect = [
        make_response(payload={"token": "T"}),
        make_response(payload={"id": 1, "name": "X"}),
    ]
    auth = build_auth(MemoryTokenStorage(), http_session)

    user = auth.login("a@b.com", "pw")

    assert user.name == "X"
    assert auth.is_authenticated
    login_body = http_session.request.call_args_list[0][1]["json"]
    assert login_body["device_name"] == "Test Device"


def test_login_error_leaves_user_signed_out(http_session):
    http_session.request.return_value = make_response(status_code=401)
    auth = build_auth(MemoryTokenStorage(), http_session)

    with pytest.raises(ApiError):
        auth.login("a@b.com", "wrong")

    assert not auth.is_authenticated


def test_logout_clears_user_and_token(tmp_path, http_session):
    token_file = tmp_path / "token"
    http_session.request.side_effect = [
        make_response(payload={"bearer": "T"}),
        make_response(payload={"id": 1, "name": "X"}),
    ]
    auth = build_auth(FileTokenStorage(token_file), http_session)
    auth.login("a@b.com", "pw")
    assert token_file.exists()
    calls_before = http_session.request.call_count

    auth.logout()

    assert auth.user is None
    assert not auth.is_authenticated
    assert not auth.client.is_authenticated()
    assert not token_file.exists()
    assert http_session.request.call_count == calls_before


def test_default_device_name_comes_from_settings(http_session):
    auth = AuthManager(Mock())
    assert auth.device_name == "ACME Demo App"


def test_login_without_token_flags_placeholder_session(http_session):
    http_session.request.side_effect = [
        make_response(payload={"message": "ok"}),
        make_response(payload={"id": 1, "name": "X"}),
    ]
    auth = build_auth(MemoryTokenStorage(), http_session)

    auth.login("a@b.com", "pw")

    assert auth.is_authenticated
    assert auth.has_placeholder_token


def test_real_token_is_not_placeholder(http_session):
    http_session.request.side_effect = [
        make_response(payload={"token": "T"}),
        make_response(payload={"id": 1, "name": "X"}),
    ]
    auth = build_auth(MemoryTokenStorage(), http_session)

    auth.login("a@b.com", "pw")

    assert not auth.has_placeholder_token
    auth.logout()
    assert not auth.has_placeholder_token
