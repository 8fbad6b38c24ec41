"""
Unit tests for bearer token extraction
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from requests.structures import CaseInsensitiveDict

from src.leasify.client.tokens import (
    PLACEHOLDER_PREFIX,
    extract_token,
    is_placeholder_token,
    make_placeholder_token,
)


def test_bearer_field_wins_over_other_fields():
    body = {"bearer": "B", "token": "T", "access_token": "A"}
    assert extract_token(body, {"Authorization": "Bearer H"}) == "B"


def test_token_field_before_access_token():
    assert extract_token({"token": "T", "access_token": "A"}, {}) == "T"


def test_access_token_field():
    assert extract_token({"access_token": "A"}, {}) == "A"


def test_body_beats_headers():
    assert extract_token({"access_token": "A"}, {"X-Auth-Token": "H"}) == "A"


def test_empty_body_values_are_skipped():
    assert extract_token({"bearer": "", "token": None, "access_token": "A"}, {}) == "A"


@pytest.mark.parametrize(
    "headers,expected",
    [
        ({"Authorization": "Bearer abc"}, "abc"),
        ({"Authorization": "abc"}, "abc"),
        ({"X-Auth-Token": "xyz"}, "xyz"),
        ({"Access-Token": "Bearer acc"}, "acc"),
        ({"Authorization": "Bearer first", "X-Auth-Token": "second"}, "first"),
        ({"X-Auth-Token": "second", "Access-Token": "third"}, "second"),
    ],
)
def test_header_fallback_order(headers, expected):
    assert extract_token({}, headers) == expected


def test_header_lookup_ignores_case():
    assert extract_token({}, {"x-auth-token": "lower"}) == "lower"
    assert extract_token({}, CaseInsensitiveDict({"AUTHORIZATION": "Bearer up"})) == "up"


def test_no_token_anywhere():
    assert extract_token({}, {"Content-Type": "application/json"}) is None


def test_placeholder_token():
    token = make_placeholder_token()
    assert token.startswith(PLACEHOLDER_PREFIX)
    assert token[len(PLACEHOLDER_PREFIX):].isdigit()
    assert is_placeholder_token(token)
    assert not is_placeholder_token("real-token")
    assert not is_placeholder_token(None)
