"""
Leasify Report Dashboard - Core Package

This package contains the Leasify API client, session handling, and the
Streamlit dashboard for managing lease-accounting reports.
"""

__version__ = "0.1.0"
