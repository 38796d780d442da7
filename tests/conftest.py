# tests/conftest.py
"""
Pytest configuration and shared fixtures for the top up report tests.

Run:
    pytest tests -v
"""
import json

import pytest

import config


# =============================================================================
# SAMPLE DATA
# =============================================================================

@pytest.fixture
def companies():
    return [
        {"id": 2, "name": "Globex", "top_up": 20, "email_status": False},
        {"id": 1, "name": "Acme", "top_up": 10, "email_status": True},
        {"id": 3, "name": "Initech", "top_up": 5, "email_status": True},
    ]


@pytest.fixture
def users():
    return [
        {"id": 1, "first_name": "Tanya", "last_name": "Nichols", "email": "tanya.nichols@test.com",
         "company_id": 1, "email_status": True, "active_status": True, "tokens": 23},
        {"id": 2, "first_name": "Bob", "last_name": "Boberson", "email": "bob.boberson@test.com",
         "company_id": 1, "email_status": False, "active_status": True, "tokens": 45},
        {"id": 3, "first_name": "Ann", "last_name": "Anderson", "email": "ann.anderson@test.com",
         "company_id": 1, "email_status": True, "active_status": True, "tokens": 0},
        {"id": 4, "first_name": "Gary", "last_name": "Gregson", "email": "gary.gregson@test.com",
         "company_id": 2, "email_status": True, "active_status": True, "tokens": 7},
        {"id": 5, "first_name": "Ivan", "last_name": "Inactive", "email": "ivan@test.com",
         "company_id": 3, "email_status": True, "active_status": False, "tokens": 100},
    ]


# =============================================================================
# FILE FIXTURES
# =============================================================================

@pytest.fixture
def write_json(tmp_path):
    """Write a value as JSON into tmp_path and return the file path."""
    def _write(name, value):
        path = tmp_path / name
        path.write_text(json.dumps(value), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run with tmp_path as working directory and file logging disabled."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "LOG_TO_FILE", False)
    monkeypatch.setattr(config, "STRICT_REPORT_FIELDS", False)
    return tmp_path
