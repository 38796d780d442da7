"""Tests for report ordering."""
import pytest

from handlers.report_formatter import format_companies
from handlers.top_up_processor import apply_user_top_ups, create_companies_by_id
from utils.exceptions import InvalidValueError, MissingFieldError


def _aggregate(companies, users):
    return apply_user_top_ups(users, create_companies_by_id(companies))


def test_companies_sorted_by_id(users, companies):
    formatted = format_companies(_aggregate(companies, users))

    assert [company.id for company in formatted] == [1, 2, 3]


def test_users_sorted_by_last_name(users, companies):
    acme = format_companies(_aggregate(companies, users))[0]

    assert [entry.last_name for entry in acme.users_emailed] == ["Anderson", "Nichols"]
    assert [entry.last_name for entry in acme.users_not_emailed] == ["Boberson"]


def test_equal_last_names_keep_input_order():
    company = {"id": "c1", "name": "Acme", "top_up": 1, "email_status": True}
    users = [
        {"first_name": first, "last_name": last, "email": "x@y.z", "company_id": "c1",
         "tokens": 0, "active_status": True, "email_status": True}
        for first, last in [("Zoe", "Smith"), ("Al", "Jones"), ("Amy", "Smith"), ("Bo", "Smith")]
    ]

    formatted = format_companies(_aggregate([company], users))

    assert [(e.last_name, e.first_name) for e in formatted[0].users_emailed] == [
        ("Jones", "Al"), ("Smith", "Zoe"), ("Smith", "Amy"), ("Smith", "Bo"),
    ]


def test_listed_user_without_last_name_is_fatal():
    company = {"id": 1, "name": "Acme", "top_up": 1, "email_status": True}
    user = {"first_name": "A", "email": "a@b.com", "company_id": 1,
            "tokens": 0, "active_status": True, "email_status": True}

    with pytest.raises(MissingFieldError) as excinfo:
        format_companies(_aggregate([company], [user]))

    assert excinfo.value.message == "User missing last_name"


def test_mixed_company_id_types_are_reported():
    companies = [
        {"id": 1, "name": "Acme", "top_up": 1, "email_status": True},
        {"id": "2", "name": "Globex", "top_up": 1, "email_status": True},
    ]

    with pytest.raises(InvalidValueError):
        format_companies(create_companies_by_id(companies))
