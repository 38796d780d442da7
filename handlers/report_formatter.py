"""Sorting of aggregated companies and their users for the report."""
import logging
from typing import Any, Dict, List

from models.schemas import CompanyAggregate, UserEntry
from utils.exceptions import InvalidValueError

debug_logger = logging.getLogger('debug')


def sort_users_by_last_name(users: List[UserEntry]) -> List[UserEntry]:
    """Return the users sorted by last name, keeping input order for equal names.

    Raises:
        MissingFieldError: If a user has no last_name
        InvalidValueError: If last names of different types are compared
    """
    try:
        return sorted(users, key=lambda user: user.last_name)
    except TypeError as e:
        raise InvalidValueError(f"User last names cannot be compared - {e}") from e


def sort_companies_by_id(companies: List[CompanyAggregate]) -> List[CompanyAggregate]:
    """Return the companies sorted by id."""
    try:
        return sorted(companies, key=lambda company: company.id)
    except TypeError as e:
        raise InvalidValueError(f"Company ids cannot be compared - {e}") from e


def format_companies(companies_by_id: Dict[Any, CompanyAggregate]) -> List[CompanyAggregate]:
    """Order companies by id and each company's user lists by last name.

    Args:
        companies_by_id: Mapping filled in by apply_user_top_ups

    Returns:
        The companies, ready to be rendered
    """
    companies = list(companies_by_id.values())

    for company in companies:
        company.users_emailed = sort_users_by_last_name(company.users_emailed)
        company.users_not_emailed = sort_users_by_last_name(company.users_not_emailed)

    debug_logger.debug(f"Sorted {len(companies)} companies for the report")
    return sort_companies_by_id(companies)
