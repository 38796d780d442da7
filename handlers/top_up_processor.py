"""Company indexing and per-user top up processing."""
import logging
from typing import Any, Dict, List

from models.schemas import CompanyAggregate, UserEntry
from utils.exceptions import UnknownCompanyError
from utils.file_operations import sanitize_record_for_logging
from utils.validators import fetch_field, fetch_non_negative_int, is_set

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')


def create_companies_by_id(companies: List[Dict[str, Any]]) -> Dict[Any, CompanyAggregate]:
    """Index companies by id, each with empty user lists and a zero total.

    A later company with an already seen id replaces the earlier one.

    Args:
        companies: Company records as loaded from JSON

    Returns:
        Mapping of company id to its aggregate

    Raises:
        MissingFieldError: If a company has no id
    """
    companies_by_id = {}
    for company in companies:
        company_id = fetch_field(company, "id", "Company is missing id")
        if company_id in companies_by_id:
            app_logger.warning(f"Duplicate company id {company_id!r}, keeping the last record")
        companies_by_id[company_id] = CompanyAggregate(id=company_id, record=company)

    debug_logger.debug(f"Indexed {len(companies_by_id)} companies")
    return companies_by_id


def apply_user_top_ups(users: List[Dict[str, Any]],
                       companies_by_id: Dict[Any, CompanyAggregate]) -> Dict[Any, CompanyAggregate]:
    """Top up every active user and attach it to its company.

    Users are handled in input order and the first invalid record stops the run.

    Args:
        users: User records as loaded from JSON
        companies_by_id: Mapping returned by create_companies_by_id, updated in place

    Returns:
        The same mapping, with user lists and totals filled in

    Raises:
        MissingFieldError: If a required user or company field is absent
        InvalidValueError: If tokens or top_up is not a non-negative integer
        UnknownCompanyError: If an active user's company_id matches no company
    """
    inactive_count = 0
    for user in users:
        if not is_set(fetch_field(user, "active_status", "User is missing active_status")):
            inactive_count += 1
            continue

        company = _find_company(user, companies_by_id)
        process_active_user(user, company)

    emailed = sum(len(company.users_emailed) for company in companies_by_id.values())
    not_emailed = sum(len(company.users_not_emailed) for company in companies_by_id.values())
    app_logger.info(
        f"Processed {emailed + not_emailed} active users "
        f"({emailed} emailed, {not_emailed} not emailed), skipped {inactive_count} inactive"
    )
    return companies_by_id


def _find_company(user, companies_by_id):
    if "company_id" not in user:
        raise UnknownCompanyError("User is missing company_id", user)
    company_id = user["company_id"]
    try:
        company = companies_by_id[company_id]
    except (KeyError, TypeError):
        # TypeError covers unhashable ids such as lists
        company = None
    # Ids must match in JSON type too: true is not 1 and 1.0 is not 1
    if company is None or type(company.id) is not type(company_id):
        raise UnknownCompanyError(f"User references unknown company_id {company_id!r}", user)
    return company


def process_active_user(user: Dict[str, Any], company: CompanyAggregate) -> UserEntry:
    """Compute the user's new balance and add it to one of the company's lists.

    Args:
        user: An active user record
        company: The aggregate of the company the user belongs to

    Returns:
        UserEntry: The entry added to the company
    """
    top_up = fetch_non_negative_int(company.record, "top_up", "Company")
    tokens = fetch_non_negative_int(user, "tokens", "User")

    entry = UserEntry(record=user, new_token_balance=tokens + top_up)
    debug_logger.debug(
        f"User {sanitize_record_for_logging(user)} topped up from {tokens} to {entry.new_token_balance}"
    )

    user_email_status = fetch_field(user, "email_status", "User is missing email_status")
    company_email_status = fetch_field(company.record, "email_status", "Company is missing email_status")
    if is_set(user_email_status) and is_set(company_email_status):
        company.users_emailed.append(entry)
    else:
        company.users_not_emailed.append(entry)

    company.total_top_up_amount += top_up
    return entry
