"""Rendering and writing of the top up report."""
import logging
from typing import Any, List

from models.schemas import CompanyAggregate, UserEntry
from utils.exceptions import MissingFieldError
from utils.file_operations import write_text_atomically

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')

USER_INDENT = " " * 8
BALANCE_INDENT = " " * 10


def render_value(value: Any) -> str:
    """Format a JSON value for the report: null is blank, booleans are lowercase."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_users(users: List[UserEntry], strict: bool = False) -> List[str]:
    """Render the three report lines for each user.

    Args:
        users: Sorted user entries
        strict: Fail instead of leaving the previous balance blank when tokens is missing

    Returns:
        list: Report lines without line endings
    """
    lines = []
    for user in users:
        if strict and "tokens" not in user.record:
            raise MissingFieldError("User missing tokens", user.record)
        lines.append(
            f"{USER_INDENT}{render_value(user.last_name)}, "
            f"{render_value(user.first_name)}, {render_value(user.email)}"
        )
        lines.append(f"{BALANCE_INDENT}Previous Token Balance, {render_value(user.tokens)}")
        lines.append(f"{BALANCE_INDENT}New Token Balance {render_value(user.new_token_balance)}")
    return lines


def render_company(company: CompanyAggregate, strict: bool = False) -> List[str]:
    """Render one company block, or nothing when it has no active users."""
    if not company.has_users():
        return []

    name = render_value(company.name)
    lines = [
        f"Company Id: {render_value(company.id)}",
        f"Company Name: {name}",
        "Users Emailed:",
    ]
    lines.extend(render_users(company.users_emailed, strict))
    lines.append("Users Not Emailed:")
    lines.extend(render_users(company.users_not_emailed, strict))
    lines.append(f"Total amount of top ups for {name}: {company.total_top_up_amount}")
    lines.append("")
    return lines


def render_report(companies: List[CompanyAggregate], strict: bool = False) -> str:
    """Render the full report text for companies already in report order.

    Args:
        companies: Companies as returned by format_companies
        strict: Require every listed user to have tokens

    Returns:
        str: The report, one line per entry, each ending with a newline
    """
    lines = []
    for company in companies:
        lines.extend(render_company(company, strict))
    return "".join(f"{line}\n" for line in lines)


def create_output_file(companies: List[CompanyAggregate], output_path: str, strict: bool = False) -> int:
    """Render the report and write it to output_path.

    Rendering finishes before the file is touched, so a rendering error
    leaves any previous report in place.

    Returns:
        int: Number of company blocks written
    """
    report = render_report(companies, strict)
    write_text_atomically(output_path, report)

    written = sum(1 for company in companies if company.has_users())
    app_logger.info(f"Wrote report for {written} companies to {output_path}")
    debug_logger.debug(f"Skipped {len(companies) - written} companies without active users")
    return written
