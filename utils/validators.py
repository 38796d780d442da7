"""Record field validation utilities for the token top-up report application."""
import logging
from typing import Any, Dict

from pydantic import StrictInt, TypeAdapter, ValidationError

from utils.exceptions import InvalidValueError, MissingFieldError

logger = logging.getLogger('debug')

_strict_int = TypeAdapter(StrictInt)


def fetch_field(record: Dict[str, Any], key: str, description: str) -> Any:
    """Return a required field from a record.

    Args:
        record: The user or company record
        key: Name of the required field
        description: Who is missing it, e.g. "Company is missing top_up"

    Returns:
        The field value, which may be None if the key is present with a null value

    Raises:
        MissingFieldError: If the key is absent
    """
    try:
        return record[key]
    except KeyError:
        raise MissingFieldError(description, record) from None


def fetch_non_negative_int(record: Dict[str, Any], key: str, owner: str) -> int:
    """Return a required integer field that must be zero or greater.

    Args:
        record: The user or company record
        key: Name of the required field
        owner: "User" or "Company", used in error messages

    Returns:
        int: The validated value

    Raises:
        MissingFieldError: If the key is absent
        InvalidValueError: If the value is not an integer or is negative
    """
    value = fetch_field(record, key, f"{owner} is missing {key}")
    try:
        value = _strict_int.validate_python(value)
    except ValidationError:
        raise InvalidValueError(f"{owner} {key.replace('_', ' ')} must be an integer", record) from None
    if value < 0:
        raise InvalidValueError(
            f"{owner} {key.replace('_', ' ')} must be greater than or equal to 0", record
        )
    return value


def is_set(flag: Any) -> bool:
    """Status flags count as set unless they are null or false."""
    return flag is not None and flag is not False
