"""Input file loading for the token top-up report application."""
import json
import logging
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from utils.exceptions import InputNotFoundError, InputReadError, MalformedInputError

# Get loggers
error_logger = logging.getLogger('error')
debug_logger = logging.getLogger('debug')

_record_list = TypeAdapter(List[Dict[str, Any]])


def load_json_records(file_path: str) -> List[Dict[str, Any]]:
    """Load and parse a JSON file holding an array of records.

    Only the top-level shape is checked here; fields are validated where
    they are used.

    Args:
        file_path: Path to the JSON file

    Returns:
        The parsed records, in file order

    Raises:
        InputNotFoundError: If the file does not exist
        InputReadError: If the file cannot be read
        MalformedInputError: If the content is not a JSON array of objects
    """
    debug_logger.debug(f"Reading file content: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            data = json.load(file)
    except FileNotFoundError as e:
        raise InputNotFoundError(f"File not found - {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedInputError(f"Invalid JSON format in {file_path} - {e}") from e
    except OSError as e:
        raise InputReadError(f"Error reading file {file_path} - {e}") from e

    try:
        records = _record_list.validate_python(data, strict=True)
    except ValidationError as e:
        error_logger.error(f"Unexpected structure in {file_path}: {e.errors()}")
        raise MalformedInputError(
            f"Invalid JSON format in {file_path} - expected an array of objects"
        ) from e

    debug_logger.debug(f"Loaded {len(records)} records from {file_path}")
    return records
