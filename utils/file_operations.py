"""File operation utilities for the token top-up report application."""
import os
import stat
import tempfile
import logging

from utils.exceptions import OutputWriteError

# Get loggers
logger = logging.getLogger('debug')
error_logger = logging.getLogger('error')


def _target_mode(dest_path):
    """Mode the written file should end up with.

    An existing file keeps its permission bits; a new one gets what a plain
    open(path, 'w') would give under the current umask.
    """
    try:
        return stat.S_IMODE(os.stat(dest_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_text_atomically(dest_path, content):
    """Write text to a file so readers never see a partially written version.

    The content goes to a temporary file in the destination folder, which then
    replaces the destination in one step.

    Args:
        dest_path: Path of the file to create or overwrite
        content: Text to write, encoded as UTF-8

    Raises:
        OutputWriteError: If the file cannot be written or replaced
    """
    dest_folder = os.path.dirname(os.path.abspath(dest_path))
    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            'w', encoding='utf-8', newline='\n', dir=dest_folder,
            prefix='.', suffix='.tmp', delete=False
        ) as temp_file:
            temp_path = temp_file.name
            temp_file.write(content)
        os.chmod(temp_path, _target_mode(dest_path))
        os.replace(temp_path, dest_path)
        temp_path = None
        logger.debug(f"Successfully wrote {len(content)} characters to {dest_path}")
    except (PermissionError, OSError) as e:
        error_logger.error(f"Failed to write file {dest_path}: {str(e)}")
        raise OutputWriteError(f"Unable to write {dest_path}: {e}") from e
    finally:
        if temp_path is not None and os.path.exists(temp_path):
            try:
                os.remove(temp_path)
            except OSError as e:
                error_logger.error(f"Failed to clean up temporary file {temp_path}: {str(e)}")


def sanitize_record_for_logging(data):
    """Create a copy of data with e-mail addresses masked for safe logging.

    Args:
        data: Record, list of records or plain value

    Returns:
        Data structure with e-mail addresses masked
    """
    if data is None:
        return None

    # For primitive types, return as is
    if not isinstance(data, (dict, list)):
        return data

    # For lists, sanitize each element
    if isinstance(data, list):
        return [sanitize_record_for_logging(item) for item in data]

    sanitized = {}
    for key, value in data.items():
        # Keep the first character and the domain: j***@example.com
        if key == 'email' and isinstance(value, str) and '@' in value:
            local, domain = value.split('@', 1)
            sanitized[key] = f"{local[:1]}***@{domain}"
        elif isinstance(value, (dict, list)):
            sanitized[key] = sanitize_record_for_logging(value)
        else:
            sanitized[key] = value

    return sanitized
