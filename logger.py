"""Logging configuration module for the token top-up report application."""
import os
import logging
from logging.handlers import RotatingFileHandler
import config

# Handlers installed by setup_logging, so a second call can replace them
_installed_handlers = []


def _install(logger, handler):
    logger.addHandler(handler)
    _installed_handlers.append((logger, handler))


def _remove_installed_handlers():
    """Detach and close handlers added by a previous setup_logging call."""
    while _installed_handlers:
        logger, handler = _installed_handlers.pop()
        logger.removeHandler(handler)
        handler.close()


def setup_logging():
    """Set up logging with appropriate handlers and formatters."""
    _remove_installed_handlers()

    # Log formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s - %(message)s'
    )
    simple_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)

    # Console handler for important messages (stderr, stdout is kept for diagnostics)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(simple_formatter)
    console_handler.setLevel(logging.INFO)
    _install(root_logger, console_handler)

    app_logger = logging.getLogger('app')
    app_logger.setLevel(logging.INFO)

    error_logger = logging.getLogger('error')
    error_logger.setLevel(logging.ERROR)

    debug_logger = logging.getLogger('debug')
    debug_logger.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)

    if config.LOG_TO_FILE:
        os.makedirs(config.LOGS_FOLDER, exist_ok=True)

        # 1. App Logger (INFO level)
        app_handler = RotatingFileHandler(
            os.path.join(config.LOGS_FOLDER, 'app.log'), maxBytes=5*1024*1024, backupCount=5
        )
        app_handler.setFormatter(simple_formatter)
        app_handler.setLevel(logging.INFO)
        _install(app_logger, app_handler)

        # 2. Error Logger (ERROR level)
        error_handler = RotatingFileHandler(
            os.path.join(config.LOGS_FOLDER, 'error.log'), maxBytes=2*1024*1024, backupCount=10
        )
        error_handler.setFormatter(detailed_formatter)
        error_handler.setLevel(logging.ERROR)
        _install(error_logger, error_handler)

        # 3. Debug Logger (DEBUG level)
        debug_handler = RotatingFileHandler(
            os.path.join(config.LOGS_FOLDER, 'debug.log'), maxBytes=10*1024*1024, backupCount=3
        )
        debug_handler.setFormatter(detailed_formatter)
        debug_handler.setLevel(logging.DEBUG if config.DEBUG else logging.INFO)
        _install(debug_logger, debug_handler)

    return get_loggers()


def get_loggers():
    """Get configured logger instances."""
    return {
        'app': logging.getLogger('app'),
        'error': logging.getLogger('error'),
        'debug': logging.getLogger('debug')
    }
