"""
Logger Configuration Module

Provides centralized logging configuration for all backend services.
Supports both file and console logging with different formatters.

Key Features:
- Configurable log levels
- File and console output
- Service-specific loggers
- Rotating file handlers
"""

import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

from .config import settings

def setup_logger(name: str, log_file: Optional[str] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Set up a logger with file and console handlers.

    Args:
        name: Logger name (e.g., 'enrichment', 'fetcher')
        log_file: Optional file name inside settings.LOGS_DIR. If None, only console logging is used
        level: Optional log level. If None, uses level from settings

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Remove any existing handlers to prevent duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(level or settings.LOG_LEVEL)
    logger.propagate = False

    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    console_formatter = logging.Formatter(
        '%(levelname)s - %(name)s - %(message)s'
    )

    # Always add console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        os.makedirs(settings.LOGS_DIR, exist_ok=True)
        log_path = os.path.join(settings.LOGS_DIR, log_file)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger

# Service loggers, console only until configure_loggers() runs
app_logger = setup_logger('app')
api_logger = setup_logger('api')
enrichment_logger = setup_logger('enrichment')
fetcher_logger = setup_logger('fetcher')
nlp_logger = setup_logger('nlp')
storage_logger = setup_logger('storage')
redis_service_logger = setup_logger('redis_service')

_KNOWN_LOGGERS = {
    'app': app_logger,
    'api': api_logger,
    'enrichment': enrichment_logger,
    'fetcher': fetcher_logger,
    'nlp': nlp_logger,
    'storage': storage_logger,
    'redis_service': redis_service_logger,
}

# Track if loggers have been reconfigured
_loggers_configured = False

def configure_loggers(logs_dir: str) -> None:
    """
    Attach file handlers to the service loggers.

    Args:
        logs_dir: Directory path for log files

    Note:
        Call once the application has set up its directories. Subsequent
        calls are no-ops.
    """
    global _loggers_configured
    if _loggers_configured:
        return

    os.makedirs(logs_dir, exist_ok=True)

    for name, logger in _KNOWN_LOGGERS.items():
        file_handler = RotatingFileHandler(
            os.path.join(logs_dir, f"{name}.log"),
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        logger.addHandler(file_handler)

    app_logger.info(f"Loggers configured with directory: {logs_dir}")
    _loggers_configured = True

def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger for a component.

    For known services, returns the pre-configured logger.
    For new services, creates a console-only logger.
    """
    if name in _KNOWN_LOGGERS:
        return _KNOWN_LOGGERS[name]
    return setup_logger(name, None, level=level)

__all__ = [
    'app_logger',
    'api_logger',
    'enrichment_logger',
    'fetcher_logger',
    'nlp_logger',
    'storage_logger',
    'redis_service_logger',
    'setup_logger',
    'get_logger',
    'configure_loggers',
]
