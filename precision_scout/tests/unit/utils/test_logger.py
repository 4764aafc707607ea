"""
Unit tests for the logger module.
"""
import logging
from logging.handlers import RotatingFileHandler

from precision_scout.app.utils import logger as logger_module
from precision_scout.app.utils.logger import get_logger, setup_logger


def test_setup_logger():
    """setup_logger creates a console logger that does not propagate."""
    logger = setup_logger("test_logger", level="INFO")

    assert logger.name == "test_logger"
    assert logger.level == logging.INFO
    assert logger.propagate is False
    assert any(
        isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler)
        for handler in logger.handlers
    )


def test_setup_logger_does_not_duplicate_handlers():
    setup_logger("test_repeat")
    logger = setup_logger("test_repeat")
    assert len(logger.handlers) == 1


def test_get_logger_returns_known_service_logger():
    assert get_logger("enrichment") is logger_module.enrichment_logger
    assert get_logger("new_component").name == "new_component"


def test_configure_loggers_adds_file_handlers(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_loggers_configured", False)
    before = {name: list(lg.handlers) for name, lg in logger_module._KNOWN_LOGGERS.items()}

    try:
        logger_module.configure_loggers(str(tmp_path))

        enrichment = logger_module.enrichment_logger
        assert any(isinstance(handler, RotatingFileHandler) for handler in enrichment.handlers)
        enrichment.info("file handler check")
        assert (tmp_path / "enrichment.log").exists()

        # Second call is a no-op
        count = len(enrichment.handlers)
        logger_module.configure_loggers(str(tmp_path))
        assert len(enrichment.handlers) == count
    finally:
        for name, lg in logger_module._KNOWN_LOGGERS.items():
            for handler in lg.handlers[:]:
                if handler not in before[name]:
                    lg.removeHandler(handler)
                    handler.close()
