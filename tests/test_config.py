from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

import pytest
from pydantic import ValidationError

from performscan.core import logger as logger_module
from performscan.core.config import Settings, settings


def test_defaults(monkeypatch):
    for name in ("LOG_LEVEL", "LOG_FILE", "SOURCE_ENCODING", "OUTPUT_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    config = Settings(_env_file=None)
    assert config.LOG_LEVEL == "WARNING"
    assert config.LOG_FILE is None
    assert config.SOURCE_ENCODING == "utf-8-sig"
    assert config.OUTPUT_FORMAT == "text"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OUTPUT_FORMAT", "mermaid")
    monkeypatch.setenv("SOURCE_ENCODING", "latin-1")
    config = Settings(_env_file=None)
    assert config.OUTPUT_FORMAT == "mermaid"
    assert config.SOURCE_ENCODING == "latin-1"


def test_invalid_output_format(monkeypatch):
    monkeypatch.setenv("OUTPUT_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_setup_logging_adds_file_handler(tmp_path, monkeypatch):
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    monkeypatch.setattr(settings, "LOG_FILE", str(tmp_path / "logs" / "performscan.log"))
    monkeypatch.setattr(settings, "LOG_LEVEL", "debug")

    logger_module.setup_logging()

    assert root.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)
    assert (tmp_path / "logs").is_dir()
    for handler in root.handlers:
        handler.close()


def test_setup_logging_is_noop_when_configured(monkeypatch):
    root = logging.RootLogger(logging.WARNING)
    existing = logging.NullHandler()
    root.addHandler(existing)
    monkeypatch.setattr(logging, "root", root)

    logger_module.setup_logging()

    assert root.handlers == [existing]
