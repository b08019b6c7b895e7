from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from tars.config import Settings, load_env
from tars.domain.fields import DEFAULT_DATETIME_FORMAT
from tars.infra.logging import setup_logging


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TARS_DATETIME_FORMAT", "%Y-%m-%d")
    monkeypatch.setenv("TARS_DEFAULT_PRIORITY", "h")

    settings = Settings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.datetime_format == "%Y-%m-%d"
    assert settings.default_priority == "h"


def test_settings_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_DIR", raising=False)
    monkeypatch.setenv("TARS_DATETIME_FORMAT", "  ")
    monkeypatch.setenv("TARS_DEFAULT_PRIORITY", "")

    settings = Settings.from_env()

    assert settings.log_dir == "logs"
    assert settings.datetime_format == DEFAULT_DATETIME_FORMAT
    assert settings.default_priority == "m"


def test_setup_logging_writes_log_file(tmp_path: Path) -> None:
    root = logging.getLogger()
    previous = list(root.handlers)
    try:
        setup_logging(Settings(log_level="info", log_dir=str(tmp_path / "logs")))
        logging.getLogger("tars.test").info("hello")
        for handler in root.handlers:
            handler.flush()

        log_file = tmp_path / "logs" / "tars.log"
        assert log_file.exists()
        text = log_file.read_text(encoding="utf-8")
        assert "INFO tars.test hello" in text
        assert "INFO tars.infra.logging Logging to" in text
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in previous:
            root.addHandler(handler)


def test_load_env_reads_and_logs_env_files(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APP_ENV", "staging")
    monkeypatch.setenv("TARS_ENV_SAMPLE", "")
    monkeypatch.delenv("TARS_ENV_SAMPLE")
    (tmp_path / ".env").write_text("TARS_ENV_SAMPLE=base\n", encoding="utf-8")
    (tmp_path / ".env.staging").write_text("TARS_ENV_SAMPLE=staging\n", encoding="utf-8")
    caplog.set_level(logging.DEBUG, logger="tars.config")

    loaded = load_env()

    assert loaded == [tmp_path / ".env", tmp_path / ".env.staging"]
    assert os.environ["TARS_ENV_SAMPLE"] == "staging"
    assert "Loaded settings from" in caplog.text
    assert str(tmp_path / ".env.staging") in caplog.text
