import os
from pathlib import Path

import pytest

from statement_ledger.core import settings
from statement_ledger.logger import get_logging_config


def test_read_config_file(tmp_path: Path) -> None:
    config = tmp_path / "config.yaml"
    config.write_text(
        "# statement-ledger\n"
        "LOG_LEVEL: debug  # noisy\n"
        'STATEMENT_ENCODING: "latin-1"\n'
        "LOG_DIR:\n"
        "not a pair\n",
        encoding="utf-8",
    )
    assert settings.read_config_file(str(config)) == {
        "LOG_LEVEL": "debug",
        "STATEMENT_ENCODING": "latin-1",
    }


def test_read_missing_config_file(tmp_path: Path) -> None:
    assert settings.read_config_file(str(tmp_path / "absent.yaml")) == {}
    assert settings.read_config_file(None) == {}


def test_load_environment_prefers_real_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "config.yaml").write_text(
        "LOG_LEVEL: WARNING\nSTATEMENT_ENCODING: cp1252\n", encoding="utf-8"
    )
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.delenv("STATEMENT_ENCODING", raising=False)

    settings.load_environment()
    try:
        assert settings.get_config_path() == str(tmp_path / "config.yaml")
        assert settings.get_config_file_values()["LOG_LEVEL"] == "WARNING"
        assert settings.get_statement_encoding() == "cp1252"
    finally:
        os.environ.pop("STATEMENT_ENCODING", None)


def test_statement_encoding_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("STATEMENT_ENCODING", raising=False)
    assert settings.get_statement_encoding() == "utf-8"


def test_unknown_statement_encoding_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("STATEMENT_ENCODING", "klingon-8")
    assert settings.get_statement_encoding() == "utf-8"


def test_logging_config_adds_file_handler(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("LOG_DIR", str(log_dir))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = get_logging_config()

    assert log_dir.is_dir()
    assert config["handlers"]["file"]["filename"] == str(log_dir / "ledger.log")
    assert config["loggers"][""]["level"] == "DEBUG"
    assert config["loggers"][""]["handlers"] == ["console", "file"]


def test_log_environment_reports_value_sources(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    (tmp_path / "config.yaml").write_text("STATEMENT_ENCODING: latin-1\n", encoding="utf-8")
    monkeypatch.setenv("CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.delenv("STATEMENT_ENCODING", raising=False)
    monkeypatch.delenv("LOG_DIR", raising=False)

    settings.load_environment()
    try:
        with caplog.at_level("INFO", logger=settings.logger.name):
            settings.log_environment()
    finally:
        os.environ.pop("STATEMENT_ENCODING", None)

    messages = caplog.messages
    assert f"[ENV] Config file: {tmp_path / 'config.yaml'}" in messages
    assert "[ENV] STATEMENT_ENCODING=latin-1 (config)" in messages
    assert "[ENV] LOG_LEVEL=INFO (env)" in messages
    assert "[ENV] LOG_DIR=<unset>" in messages
