"""Tests for the CLI entry point, settings and logging setup."""

import io
import os
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from term_resume.cli.app import create_app
from term_resume.cli.core.terminal import Terminal, TerminalError
from term_resume.config import LOG_FILE_ENV, LOG_LEVEL_ENV, Settings
from term_resume.log import setup_logging


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    monkeypatch.delenv(LOG_FILE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield
    logger.remove()


class TestViewCommand:
    """Tests for the view command."""

    def test_clean_run_exits_zero(self, runner, monkeypatch) -> None:
        calls = []
        monkeypatch.setattr(
            "term_resume.cli.resume.viewer.run_viewer",
            lambda settings: calls.append(settings),
        )
        result = runner.invoke(create_app(), [])
        assert result.exit_code == 0
        assert len(calls) == 1
        assert isinstance(calls[0], Settings)

    def test_terminal_error_exits_one(self, runner, monkeypatch) -> None:
        def fail(settings):
            raise TerminalError("not a tty")

        monkeypatch.setattr("term_resume.cli.resume.viewer.run_viewer", fail)
        result = runner.invoke(create_app(), [])
        assert result.exit_code == 1
        assert "Terminal error" in result.output
        assert "not a tty" in result.output

    def test_real_terminal_without_tty_exits_one(self, runner, monkeypatch) -> None:
        read_fd, write_fd = os.pipe()
        out = io.StringIO()
        monkeypatch.setattr(
            "term_resume.cli.resume.viewer.Terminal",
            lambda: Terminal(stdin_fd=read_fd, stdout=out),
        )
        try:
            result = runner.invoke(create_app(), [])
        finally:
            os.close(read_fd)
            os.close(write_fd)

        assert result.exit_code == 1
        assert "Terminal error" in result.output
        assert "raw mode" in result.output
        assert out.getvalue() == ""

    def test_help(self, runner) -> None:
        result = runner.invoke(create_app(), ["--help"])
        assert result.exit_code == 0
        assert "resume" in result.output


class TestSettings:
    """Tests for Settings.from_env()."""

    def test_defaults(self) -> None:
        settings = Settings.from_env({})
        assert settings.log_file is None
        assert settings.log_level == "DEBUG"
        assert settings.tick_interval == 0.2
        assert settings.quit_char == "q"

    def test_from_env(self, tmp_path) -> None:
        settings = Settings.from_env({
            LOG_FILE_ENV: str(tmp_path / "viewer.log"),
            LOG_LEVEL_ENV: "info",
        })
        assert settings.log_file == tmp_path / "viewer.log"
        assert settings.log_level == "INFO"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_no_file_configured(self) -> None:
        assert setup_logging(Settings()) is None

    def test_writes_to_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "viewer.log"
        assert setup_logging(Settings(log_file=log_file)) == log_file

        logger.info("hello from the test")
        logger.remove()  # flushes the enqueued sink

        text = Path(log_file).read_text()
        assert "term-resume session" in text
        assert "hello from the test" in text
        assert "| INFO    |" in text

    def test_level_filters(self, tmp_path) -> None:
        log_file = tmp_path / "viewer.log"
        setup_logging(Settings(log_file=log_file, log_level="WARNING"))

        logger.debug("quiet")
        logger.warning("loud")
        logger.remove()

        text = log_file.read_text()
        assert "quiet" not in text
        assert "loud" in text
