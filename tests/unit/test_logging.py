"""Tests for the logging module."""

import gzip
import os
import subprocess
import sys
from pathlib import Path

import pytest
from loguru import logger

from hyperpokemon.logger import configure_logging, disable_logging, get_log_dir, get_logger
from hyperpokemon.themes import load_themes

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def _read_logs(log_dir: Path) -> str:
    """Concatenate every log file in a directory, compressed or not."""
    chunks: list[str] = []
    for path in sorted(log_dir.iterdir()):
        if path.suffix == ".gz":
            with gzip.open(path, "rt", encoding="utf-8") as handle:
                chunks.append(handle.read())
        else:
            chunks.append(path.read_text(encoding="utf-8"))
    return "".join(chunks)


def _run_python(script: str) -> subprocess.CompletedProcess[str]:
    """Run a script in a fresh interpreter from the project root."""
    return subprocess.run(
        [sys.executable, "-c", script],
        capture_output=True,
        text=True,
        check=False,
        cwd=PROJECT_ROOT,
        env=os.environ.copy(),
    )


@pytest.fixture
def host_messages():
    """Register a host sink for the duration of a test."""
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def package_logging():
    """Make sure the package file sink is removed after a test."""
    yield
    disable_logging()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger_instance(self) -> None:
        logger_instance = get_logger("test_module")
        assert logger_instance is not None

    def test_logger_has_bind_context(self) -> None:
        logger_instance = get_logger("test_module")
        assert hasattr(logger_instance, "info")
        assert hasattr(logger_instance, "debug")
        assert hasattr(logger_instance, "warning")
        assert hasattr(logger_instance, "error")


class TestHostLogging:
    """Importing the package must leave the host's logging alone."""

    def test_host_sink_survives_fresh_import(self) -> None:
        script = (
            "from loguru import logger\n"
            "messages = []\n"
            "logger.add(messages.append, format='{message}')\n"
            "import hyperpokemon\n"
            "logger.info('host message')\n"
            "assert any('host message' in m for m in messages), messages\n"
        )
        result = _run_python(script)
        assert result.returncode == 0, result.stderr

    def test_host_sink_receives_host_messages(self, host_messages: list[str]) -> None:
        import hyperpokemon  # noqa: F401

        logger.info("host message")
        assert any("host message" in message for message in host_messages)

    def test_package_messages_silent_by_default(self, host_messages: list[str], data_dir: Path) -> None:
        load_themes(data_dir)
        assert not any("Loaded" in message for message in host_messages)

    def test_import_creates_no_log_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("HYPERPOKEMON_LOG_DIR", str(log_dir))
        result = _run_python("import hyperpokemon\n")
        assert result.returncode == 0, result.stderr
        assert not log_dir.exists()


class TestConfigureLogging:
    """Tests for the opt-in file sink."""

    def test_log_dir_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HYPERPOKEMON_LOG_DIR", str(tmp_path / "env-logs"))
        assert get_log_dir() == (tmp_path / "env-logs").resolve()

    def test_default_log_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HYPERPOKEMON_LOG_DIR", raising=False)
        assert get_log_dir() == Path.home() / ".local" / "share" / "hyperpokemon" / "logs"

    def test_creates_directory(self, tmp_path: Path, package_logging: None) -> None:
        log_dir = tmp_path / "logs"
        configure_logging(log_dir)
        assert log_dir.is_dir()

    def test_repeated_calls_reuse_sink(self, tmp_path: Path, package_logging: None) -> None:
        assert configure_logging(tmp_path / "logs") == configure_logging(tmp_path / "other")

    def test_file_holds_only_package_messages(
        self, tmp_path: Path, data_dir: Path, package_logging: None
    ) -> None:
        log_dir = tmp_path / "logs"
        configure_logging(log_dir)
        load_themes(data_dir)
        logger.info("message from the host application")
        disable_logging()

        contents = _read_logs(log_dir)
        assert "Loaded" in contents
        assert "hyperpokemon.themes" in contents
        assert "message from the host application" not in contents

    def test_disable_silences_package_again(
        self, tmp_path: Path, data_dir: Path, host_messages: list[str], package_logging: None
    ) -> None:
        configure_logging(tmp_path / "logs")
        disable_logging()
        load_themes(data_dir)
        assert not any("Loaded" in message for message in host_messages)
