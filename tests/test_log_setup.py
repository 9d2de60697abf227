"""Tests for structlog configuration (cli/log_setup.py)."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from pihole_domains.cli.log_setup import PACKAGE_LOGGER, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package = logging.getLogger(PACKAGE_LOGGER)
    package_level = package.level
    httpx_level = logging.getLogger("httpx").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package.setLevel(package_level)
    logging.getLogger("httpx").setLevel(httpx_level)


class TestConfigureLogging:
    def test_debug_enables_package_debug(self) -> None:
        configure_logging(debug=True)
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_default_is_warning(self) -> None:
        configure_logging()
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_json_lines_on_stderr(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(debug=True, log_json=True)

        logging.getLogger("pihole_domains.infra.http_transport").debug(
            "logged in (session valid for %ss)", 300,
        )

        captured = capfd.readouterr()
        assert captured.out == ""
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "logged in (session valid for 300s)"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "pihole_domains.infra.http_transport"
        assert "timestamp" in parsed

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("pihole_domains.core.session").debug("noise")
        logging.getLogger("httpcore").debug("wire noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(debug=True)
        configure_logging(debug=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1
