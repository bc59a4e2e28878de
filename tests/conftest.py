"""
Shared test fixtures for shellarg tests.
"""

import json

import pytest
import structlog

from shellarg.core.config import Config, configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave logging unconfigured before and after every test."""
    configure_logging(Config())
    yield
    configure_logging(Config())
    structlog.reset_defaults()


@pytest.fixture
def log_file(tmp_path):
    """Configure JSON logging into a temp file; returns a reader for its entries."""
    path = tmp_path / "logs" / "shellarg.log"

    def _configure(log_full: bool = False):
        configure_logging(Config(log=path, log_full=log_full))

        def _read() -> list[dict]:
            if not path.exists():
                return []
            return [json.loads(line) for line in path.read_text().splitlines()]

        return _read

    return _configure
