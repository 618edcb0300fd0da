"""Shared pytest fixtures for cfurl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import click
import pytest
from click.testing import CliRunner

from cfurl.config.settings import CfurlSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir with no ``CFURL_*`` env vars.

    Keeps a developer's own cfurl.toml or environment out of the results.
    """
    for key in list(os.environ):
        if key.startswith("CFURL_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def launched(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace ``click.launch`` so no browser opens; collects launched URLs."""
    urls: list[str] = []

    def fake_launch(url: str, wait: bool = False, locate: bool = False) -> int:
        urls.append(url)
        return 0

    monkeypatch.setattr(click, "launch", fake_launch)
    return urls


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler swap done by configure_logging on each CLI run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    cfurl_logger = logging.getLogger("cfurl")
    cfurl_level = cfurl_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    cfurl_logger.setLevel(cfurl_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> CfurlSettings:
    """Default settings (no config file, no env overrides)."""
    return CfurlSettings.from_cli()
