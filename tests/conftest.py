"""Shared fixtures for the converter tests."""

from __future__ import annotations

import io
import logging

import pytest
from rich.console import Console

from rfpower.engine import ConverterSession


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """setup_logging() binds handlers to the captured stdout; drop them after each test."""
    yield
    logger = logging.getLogger("rfpower")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def session() -> ConverterSession:
    return ConverterSession()


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=100, color_system=None)


class FakeClipboard:
    """Records what was copied; optionally fails like a missing clipboard tool."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.copied: list[str] = []

    def __call__(self, text: str) -> None:
        if self.fail:
            raise RuntimeError("no clipboard")
        self.copied.append(text)


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def broken_clipboard() -> FakeClipboard:
    return FakeClipboard(fail=True)
