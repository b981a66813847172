"""Shared fixtures for the test-suite."""

import io

import pytest
from rich.console import Console

from testreport_kit.reporters.writer import ConsoleWriter
from testreport_kit.testing import RecordingSink


@pytest.fixture
def sink() -> RecordingSink:
    """Create a recording sink."""
    return RecordingSink()


@pytest.fixture
def buffer() -> io.StringIO:
    """In-memory stream for a rich console."""
    return io.StringIO()


@pytest.fixture
def console_writer(buffer: io.StringIO) -> ConsoleWriter:
    """Create a ConsoleWriter over a plain, non-terminal rich console."""
    return ConsoleWriter(Console(file=buffer, width=100, color_system=None))
