"""Tests for output sinks."""

import io

from rich.console import Console

from testreport_kit.config import ReportConfig, StyleConfig
from testreport_kit.reporters.writer import ColorStyle, ConsoleWriter
from testreport_kit.testing import RecordingSink


def test_write_line_and_blank_line(console_writer: ConsoleWriter, buffer: io.StringIO) -> None:
    """Lines end with a newline; a bare call writes an empty line."""
    console_writer.write_line(ColorStyle.SECTION_HEADER, "Header")
    console_writer.write_line()

    assert buffer.getvalue() == "Header\n\n"


def test_label_writes(console_writer: ConsoleWriter, buffer: io.StringIO) -> None:
    """Labels and values build up composite lines."""
    console_writer.write_label("   Tests run: ", 10)
    console_writer.write_label_line(", Passed: ", 8)

    assert buffer.getvalue() == "   Tests run: 10, Passed: 8\n"


def test_text_is_not_markup(console_writer: ConsoleWriter, buffer: io.StringIO) -> None:
    """Square brackets in test names print literally."""
    console_writer.write_line(ColorStyle.FAILURE, "1) Failed : Tests.Case([bold]x[/bold])")

    assert buffer.getvalue() == "1) Failed : Tests.Case([bold]x[/bold])\n"


def test_long_lines_are_not_wrapped(console_writer: ConsoleWriter, buffer: io.StringIO) -> None:
    """Long stack traces stay on one line."""
    text = "at " + "Namespace." * 30 + "Method()"

    console_writer.write_line(ColorStyle.FAILURE, text)

    assert buffer.getvalue() == text + "\n"


def test_styles_are_applied_on_terminals() -> None:
    """A colour terminal receives escape codes for styled text."""
    buffer = io.StringIO()
    writer = ConsoleWriter(
        Console(file=buffer, force_terminal=True, color_system="standard", width=100),
        StyleConfig(failure="red"),
    )

    writer.write_line(ColorStyle.FAILURE, "boom")

    assert "\x1b[" in buffer.getvalue()
    assert "boom" in buffer.getvalue()


def test_color_can_be_disabled() -> None:
    """Without colour no escape codes are written, even on a terminal."""
    buffer = io.StringIO()
    writer = ConsoleWriter(
        Console(file=buffer, force_terminal=True, color_system="standard", width=100),
        color=False,
    )

    writer.write_line(ColorStyle.FAILURE, "boom")

    assert buffer.getvalue() == "boom\n"


def test_from_config() -> None:
    """Console settings come from the report config."""
    writer = ConsoleWriter.from_config(ReportConfig(width=42, color=False))

    assert writer.console.width == 42
    assert writer.console.no_color


def test_label_styles(sink: RecordingSink) -> None:
    """Labels use the label style; values use the given style or the value style."""
    sink.write_label("Overall: ", "Failed", ColorStyle.FAILURE)
    sink.write_label("Run: ", 3)

    assert sink.writes == [
        ("Overall: ", ColorStyle.LABEL),
        ("Failed", ColorStyle.FAILURE),
        ("Run: ", ColorStyle.LABEL),
        ("3", ColorStyle.VALUE),
    ]
