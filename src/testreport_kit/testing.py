"""Helpers for testing code that writes reports."""
from typing import List, Tuple

from .reporters.writer import ColorStyle, OutputSink

class RecordingSink(OutputSink):
    """Sink that keeps every write along with its style."""

    def __init__(self) -> None:
        self.writes: List[Tuple[str, ColorStyle]] = []

    def write(self, text: str, style: ColorStyle = ColorStyle.OUTPUT) -> None:
        self.writes.append((text, style))

    @property
    def text(self) -> str:
        return "".join(text for text, _ in self.writes)

    @property
    def lines(self) -> List[str]:
        return self.text.split("\n")

    def style_of(self, text: str) -> ColorStyle:
        """Style of the first write with exactly this text."""
        for written, style in self.writes:
            if written == text:
                return style
        raise AssertionError(f"{text!r} was never written")
