"""Styled line output used by the reporters.

Reporters only pick a ``ColorStyle``; how a style looks is up to the sink.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional

from rich.console import Console

from ..config import ReportConfig, StyleConfig

class ColorStyle(Enum):
    PASS = "pass"
    FAILURE = "failure"
    WARNING = "warning"
    SECTION_HEADER = "section_header"
    OUTPUT = "output"
    LABEL = "label"
    VALUE = "value"

class OutputSink(ABC):
    @abstractmethod
    def write(self, text: str, style: ColorStyle = ColorStyle.OUTPUT) -> None: ...

    def write_line(self, style: Optional[ColorStyle] = None, text: str = "") -> None:
        if text:
            self.write(text, style or ColorStyle.OUTPUT)
        self.write("\n")

    def write_label(self, label: str, value: Any, style: Optional[ColorStyle] = None) -> None:
        self.write(label, ColorStyle.LABEL)
        self.write(str(value), style or ColorStyle.VALUE)

    def write_label_line(self, label: str, value: Any, style: Optional[ColorStyle] = None) -> None:
        self.write_label(label, value, style)
        self.write_line()

class ConsoleWriter(OutputSink):
    def __init__(self, console: Optional[Console] = None, styles: Optional[StyleConfig] = None, color: bool = True):
        self.console = console or Console(highlight=False)
        styles = styles or StyleConfig()
        self._styles: Dict[ColorStyle, str] = {}
        if color:
            self._styles = {
                ColorStyle.PASS: styles.pass_,
                ColorStyle.FAILURE: styles.failure,
                ColorStyle.WARNING: styles.warning,
                ColorStyle.SECTION_HEADER: styles.section_header,
                ColorStyle.OUTPUT: styles.output,
                ColorStyle.LABEL: styles.label,
                ColorStyle.VALUE: styles.value,
            }

    @classmethod
    def from_config(cls, cfg: ReportConfig) -> "ConsoleWriter":
        console = Console(width=cfg.width, no_color=not cfg.color, highlight=False)
        return cls(console, cfg.styles, cfg.color)

    def write(self, text: str, style: ColorStyle = ColorStyle.OUTPUT) -> None:
        # test names routinely contain [brackets]; never treat them as markup
        self.console.print(text, style=self._styles.get(style), end="",
                           markup=False, highlight=False, emoji=False, soft_wrap=True)
