# Lightweight package init: the CLI pulls in typer, library users shouldn't have to.
__all__ = ["ResultNode", "ResultReporter", "ResultSummary", "ConsoleWriter"]

def __getattr__(name):
    if name == "ResultNode":
        from .results.model import ResultNode as _ResultNode
        return _ResultNode
    if name == "ResultReporter":
        from .reporters.console import ResultReporter as _ResultReporter
        return _ResultReporter
    if name == "ResultSummary":
        from .summary import ResultSummary as _ResultSummary
        return _ResultSummary
    if name == "ConsoleWriter":
        from .reporters.writer import ConsoleWriter as _ConsoleWriter
        return _ConsoleWriter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
