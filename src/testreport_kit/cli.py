
from typing import Optional
import typer
from .config import load_config, parse_log_level, ConfigError, ReportConfig
from .logging import setup_logging
from .results.loader import load_result_tree, ResultFileError
from .reporters.console import ResultReporter
from .reporters.writer import ConsoleWriter

app = typer.Typer(add_completion=False, help="testreport - console reports for finished test runs")

@app.callback()
def main():
    pass

@app.command()
def report(
    results: str = typer.Argument(..., help="Result tree file (.json, .yaml or .yml)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    stop_on_first_error: bool = typer.Option(False, "--stop-on-first-error", help="The run was stopped after the first error"),
    no_color: bool = typer.Option(False, "--no-color", help="Plain output without styles"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level for diagnostics on stderr"),
):
    try:
        cfg: ReportConfig = load_config(config)
        level = parse_log_level(log_level) if log_level else cfg.log_level
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)
    log = setup_logging(level)

    updates = {}
    if stop_on_first_error: updates["stop_on_first_error"] = True
    if no_color: updates["color"] = False
    cfg = cfg.model_copy(update=updates)

    try:
        root = load_result_tree(results)
    except ResultFileError as e:
        log.debug("Failed to load results", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    reporter = ResultReporter(root, ConsoleWriter.from_config(cfg), cfg.stop_on_first_error)
    reporter.report_results()
    s = reporter.summary
    raise typer.Exit(code=min(s.failure_count + s.error_count + s.invalid_count, 255))
