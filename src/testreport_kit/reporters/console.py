"""Console report for a finished test run.

Three sections, in order: the summary, the numbered errors and failures, and
the numbered tests that were not run. Each numbered section restarts at 1.
"""
import logging
from datetime import datetime, timezone

from ..results.model import FailureSite, ResolvedStatus, ResultNode, TestStatus, resolve_status, status_name
from ..summary import ResultSummary
from .writer import ColorStyle, OutputSink

log = logging.getLogger(__name__)

EOL_CHARS = "\r\n"

def format_timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%SZ")

def display_status(result: ResultNode) -> str:
    # an unlabelled SetUp or TearDown failure reads as an error
    if result.site in (FailureSite.SETUP, FailureSite.TEARDOWN) and resolve_status(result) == ResolvedStatus.ERROR:
        return ResolvedStatus.ERROR.value
    return status_name(result.status)

def overall_style(status) -> ColorStyle:
    if status == TestStatus.PASSED:
        return ColorStyle.PASS
    if status == TestStatus.FAILED:
        return ColorStyle.FAILURE
    if status == TestStatus.SKIPPED:
        return ColorStyle.WARNING
    return ColorStyle.OUTPUT

class ResultReporter:
    def __init__(self, result: ResultNode, writer: OutputSink, stop_on_first_error: bool = False):
        self.result = result
        self.writer = writer
        self.stop_on_first_error = stop_on_first_error
        self.overall_result = status_name(result.status)
        if self.overall_result == TestStatus.SKIPPED.value:
            self.overall_result = "Warning"
        self.summary = ResultSummary.from_result(result)
        self._report_index = 0

    def report_results(self) -> None:
        w, s = self.writer, self.summary
        if s.test_count == 0:
            w.write_line(ColorStyle.WARNING, "Warning: No tests found")
        w.write_line()

        if self.stop_on_first_error and s.failure_count + s.error_count > 0:
            w.write_line(ColorStyle.FAILURE, "Execution terminated after first error")
            w.write_line()

        self.write_summary_report()

        if self.result.status == TestStatus.FAILED:
            self.write_errors_and_failures_report()

        if s.skip_count + s.ignore_count > 0:
            self.write_not_run_report()

    def write_summary_report(self) -> None:
        w, s = self.writer, self.summary
        w.write_line(ColorStyle.SECTION_HEADER, "Test Run Summary")
        w.write_label_line("   Overall result: ", self.overall_result, overall_style(self.result.status))

        w.write_label("   Tests run: ", s.run_count)
        w.write_label(", Passed: ", s.pass_count)
        w.write_label(", Errors: ", s.error_count)
        w.write_label(", Failures: ", s.failure_count)
        w.write_label_line(", Inconclusive: ", s.inconclusive_count)

        w.write_label("     Not run: ", s.not_run_count)
        w.write_label(", Invalid: ", s.invalid_count)
        w.write_label(", Ignored: ", s.ignore_count)
        w.write_label_line(", Skipped: ", s.skip_count)

        w.write_label_line("  Start time: ", format_timestamp(s.start_time))
        w.write_label_line("    End time: ", format_timestamp(s.end_time))
        w.write_label_line("    Duration: ", f"{s.duration:.3f} seconds")
        w.write_line()

    def write_errors_and_failures_report(self) -> None:
        self._report_index = 0
        self.writer.write_line(ColorStyle.SECTION_HEADER, "Errors and Failures")
        self._write_errors_and_failures(self.result)
        self.writer.write_line()
        log.debug("Errors and failures section: %d entries", self._report_index)

    def _write_errors_and_failures(self, result: ResultNode) -> None:
        if result.is_suite:
            if result.status == TestStatus.FAILED:
                site = result.site
                if result.test_type == "Theory" or site in (FailureSite.SETUP, FailureSite.TEARDOWN):
                    self.write_single_result(result, ColorStyle.FAILURE)
                # the children of a suite whose setup failed never ran
                if site == FailureSite.SETUP:
                    return
            # passing suites are still walked: failures can sit anywhere below
            for child in result.children:
                self._write_errors_and_failures(child)
        elif result.status == TestStatus.FAILED:
            self.write_single_result(result, ColorStyle.FAILURE)

    def write_not_run_report(self) -> None:
        self._report_index = 0
        self.writer.write_line(ColorStyle.SECTION_HEADER, "Tests Not Run")
        self._write_not_run_results(self.result)
        self.writer.write_line()
        log.debug("Not run section: %d entries", self._report_index)

    def _write_not_run_results(self, result: ResultNode) -> None:
        if result.has_children:
            for child in result.children:
                self._write_not_run_results(child)
        elif result.status == TestStatus.SKIPPED:
            style = ColorStyle.WARNING if resolve_status(result) == ResolvedStatus.IGNORED else ColorStyle.OUTPUT
            self.write_single_result(result, style)

    def write_single_result(self, result: ResultNode, style: ColorStyle) -> None:
        status = result.label or display_status(result)
        if status in ("Failed", "Error") and result.site in (FailureSite.SETUP, FailureSite.TEARDOWN):
            status = f"{result.site.value} {status}"

        self._report_index += 1
        self.writer.write_line()
        self.writer.write_line(style, f"{self._report_index}) {status} : {result.full_name}")

        if result.message:
            self.writer.write_line(style, result.message.rstrip(EOL_CHARS))
        if result.stack_trace:
            self.writer.write_line(style, result.stack_trace.rstrip(EOL_CHARS))
