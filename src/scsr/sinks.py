"""Output sinks for report runs.

The report builder never writes to the terminal itself. It hands errors
and the finished table to a sink, so the same pipeline can print to a
console or be inspected in memory.
"""

import sys
from typing import List, Optional, Protocol, TextIO

from scsr._internal.reporting.table import Colors, colorize, render_report
from scsr.errors import ScsrError
from scsr.kernel.report import SizeReport


class ReportSink(Protocol):
    """Destination for report output."""

    def report_error(self, error: ScsrError) -> None:
        ...

    def report_table(self, report: SizeReport) -> None:
        ...


class ConsoleSink:
    """Writes the table to stdout and errors to stderr (red when colored)."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
        color: bool = True,
    ):
        self._out = out
        self._err = err
        self.color = color

    # Looked up at write time so a redirected sys.stdout/sys.stderr is honored
    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err if self._err is not None else sys.stderr

    def report_error(self, error: ScsrError) -> None:
        print(colorize(f"Error: {error}", Colors.RED, self.color), file=self.err)

    def report_table(self, report: SizeReport) -> None:
        rendered = render_report(report, color=self.color)
        if rendered:
            print(rendered, file=self.out)


class CollectingSink:
    """Keeps everything in memory."""

    def __init__(self):
        self.errors: List[ScsrError] = []
        self.reports: List[SizeReport] = []

    def report_error(self, error: ScsrError) -> None:
        self.errors.append(error)

    def report_table(self, report: SizeReport) -> None:
        self.reports.append(report)
