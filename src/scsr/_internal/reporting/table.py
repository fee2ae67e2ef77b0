"""Render size reports as a colored text table (internal)."""

from typing import List, Sequence

from scsr.codes import SizeStatus
from scsr.kernel.report import ContractReport, SizeReport


class Colors:
    RED = "\033[31m"
    GREEN = "\033[32m"
    MAGENTA = "\033[35m"
    ENDC = "\033[0m"


STATUS_COLORS = {
    SizeStatus.OVER_LIMIT: Colors.RED,
    SizeStatus.NEAR_LIMIT: Colors.MAGENTA,
    SizeStatus.OK: Colors.GREEN,
}

# (header, right-aligned)
COLUMNS = (
    ("sourcePath", False),
    ("bytecodeLength", True),
    ("deployedBytecodeLength", True),
    ("capacity", True),
    ("message", False),
)


def format_number(value: int) -> str:
    """Format an integer with comma thousands separators (24576 -> '24,576')."""
    return f"{value:,}"


def format_percent(value: int) -> str:
    return f"{value}%"


def colorize(text: str, color: str, enabled: bool = True) -> str:
    if not enabled or not color:
        return text
    return f"{color}{text}{Colors.ENDC}"


def row_cells(row: ContractReport) -> List[str]:
    """Display strings for one row, in column order."""
    return [
        row.source_path,
        format_number(row.bytecode_length),
        format_number(row.deployed_bytecode_length),
        format_percent(row.capacity_percent),
        row.message,
    ]


def _border(left: str, mid: str, right: str, widths: Sequence[int]) -> str:
    return left + mid.join("─" * (w + 2) for w in widths) + right


def render_table(rows: Sequence[ContractReport], color: bool = True) -> str:
    """Render rows as a boxed table, each row colored by its status.

    Returns an empty string for no rows.
    """
    if not rows:
        return ""

    cells = [row_cells(row) for row in rows]
    widths = [len(header) for header, _ in COLUMNS]
    for line in cells:
        for i, cell in enumerate(line):
            widths[i] = max(widths[i], len(cell))

    def _line(values: Sequence[str], row_color: str) -> str:
        parts = []
        for (_, right), width, value in zip(COLUMNS, widths, values):
            padded = value.rjust(width) if right else value.ljust(width)
            parts.append(" " + colorize(padded, row_color, color) + " ")
        return "│" + "│".join(parts) + "│"

    lines = [
        _border("┌", "┬", "┐", widths),
        _line([header for header, _ in COLUMNS], ""),
        _border("├", "┼", "┤", widths),
    ]
    for row, values in zip(rows, cells):
        lines.append(_line(values, STATUS_COLORS[row.status]))
    lines.append(_border("└", "┴", "┘", widths))
    return "\n".join(lines)


def render_report(report: SizeReport, color: bool = True) -> str:
    """Banner line followed by the table, or an empty string when no rows."""
    if not report.rows:
        return ""
    return report.config.banner + "\n" + render_table(report.rows, color=color)
