"""
Console output for coverage reports.

Renders reports with rich so a failing run can be read at a glance in a
terminal or in captured pytest output.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..verification.result import CheckStatus, CoverageReport

STATUS_STYLES = {
    CheckStatus.PASSED: "#00d26a",
    CheckStatus.FAILED: "#ff6b6b",
    CheckStatus.ERROR: "#ffa500",
    CheckStatus.SKIPPED: "#6c757d",
}

EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_INFO = "ℹ️"

_console: Console | None = None


def get_console() -> Console:
    """Shared console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def print_success(message: str, console: Console | None = None) -> None:
    """Print success message with emoji."""
    (console or get_console()).print(
        f"{EMOJI_SUCCESS} {message}", style=STATUS_STYLES[CheckStatus.PASSED]
    )


def print_error(message: str, console: Console | None = None) -> None:
    """Print error message with emoji."""
    (console or get_console()).print(
        f"{EMOJI_ERROR} {message}", style=STATUS_STYLES[CheckStatus.FAILED]
    )


def print_warning(message: str, console: Console | None = None) -> None:
    """Print warning message with emoji."""
    (console or get_console()).print(
        f"{EMOJI_WARNING} {message}", style=STATUS_STYLES[CheckStatus.ERROR]
    )


def print_info(message: str, console: Console | None = None) -> None:
    """Print info message with emoji."""
    (console or get_console()).print(f"{EMOJI_INFO} {message}")


def _status_text(status: CheckStatus) -> Text:
    return Text(status.value.upper(), style=f"bold {STATUS_STYLES[status]}")


def build_field_table(report: CoverageReport) -> Table:
    """Table with one row per field."""
    table = Table(title=f"Field coverage: {report.target_name}", expand=False)
    table.add_column("Field", style="bold")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Steps", justify="right")
    table.add_column("Details")

    for result in report.field_results:
        declared = result.declared_type
        type_name = getattr(declared, "__name__", None) or repr(declared)
        table.add_row(
            result.field_name,
            "" if declared is None else type_name,
            _status_text(result.status),
            f"{result.steps_completed}/9",
            result.get_failure_summary(),
        )
    return table


def build_check_table(report: CoverageReport) -> Table:
    """Table with one row per aggregate check."""
    table = Table(title="Aggregate checks", expand=False)
    table.add_column("Check", style="bold")
    table.add_column("Status")
    table.add_column("Details")
    for check in report.checks:
        table.add_row(check.name, _status_text(check.status), check.message)
    return table


def render_report(report: CoverageReport, console: Console | None = None) -> None:
    """Print a coverage report."""
    console = console or get_console()
    console.print(build_field_table(report))
    console.print(build_check_table(report))
    if report.passed:
        print_success(f"{report.target_name}: every field is covered", console)
    else:
        print_error(
            f"{report.target_name}: {len(report.failed_fields())} field(s) and "
            f"{len(report.failed_checks())} aggregate check(s) failed",
            console,
        )
