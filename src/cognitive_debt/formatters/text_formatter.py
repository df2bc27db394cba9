"""Rich terminal formatter for Cognitive Debt."""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..analysis import collect_top_issues, summarize
from ..config import DEFAULT_CONFIG, ScoringConfig
from ..diff import DEGRADED, IMPROVED, DiffResult
from ..models import AnalysisResult, ImpactReport, MetricSet
from ..scoring import EXCELLENT, FAIR, GOOD, POOR
from .base import BaseFormatter

MAX_ISSUES_SHOWN = 5
MAX_DIFF_FILES_SHOWN = 10
# Naming has no configurable threshold; its penalty is proportional
MAX_UNCLEAR_PERCENT = 10

_GRADE_STYLES = {
    EXCELLENT: "bold green",
    GOOD: "bold blue",
    FAIR: "bold yellow",
    POOR: "bold red",
}

_RISK_STYLES = {
    "Critical": "bold red",
    "High": "red",
    "Medium": "yellow",
    "Low": "green",
}

_DIFF_ROWS = [
    ("score", "Score points"),
    ("function_length", "Function length"),
    ("nesting_depth", "Nesting depth"),
    ("parameter_count", "Parameters"),
    ("dependencies", "Imports"),
    ("loc", "Lines of code"),
]


def _grade_markup(text: str, grade: str) -> str:
    style = _GRADE_STYLES.get(grade, "white")
    return f"[{style}]{text}[/{style}]"


def _check(ok: bool, label: str) -> str:
    return f"[green]✓ {label}[/green]" if ok else f"[yellow]⚠ {label}[/yellow]"


def _signed(value: float) -> str:
    if isinstance(value, float) and not value.is_integer():
        return f"{value:+.1f}"
    return f"{int(value):+d}"


def _plain(value: float) -> str:
    if isinstance(value, float) and not value.is_integer():
        return f"{value:.1f}"
    return str(int(value))


class TextFormatter(BaseFormatter):
    """Human-readable report with per-metric checks and top issues."""

    def __init__(self, console: Optional[Console] = None, config: ScoringConfig = DEFAULT_CONFIG):
        self.console = console or Console(highlight=False)
        self.config = config

    # -- analysis --

    def render_analysis(self, results: List[AnalysisResult]) -> None:
        for result in results:
            if result.success:
                self._print_file_report(result)
            else:
                self.console.print(
                    f"[red]Error analyzing {escape(result.file_path)}:[/red] {escape(result.error or '')}"
                )

        if len(results) > 1:
            self._print_summary(results)

    def _print_file_report(self, result: AnalysisResult) -> None:
        score_data = result.score_data
        metrics = result.metrics

        header = (
            f"[dim]File:[/dim] {escape(result.file_path)}\n"
            f"[bold]Overall Score:[/bold] "
            f"{_grade_markup(f'{score_data.score}/100', score_data.grade)} "
            f"({_grade_markup(score_data.grade, score_data.grade)})"
        )
        self.console.print()
        self.console.print(
            Panel(header, title="[bold cyan]Cognitive Debt Analysis Report[/bold cyan]", expand=False)
        )
        self.console.print()
        self.console.print("[bold underline]Metrics Summary:[/bold underline]")
        self.console.print()
        self._print_metrics(metrics)

        issues = collect_top_issues(metrics)
        if issues:
            self.console.print("[bold underline]Top Issues:[/bold underline]")
            self.console.print()
            for index, issue in enumerate(issues[:MAX_ISSUES_SHOWN], start=1):
                self.console.print(
                    f"  [red]{index}. {escape(issue.description)} (line {issue.line})[/red]"
                )
            self.console.print()

    def _print_metrics(self, metrics: MetricSet) -> None:
        t = self.config.thresholds
        fl = metrics.function_length
        nd = metrics.nesting_depth
        pc = metrics.parameter_count
        nc = metrics.naming_clarity
        dep = metrics.dependencies

        self.console.print("  " + _check(fl.average_length <= t.function_length, "Function Length:"))
        self.console.print(f"    Average: {fl.average_length} lines")
        self.console.print(f"    Maximum: {fl.max_length} lines")
        if fl.long_functions:
            self.console.print(
                f"    [yellow]⚠ {len(fl.long_functions)} function(s) exceed {t.function_length} lines[/yellow]"
            )
        self.console.print()

        self.console.print("  " + _check(nd.max_depth <= t.nesting_depth, "Nesting Depth:"))
        self.console.print(f"    Average: {nd.average_depth} levels")
        self.console.print(f"    Maximum: {nd.max_depth} levels")
        if nd.deeply_nested_functions:
            self.console.print(
                f"    [yellow]⚠ {len(nd.deeply_nested_functions)} function(s) exceed {t.nesting_depth} levels[/yellow]"
            )
        self.console.print()

        self.console.print("  " + _check(pc.average_params <= t.parameter_count, "Parameter Count:"))
        self.console.print(f"    Average: {pc.average_params} parameters")
        self.console.print(f"    Maximum: {pc.max_params} parameters")
        if pc.functions_with_too_many_params:
            self.console.print(
                f"    [yellow]⚠ {len(pc.functions_with_too_many_params)} function(s) exceed {t.parameter_count} parameters[/yellow]"
            )
        self.console.print()

        self.console.print("  " + _check(nc.unclear_percent <= MAX_UNCLEAR_PERCENT, "Naming Clarity:"))
        self.console.print(f"    Unclear names: {nc.unclear_percent}%")
        self.console.print(f"    Total identifiers: {nc.total_identifiers}")
        self.console.print()

        self.console.print("  " + _check(dep.local_imports <= t.max_local_imports, "Dependencies:"))
        self.console.print(f"    Local imports: {dep.local_imports}")
        self.console.print(f"    External imports: {dep.external_imports}")
        if dep.high_coupling:
            self.console.print(
                f"    [yellow]⚠ High coupling detected (>{t.max_local_imports} local imports)[/yellow]"
            )
        self.console.print()

    def _print_summary(self, results: List[AnalysisResult]) -> None:
        summary = summarize(results)
        text = (
            f"Files analyzed: [bold]{summary.files_analyzed}[/bold]\n"
            f"Average score: [bold]{summary.average_score}/100[/bold]\n"
            f"Files with poor scores: [red]{len(summary.poor_files)}[/red]"
        )
        if summary.failed_files:
            text += f"\nFiles that failed: [red]{summary.failed_files}[/red]"
        self.console.print(Panel(text, title="[bold cyan]Summary[/bold cyan]", expand=False))

    # -- impact --

    def render_impact(self, report: ImpactReport) -> None:
        risk = report.risk
        style = _RISK_STYLES.get(risk.level, "white")
        grade = report.analysis.score_data.grade if report.analysis.score_data else ""

        header = (
            f"[dim]File:[/dim] {escape(report.relative_path)}\n"
            f"[bold]Score:[/bold] {_grade_markup(f'{report.analysis.score}/100', grade)}   "
            f"[bold]Fan-in:[/bold] {report.fan_in}   "
            f"[bold]Risk:[/bold] [{style}]{risk.level}[/{style}]"
        )
        self.console.print(Panel(header, title="[bold cyan]Change Impact[/bold cyan]", expand=False))
        self.console.print()

        self.console.print("[bold]Why:[/bold]")
        for reason in risk.reasons:
            self.console.print(f"  [red]![/red] {escape(reason)}")
        self.console.print()

        self.console.print("[bold]Likely impacts:[/bold]")
        for impact in risk.likely_impacts:
            self.console.print(f"  [yellow]-[/yellow] {escape(impact)}")
        self.console.print()

        if report.dependents:
            self.console.print(f"[bold]Dependents ({report.fan_in}):[/bold]")
            for dependent in report.dependents:
                self.console.print(f"  [dim]{escape(dependent)}[/dim]")
            self.console.print()

        self.console.print(f"[bold]Suggestion:[/bold] [green]->[/green] {escape(risk.suggestion)}")

    # -- diff --

    def render_diff(self, diff: DiffResult) -> None:
        table = Table(title="Cognitive Debt Diff", expand=False)
        table.add_column("Metric", style="cyan")
        table.add_column("Before", justify="right")
        table.add_column("After", justify="right")
        table.add_column("Delta", justify="right")

        for key, label in _DIFF_ROWS:
            totals = diff.metrics.get(key)
            if totals is None:
                continue
            table.add_row(label, _plain(totals.before), _plain(totals.after), _signed(totals.delta))
        self.console.print(table)
        self.console.print()

        self.console.print(
            f"Files: [green]{diff.new_files} new[/green], "
            f"[red]{diff.deleted_files} deleted[/red], "
            f"[yellow]{diff.modified_files} modified[/yellow]"
        )

        if diff.files:
            self.console.print()
            files_table = Table(title="File Changes (most degraded first)", expand=False)
            files_table.add_column("File", style="yellow")
            files_table.add_column("Status")
            files_table.add_column("Delta", justify="right")
            files_table.add_column("Change", justify="right")
            files_table.add_column("Reasons")
            for entry in diff.files[:MAX_DIFF_FILES_SHOWN]:
                files_table.add_row(
                    escape(entry.file),
                    entry.status,
                    f"{entry.delta_score:+d}",
                    f"{entry.change_percent:+d}%",
                    escape("; ".join(entry.reasons)),
                )
            self.console.print(files_table)
            if len(diff.files) > MAX_DIFF_FILES_SHOWN:
                self.console.print(f"[dim]... and {len(diff.files) - MAX_DIFF_FILES_SHOWN} more[/dim]")

        self.console.print()
        if diff.status == DEGRADED:
            status = "[bold red]DEBT INCREASED[/bold red]"
        elif diff.status == IMPROVED:
            status = "[bold green]DEBT DECREASED[/bold green]"
        else:
            status = "[dim]No significant change[/dim]"
        self.console.print(f"{status} (score points {diff.overall_change_percent:+d}%)")
