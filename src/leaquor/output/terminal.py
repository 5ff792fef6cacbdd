"""Rich terminal reporter — one block per finding on stderr."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from leaquor.findings.models import Finding, ScanResult


def _print_finding(console: Console, finding: Finding) -> None:
    console.print()
    console.print(f"[dim]File:[/dim]    [magenta]{escape(finding.file_path)}[/magenta]")
    console.print(f"[dim]Line:[/dim]    [green]{finding.line}[/green]")
    console.print(f"[dim]Type:[/dim]    [cyan]{escape(finding.pattern_name)}[/cyan]")
    console.print(f"[dim]Match:[/dim]   [bold]{escape(finding.matched_text)}[/bold]")
    console.print(f"[dim]Context:[/dim] {escape(finding.context_line)}")
    console.print(Rule(style="dim"))


def render(
    result: ScanResult,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print scan results using Rich (stderr unless *console* is given)."""
    console = console or Console(stderr=True)

    if not result.findings:
        console.print()
        console.print("[bold green]No secrets found![/bold green]")
    else:
        console.print()
        console.print(f"[bold red]Found {result.total_findings} potential secrets:[/bold red]")
        console.print(Rule(style="bold"))
        for finding in result.findings:
            _print_finding(console, finding)

    if show_summary:
        _print_summary(console, result)


def _print_summary(console: Console, result: ScanResult) -> None:
    console.print()
    console.print(f"[dim]Files scanned:[/dim]  {result.scanned_files}")
    console.print(f"[dim]Findings:[/dim]       {result.total_findings}")
    console.print(f"[dim]Files affected:[/dim] {len(result.files_with_findings)}")
    console.print(f"[dim]Skipped:[/dim]        {len(result.skipped_files)}")
    console.print(f"[dim]Unreadable:[/dim]     {len(result.errors)}")
    console.print(f"[dim]Duration:[/dim]       {result.scan_duration_ms:.0f}ms")
