"""Leaquor CLI — a single Typer command that scans a directory or a repository."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from leaquor import __version__

app = typer.Typer(
    name="leaquor",
    help="Scan a directory or repository for leaked credentials.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console(stderr=True)
logger = logging.getLogger("leaquor.cli")


def _split_ignore_list(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _version_callback(value: bool) -> None:
    if value:
        print(f"leaquor {__version__}")
        raise typer.Exit()


def _run_scan(root: Path, scan_config, workers: int):
    from leaquor.log import ScanLogger
    from leaquor.scanner.engine import ScanError, scan as run_scan

    logger.info("Scanning %s for potential secrets...", root)
    try:
        return run_scan(root, scan_config, workers=workers, observer=ScanLogger())
    except ScanError as exc:
        console.print(f"[bold red]Scan error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


def _emit_json(report_text: str, output_file: Optional[str]) -> None:
    """Write JSON to *output_file*, falling back to stdout if that fails."""
    from leaquor.output.writer import OutputWriteError, write_report

    if not output_file:
        print(report_text)
        return
    try:
        write_report(report_text, output_file)
    except OutputWriteError as exc:
        logger.error("%s", exc)
        console.print("[yellow]Fallback: printing JSON to stdout[/yellow]")
        print(report_text)
        return
    console.print(f"[dim]JSON results written to {escape(output_file)}[/dim]")


@app.command(no_args_is_help=True)
def main(
    dir: Optional[str] = typer.Option(None, "--dir", help="Scan a directory on the local file system"),
    repo: Optional[str] = typer.Option(None, "--repo", help="Clone and scan a git repository URL"),
    patterns: Optional[str] = typer.Option(None, "--patterns", help="YAML file with additional patterns"),
    ignore_files: Optional[str] = typer.Option(
        None, "--ignore-files", help="Comma-separated file name fragments to ignore"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    output_file: Optional[str] = typer.Option(None, "--output-file", help="Write JSON results to FILE"),
    entropy_threshold: Optional[float] = typer.Option(
        None, "--entropy-threshold", help="Minimum bits/char for generic high-entropy matches"
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write log records to FILE"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .leaquor.toml"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Files scanned in parallel"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """Scan a directory (--dir) or a repository (--repo) for potential secrets."""
    from leaquor.config.loader import ConfigError, build_scan_config, load_settings
    from leaquor.git.adapter import RepositoryFetchError, cloned_repository
    from leaquor.log import configure_logging, log_pattern_build
    from leaquor.output import json_report, terminal
    from leaquor.patterns.registry import PatternRegistry

    if (dir is None) == (repo is None):
        console.print("[bold red]Error:[/bold red] exactly one of --dir or --repo must be provided.")
        raise typer.Exit(code=2)

    try:
        configure_logging(log_file, verbose=verbose)
    except OSError as exc:
        console.print(f"[bold red]Cannot open log file:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- Load settings ---
    settings_root = Path(dir) if dir is not None else Path.cwd()
    try:
        settings = load_settings(settings_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if patterns:
        settings.scan.patterns_file = patterns
    if entropy_threshold is not None:
        settings.scan.entropy_threshold = entropy_threshold
    if workers is not None:
        settings.scan.workers = workers
    settings.scan.ignore_files.extend(_split_ignore_list(ignore_files))
    if json_output:
        settings.output.json = True
    if output_file:
        settings.output.output_file = output_file

    # --- Build patterns ---
    build = PatternRegistry().build(settings.scan.patterns_file)
    log_pattern_build(build, settings.scan.patterns_file)

    scan_config = build_scan_config(
        build.patterns,
        ignore_files=settings.scan.ignore_files,
        entropy_threshold=settings.scan.entropy_threshold,
        extra_extensions=settings.scan.extra_extensions,
        extra_skip_dirs=settings.scan.extra_skip_dirs,
    )

    # --- Run scan ---
    if repo is not None:
        console.print(f"[dim]Cloning {escape(repo)}...[/dim]")
        try:
            with cloned_repository(repo) as clone_root:
                result = _run_scan(clone_root, scan_config, settings.scan.workers)
        except RepositoryFetchError as exc:
            console.print(f"[bold red]Failed to clone repository:[/bold red] {escape(str(exc))}")
            raise typer.Exit(code=2) from exc
    else:
        result = _run_scan(settings_root, scan_config, settings.scan.workers)

    if verbose:
        console.print(f"[dim]Scan duration: {result.scan_duration_ms:.0f}ms[/dim]")

    # --- Output ---
    if settings.output.json:
        _emit_json(json_report.render(result), settings.output.output_file)
    else:
        terminal.render(result, console=console)
        if settings.output.output_file:
            _emit_json(json_report.render(result), settings.output.output_file)

    if result.findings:
        raise typer.Exit(code=1)
