"""Click CLI for linecleaner: clean marked lines, ranges and links from notes."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from linecleaner.config.hierarchy import load_config_hierarchy
from linecleaner.errors.exceptions import ConfigError, DocumentError
from linecleaner.pipeline.engine import STAGE_NAMES, STAGE_ORDER

if TYPE_CHECKING:
    from linecleaner.config.schema import CleanerConfig

console = Console()
error_console = Console(stderr=True)

_DEFAULT_CONFIG_NAME = "linecleaner.yaml"


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level."""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _load_config(config_path: str | None, **overrides: Any) -> CleanerConfig:
    try:
        return load_config_hierarchy(config_path, **overrides)
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="linecleaner")
def cli() -> None:
    """linecleaner: remove marked lines, ranges, comments and links from notes."""


@cli.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True, allow_dash=True))
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Settings file (skips global/project lookup).",
)
@click.option("--dry-run", is_flag=True, default=False, help="Report changes without writing.")
@click.option("--no-backup", is_flag=True, default=False, help="Do not write backup copies.")
@click.option(
    "--max-empty-lines",
    type=click.IntRange(0, 10),
    default=None,
    help="Keep at most N consecutive empty lines.",
)
@click.option(
    "--disable",
    "disabled",
    multiple=True,
    type=click.Choice(STAGE_NAMES),
    help="Skip a stage (repeatable).",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def clean(
    paths: tuple[str, ...],
    config_path: str | None,
    dry_run: bool,
    no_backup: bool,
    max_empty_lines: int | None,
    disabled: tuple[str, ...],
    verbose: int,
) -> None:
    """Clean markdown files or directories.

    With no PATHS (or "-") the text is read from stdin and the cleaned text
    is written to stdout.
    """
    if "-" in paths and len(paths) > 1:
        raise click.UsageError("\"-\" (stdin) cannot be combined with file paths.")
    _setup_logging(verbose)

    flags = dict(STAGE_ORDER)
    config = _load_config(
        config_path,
        max_consecutive_empty_lines=max_empty_lines,
        create_backup=False if no_backup else None,
        **{flags[name]: False for name in disabled},
    )
    if not verbose:
        logging.getLogger().setLevel(config.log_level)

    if not paths or paths == ("-",):
        _clean_stream(config)
        return

    _clean_paths([Path(p) for p in paths], config, dry_run)


def _clean_stream(config: CleanerConfig) -> None:
    """Clean stdin to stdout, reporting on stderr."""
    from linecleaner.pipeline.engine import clean_text

    text = click.get_text_stream("stdin").read()
    result = clean_text(text, config)
    click.echo(result.content, nl=False)

    if result.changed:
        error_console.print(f"Processed {result.removals} removal operation(s) in selection")
    else:
        error_console.print("No lines found containing removal markers in selection")


def _clean_paths(paths: list[Path], config: CleanerConfig, dry_run: bool) -> None:
    """Clean every markdown document under ``paths``."""
    from linecleaner.documents import SUPPORTED_EXTENSIONS, clean_file, find_documents

    files: list[Path] = []
    for path in paths:
        if path.is_file() and path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            error_console.print(
                f"[yellow]Skipping {escape(path.name)}: only Markdown files are cleaned[/yellow]"
            )
            continue
        files.extend(find_documents(path, config.backup_file_name_format))

    if not files:
        error_console.print("[yellow]No Markdown files found.[/yellow]")
        return

    failed = 0
    changed = 0
    for file in files:
        name = escape(file.name)
        try:
            outcome = clean_file(file, config, dry_run=dry_run)
        except DocumentError as e:
            failed += 1
            error_console.print(f"[red]Error cleaning {name}:[/red] {escape(str(e))}")
            continue

        if not outcome.changed:
            console.print(f"No lines found containing removal markers in {name}")
            continue
        changed += 1
        if dry_run:
            console.print(
                f"[cyan]Would process {outcome.removals} removal operation(s) in {name}[/cyan]"
            )
            continue
        if outcome.backup_path is not None:
            console.print(f"Backup created: {escape(outcome.backup_path.name)}")
        console.print(f"[green]Processed {outcome.removals} removal operation(s) in {name}[/green]")

    if len(files) > 1:
        console.print(f"{changed} of {len(files)} file(s) changed")
    if failed:
        sys.exit(1)


@cli.command("stages")
@click.option("-c", "--config", "config_path", type=click.Path(exists=True, dir_okay=False))
def list_stages(config_path: str | None) -> None:
    """List pipeline stages in execution order."""
    from linecleaner.pipeline.engine import iter_stages

    config = _load_config(config_path)

    table = Table(title="Pipeline Stages", show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Stage", style="cyan")
    table.add_column("Enabled")

    for i, (name, enabled) in enumerate(iter_stages(config), 1):
        table.add_row(str(i), name, "[green]yes[/green]" if enabled else "[dim]no[/dim]")

    console.print(table)


@cli.group("config")
def config_group() -> None:
    """Settings management commands."""


@config_group.command("show")
@click.option("-c", "--config", "config_path", type=click.Path(exists=True, dir_okay=False))
def config_show(config_path: str | None) -> None:
    """Show the resolved settings."""
    config = _load_config(config_path)

    table = Table(title="Settings", show_header=True)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value")

    for key, value in config.model_dump().items():
        if isinstance(value, list):
            value = ", ".join(repr(v) for v in value) or "-"
        table.add_row(key, escape(str(value)))

    console.print(table)


@config_group.command("init")
@click.argument("path", type=click.Path(dir_okay=False), default=_DEFAULT_CONFIG_NAME)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing file.")
def config_init(path: str, force: bool) -> None:
    """Write a settings file with the default values."""
    from linecleaner.config.loader import save_config
    from linecleaner.config.schema import CleanerConfig

    target = Path(path)
    if target.exists() and not force:
        error_console.print(f"[red]Error:[/red] {escape(str(target))} already exists (use --force)")
        sys.exit(1)

    save_config(CleanerConfig(), target)
    console.print(f"[green]Written to {escape(str(target))}[/green]")


@config_group.command("migrate")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def config_migrate(path: str) -> None:
    """Upgrade a legacy settings file in place."""
    from linecleaner.config.loader import build_config, load_yaml, save_settings
    from linecleaner.config.migrations import migrate_settings

    try:
        data, dirty = migrate_settings(load_yaml(path))
        build_config(data, source=path)
    except (ConfigError, ValueError) as e:
        error_console.print(f"[red]Invalid settings:[/red] {escape(str(e))}")
        sys.exit(1)

    if not dirty:
        console.print("Settings are already up to date.")
        return

    save_settings(data, path)
    console.print(f"[green]Migrated settings in {escape(Path(path).name)}[/green]")


def main() -> None:
    """Entry point for the CLI."""
    cli()
