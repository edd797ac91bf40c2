"""Command-line interface for SkinPack.

Provides commands for generating the launcher skin file and for
inspecting how a set of skins would be classified.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)
from rich.table import Table

from skinpack.config import ConverterConfig, load_config
from skinpack.errors import SkinPackError
from skinpack.generator import generate_from_paths
from skinpack.logging import setup_logging
from skinpack.models import SkinDocument
from skinpack.output import write_document
from skinpack.sources import collect_skin_paths

console = Console()

_PATHS_ARGUMENT = click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(path_type=Path),
)


def _setup_logging(verbose: bool, config: ConverterConfig) -> None:
    """Configure logging based on verbose flag and config."""
    setup_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        verbose=verbose,
        log_file=config.log_file,
        json_logs=config.json_logs,
    )


def _load_config_or_exit(config_path: Path | None) -> ConverterConfig:
    try:
        return load_config(config_path)
    except (FileNotFoundError, SkinPackError) as e:
        console.print(f"[bold red]✗[/] {e}")
        sys.exit(1)


async def _run_conversion(
    skin_paths: list[Path], timestamp_step_ms: int
) -> SkinDocument:
    """Convert *skin_paths* with a progress bar."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        read_task = progress.add_task("[cyan]Reading...", total=len(skin_paths))
        skin_task = progress.add_task(
            "[cyan]Converting...", total=len(skin_paths), start=False
        )

        def progress_callback(stage_name: str, current: int, total: int) -> None:
            if stage_name == "read":
                progress.update(read_task, completed=current)
            elif stage_name == "skin":
                progress.start_task(skin_task)
                progress.update(skin_task, completed=current)

        return await generate_from_paths(
            skin_paths,
            timestamp_step_ms=timestamp_step_ms,
            progress_callback=progress_callback,
        )


@click.group()
@click.version_option(package_name="skinpack")
def main() -> None:
    """SkinPack — build launcher_custom_skins.json from Minecraft skin PNGs."""
    pass


@main.command()
@_PATHS_ARGUMENT
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output JSON path (default: launcher_custom_skins.json)",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML config file",
)
@click.option(
    "--recursive",
    "-r",
    is_flag=True,
    help="Descend into subdirectories of directory inputs",
)
@click.option(
    "--step-ms",
    type=click.IntRange(min=1),
    help="Milliseconds between consecutive skin timestamps",
)
@click.option("--json-logs", is_flag=True, help="Emit JSON log lines")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    help="Also write logs to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable detailed logging",
)
def generate(
    paths: tuple[Path, ...],
    output: Path | None,
    config_path: Path | None,
    recursive: bool,
    step_ms: int | None,
    json_logs: bool,
    log_file: str | None,
    verbose: bool,
) -> None:
    """Generate the launcher skin file from PNG skins.

    PATHS: Skin files and/or directories containing them.

    Example:

        \b
        skinpack generate skins/
        skinpack generate steve.png alex_slim.png -o out/launcher_custom_skins.json
    """
    config = _load_config_or_exit(config_path)
    overrides = {
        "output_path": str(output) if output else None,
        "recursive": recursive or None,
        "timestamp_step_ms": step_ms,
        "json_logs": json_logs or None,
        "log_file": log_file,
    }
    config = config.model_copy(
        update={k: v for k, v in overrides.items() if v is not None}
    )
    _setup_logging(verbose, config)

    try:
        skin_paths = collect_skin_paths(paths, recursive=config.recursive)
        document = asyncio.run(
            _run_conversion(skin_paths, config.timestamp_step_ms)
        )
        written = write_document(document, config.output_path, indent=config.indent)

        for record in document.records():
            model = "slim" if record.slim else "classic"
            console.print(f"[bold green]✓[/] {record.id} [bold]{record.name}[/] ({model})")
        console.print()
        console.print(f"[bold green]✓[/] Skin file generated: [bold]{written}[/]")

    except SkinPackError as e:
        console.print(f"[bold red]✗[/] Generation failed: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[bold yellow]⚠[/] Generation interrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print(f"[bold red]✗[/] Unexpected error: {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)


@main.command()
@_PATHS_ARGUMENT
@click.option(
    "--recursive",
    "-r",
    is_flag=True,
    help="Descend into subdirectories of directory inputs",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable detailed logging",
)
def inspect(paths: tuple[Path, ...], recursive: bool, verbose: bool) -> None:
    """Show how skins would be converted, without writing a file.

    PATHS: Skin files and/or directories containing them.

    Example:

        \b
        skinpack inspect skins/ --recursive
    """
    _setup_logging(verbose, ConverterConfig())

    try:
        skin_paths = collect_skin_paths(paths, recursive=recursive)
        document = asyncio.run(generate_from_paths(skin_paths))
    except SkinPackError as e:
        console.print(f"[bold red]✗[/] Inspection failed: {e}")
        sys.exit(1)

    table = Table(title=f"{len(document)} skin(s)")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Model")
    table.add_column("Texture ID")
    for record in document.records():
        table.add_row(
            record.id,
            record.name,
            "slim" if record.slim else "classic",
            record.texture_id[:16],
        )
    console.print(table)


if __name__ == "__main__":
    main()
