"""
Validate Command - frontmatter checks for every content file
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from src.infrastructure.config.settings import SettingsManager
from src.infrastructure.content.markdown_repository import FileSystemContentRepository
from src.infrastructure.content.validation import validate_collections


@click.command('validate')
@click.option('--content-root', '-c', type=click.Path(path_type=Path), help='Directory holding the content collections')
@click.option('--config', 'config_path', type=click.Path(path_type=Path), help='Settings file (default: search_index.yaml)')
def validate_command(content_root: Optional[Path], config_path: Optional[Path]) -> None:
    """
    Validate content frontmatter (title, status, dates, tags).

    Exits with status 1 when any file is invalid.
    """
    console = Console()

    try:
        settings = SettingsManager(config_path).get_settings().with_overrides(content_root=content_root)
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]❌ Failed to load settings: {e}[/red]")
        sys.exit(1)

    results = validate_collections(FileSystemContentRepository(settings.content_root), settings.sources)

    if not results:
        console.print(f"[red]❌ No content files found in {settings.content_root}[/red]")
        sys.exit(1)

    invalid = [r for r in results if not r.is_valid]
    if invalid:
        table = Table(show_header=True, header_style="bold red")
        table.add_column("File", style="cyan")
        table.add_column("Problem")
        for result in invalid:
            for problem in result.problems:
                table.add_row(_display_path(result.path, settings.content_root), problem)
        console.print(table)

    console.print()
    console.print(f"[green]✅ Valid: {len(results) - len(invalid)}[/green]")
    console.print(f"[red]❌ Invalid: {len(invalid)}[/red]")

    if invalid:
        sys.exit(1)


def _display_path(path: Path, root: Path) -> str:
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


__all__ = ['validate_command']
