"""
Recent Command - latest published entries per collection
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from src.domain.entities.document import SourceType
from src.domain.services.corpus_service import ContentCatalogService
from src.infrastructure.config.settings import SettingsManager
from src.infrastructure.content.markdown_repository import FileSystemContentRepository


@click.command('recent')
@click.option('--content-root', '-c', type=click.Path(path_type=Path), help='Directory holding the content collections')
@click.option('--config', 'config_path', type=click.Path(path_type=Path), help='Settings file (default: search_index.yaml)')
@click.option('--type', '-t', 'types', multiple=True,
              type=click.Choice([st.value for st in SourceType]), help='Collection(s) to list (default: all)')
@click.option('--limit', '-l', type=click.IntRange(min=1), default=3, show_default=True, help='Entries per collection')
@click.option('--featured', is_flag=True, help='List featured projects instead')
def recent_command(content_root: Optional[Path], config_path: Optional[Path], types: Tuple[str, ...],
                   limit: int, featured: bool) -> None:
    """
    List the most recent published entries.

    Examples:
        python main.py recent --type blog --limit 5

        python main.py recent --featured
    """
    console = Console()

    try:
        settings = SettingsManager(config_path).get_settings().with_overrides(content_root=content_root)
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]❌ Failed to load settings: {e}[/red]")
        sys.exit(1)

    catalog = ContentCatalogService(FileSystemContentRepository(settings.content_root))

    if featured:
        sections = [("featured projects", catalog.featured_projects(limit))]
    else:
        selected = [SourceType(t) for t in types] if types else settings.sources
        sections = [(st.value, catalog.recent(st, limit)) for st in selected]

    for name, documents in sections:
        table = Table(show_header=True, header_style="bold cyan", title=name)
        table.add_column("Date", style="dim")
        table.add_column("Title")
        table.add_column("URL", style="cyan")
        for doc in documents:
            table.add_row(doc.date[:10], doc.title, doc.url)
        if not documents:
            table.add_row("-", "[dim]nothing published[/dim]", "")
        console.print(table)


__all__ = ['recent_command']
