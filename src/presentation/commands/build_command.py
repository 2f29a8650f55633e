"""
Build Command - Search Index Generation

Assembles every published content collection, builds the prefix index and
writes the static search artifact.
"""

import sys
import time
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console
from rich.table import Table

from src.infrastructure.config.settings import SettingsManager
from src.infrastructure.content.markdown_repository import FileSystemContentRepository
from src.infrastructure.persistence import write_artifact
from src.domain.services.document_builder import DocumentBuilder
from src.domain.services.corpus_service import CorpusAssembler
from src.domain.services.index_builder import IndexBuilder
from src.application.use_cases.build_search_index import BuildSearchIndexUseCase, BuildSearchIndexResponse
from ..helpers.progress_display import ProgressDisplay


@click.command('build')
@click.option('--content-root', '-c', type=click.Path(path_type=Path), help='Directory holding the content collections')
@click.option('--output', '-o', type=click.Path(path_type=Path), help='Artifact path (e.g. dist/search-index.json)')
@click.option('--config', 'config_path', type=click.Path(path_type=Path), help='Settings file (default: search_index.yaml)')
@click.option('--max-excerpt', type=click.IntRange(min=0), help='Maximum body excerpt length per document')
@click.option('--headers/--no-headers', default=False, help='Also write a static-host _headers file with the cache policy')
def build_command(
    content_root: Optional[Path],
    output: Optional[Path],
    config_path: Optional[Path],
    max_excerpt: Optional[int],
    headers: bool,
) -> None:
    """
    Build the static search index.

    Examples:
        python main.py build

        python main.py build --content-root src/content --output dist/search-index.json

        python main.py build --config search_index.yaml --headers
    """
    console = Console()

    try:
        settings = SettingsManager(config_path).get_settings().with_overrides(
            content_root=content_root,
            output=output,
            excerpt_max_length=max_excerpt,
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        console.print(f"[red]❌ Failed to load settings: {e}[/red]")
        sys.exit(1)

    console.print(f"[cyan]🔍 Indexing content from: {settings.content_root}[/cyan]")

    repository = FileSystemContentRepository(settings.content_root)
    assembler = CorpusAssembler(
        repository,
        document_builder=DocumentBuilder(excerpt_max_length=settings.excerpt_max_length),
        source_types=settings.sources,
        max_workers=settings.fetch_workers,
    )
    use_case = BuildSearchIndexUseCase(
        assembler,
        index_builder=IndexBuilder(
            max_prefix_length=settings.max_prefix_length,
            min_token_length=settings.min_token_length,
        ),
    )

    start = time.time()
    with ProgressDisplay.create_simple_progress(console) as progress:
        task = progress.add_task("Fetching collections", total=len(assembler.source_types))

        def _on_progress(event: Dict) -> None:
            if event.get('phase') == 'fetched_collection':
                progress.advance(task)

        response = use_case.execute(progress_callback=_on_progress)

    written = write_artifact(response.artifact, str(settings.output), headers=headers)
    elapsed = time.time() - start

    _print_summary(console, response, written, elapsed)


def _print_summary(console: Console, response: BuildSearchIndexResponse, written: Dict[str, str], total_time: float) -> None:
    """Print final summary table"""
    console.print()
    table = Table(show_header=True, header_style="bold cyan", title="📊 SEARCH INDEX SUMMARY")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")

    for source, count in response.documents_per_type.items():
        table.add_row(f"Documents ({source})", str(count))
    table.add_row("", "")
    table.add_row("Total Documents", str(response.total_documents), style="bold green")
    table.add_row("Index Keys", str(response.total_keys))
    table.add_row("Postings", str(response.total_postings))

    console.print(table)
    console.print()
    console.print(f"[green]✓ Wrote {written['artifact']}[/green]")
    if 'headers' in written:
        console.print(f"[green]✓ Wrote {written['headers']}[/green]")
    console.print(f"[dim]⏱️  Total time: {total_time:.2f}s[/dim]")


__all__ = ['build_command']
