"""
Inspect Command - look inside a generated search artifact
"""

import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from src.domain.entities.document import SearchArtifact
from src.domain.services.index_builder import DEFAULT_MAX_PREFIX_LENGTH
from src.domain.services.text_processing import normalize, tokenize
from src.infrastructure.persistence import load_artifact


def lookup(artifact: SearchArtifact, term: str, max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH) -> List[int]:
    """Ordinals matching ``term`` as a token or token prefix.

    Terms longer than the prefix bound fall back to the bounded prefix key
    and are confirmed against each candidate's tokens.
    """
    key = normalize(term)
    if not key:
        return []
    if key in artifact.index:
        return list(artifact.index[key])
    if len(key) <= max_prefix_length:
        return []

    candidates = artifact.index.get(key[:max_prefix_length], [])
    return [
        i for i in candidates
        if any(t.startswith(key) for t in tokenize(artifact.documents[i].text))
    ]


@click.command('inspect')
@click.argument('artifact_path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--term', '-t', help='Show documents posted under this token or prefix')
@click.option('--top', type=click.IntRange(min=0), default=0, help='List the N keys with the longest posting lists')
def inspect_command(artifact_path: Path, term: Optional[str], top: int) -> None:
    """
    Show statistics for a search artifact.

    Examples:
        python main.py inspect dist/search-index.json

        python main.py inspect dist/search-index.json --term fourier
    """
    console = Console()

    try:
        artifact = load_artifact(str(artifact_path))
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        console.print(f"[red]❌ Not a valid search artifact: {e}[/red]")
        sys.exit(1)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right", style="green")
    table.add_row("Generated At", artifact.generated_at)
    table.add_row("Documents", str(len(artifact.documents)))
    table.add_row("Index Keys", str(len(artifact.index)))
    table.add_row("Postings", str(sum(len(p) for p in artifact.index.values())))
    console.print(table)

    if top:
        ranked = sorted(artifact.index.items(), key=lambda kv: (-len(kv[1]), kv[0]))[:top]
        top_table = Table(show_header=True, header_style="bold cyan", title=f"Top {top} keys")
        top_table.add_column("Key", style="cyan")
        top_table.add_column("Documents", justify="right", style="green")
        for key, postings in ranked:
            top_table.add_row(key, str(len(postings)))
        console.print(top_table)

    if term is not None:
        ordinals = lookup(artifact, term)
        if not ordinals:
            console.print(f"[yellow]⚠ No documents for '{term}'[/yellow]")
            return

        hits = Table(show_header=True, header_style="bold cyan", title=f"Matches for '{term}'")
        hits.add_column("#", justify="right", style="dim")
        hits.add_column("Id", style="cyan")
        hits.add_column("Title")
        hits.add_column("Date", style="dim")
        for i in ordinals:
            doc = artifact.documents[i]
            hits.add_row(str(i), doc.id, doc.title, doc.date[:10])
        console.print(hits)


__all__ = ['inspect_command', 'lookup']
