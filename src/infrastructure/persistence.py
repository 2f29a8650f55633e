"""Persistence helpers for writing and reading the search artifact."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from ..domain.entities.document import SearchArtifact

logger = logging.getLogger(__name__)

CONTENT_TYPE = 'application/json; charset=utf-8'
CACHE_CONTROL = 'public, max-age=300, s-maxage=3600, stale-while-revalidate=86400'


def serialize_artifact(artifact: SearchArtifact) -> str:
    """Compact, deterministic JSON for the artifact."""
    return json.dumps(artifact.to_dict(), ensure_ascii=False, separators=(',', ':'))


def render_headers_rule(route: str) -> str:
    """Static-host ``_headers`` rule serving the artifact with its cache policy."""
    return (
        f"{route}\n"
        f"  Content-Type: {CONTENT_TYPE}\n"
        f"  Cache-Control: {CACHE_CONTROL}\n"
    )


def write_artifact(artifact: SearchArtifact, output_path: str, *, headers: bool = False,
                   route: Optional[str] = None) -> Dict[str, str]:
    """Write the artifact (and optionally a ``_headers`` file beside it).

    Parameters
    ----------
    artifact: SearchArtifact
        The built artifact.
    output_path: str
        Destination JSON file. Parent directories are created.
    headers: bool
        When True, also write ``_headers`` in the same directory with the
        artifact's cache policy.
    route: Optional[str]
        URL path the artifact is served under; defaults to ``/<filename>``.

    Returns
    -------
    Dict[str, str]
        Paths for written files: {'artifact': ..., 'headers': ... (optional)}
    """
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    payload = serialize_artifact(artifact)
    # Write then rename so readers never see a half-written artifact
    tmp = out.with_name(out.name + '.tmp')
    tmp.write_text(payload, encoding='utf-8')
    tmp.replace(out)
    logger.info("Wrote %s (%.1f KB)", out, len(payload.encode('utf-8')) / 1024)

    written = {'artifact': str(out)}
    if headers:
        headers_path = out.parent / '_headers'
        headers_path.write_text(render_headers_rule(route or f"/{out.name}"), encoding='utf-8')
        written['headers'] = str(headers_path)
    return written


def load_artifact(path: str) -> SearchArtifact:
    with open(path, 'r', encoding='utf-8') as f:
        return SearchArtifact.from_dict(json.load(f))


__all__ = ["write_artifact", "load_artifact", "serialize_artifact", "render_headers_rule", "CACHE_CONTROL"]
