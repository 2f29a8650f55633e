"""Filesystem content repository: Markdown/MDX files with YAML frontmatter.

Layout:
  <content_root>/<collection>/**/*.md|*.mdx

Each file starts with a ``---`` delimited YAML block followed by the body.
Only records whose ``status`` is ``published`` are returned; a missing
status means ``draft``.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from ...domain.entities.document import ContentRecord, SourceType
from ...domain.repositories.base import CollectionNotFoundError, ContentRepository
from .cache import CollectionCache

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = ('.md', '.mdx')
PUBLISHED = 'published'
DEFAULT_STATUS = 'draft'

_SLUG_WS_RE = re.compile(r'\s+')
_FRONTMATTER_RE = re.compile(r'\A---[ \t]*\n(.*?)^---[ \t]*(?:\n|\Z)', flags=re.DOTALL | re.MULTILINE)


class FrontmatterError(ValueError):
    """Raised when a content file has unparseable frontmatter"""


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps impossible calendar dates (``2024-02-30``) as strings."""


def _construct_timestamp(loader, node):
    try:
        return yaml.SafeLoader.construct_yaml_timestamp(loader, node)
    except ValueError:
        return loader.construct_scalar(node)


FrontmatterLoader.add_constructor('tag:yaml.org,2002:timestamp', _construct_timestamp)


def split_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    """Split a content file into (frontmatter mapping, body).

    Files without a frontmatter block yield an empty mapping and the whole
    content as body.
    """
    content = content.replace('\r\n', '\n').lstrip('\ufeff')
    if not content.startswith('---'):
        return {}, content

    match = _FRONTMATTER_RE.match(content)
    if not match:
        raise FrontmatterError("Invalid frontmatter structure")

    try:
        data = yaml.load(match.group(1), Loader=FrontmatterLoader)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontmatterError("Frontmatter is not a mapping")
    return data, content[match.end():]


def slug_for(path: Path, collection_dir: Path) -> str:
    """Collection-relative path without extension; ``foo/index.md`` -> ``foo``."""
    rel = path.relative_to(collection_dir).with_suffix('')
    parts = list(rel.parts)
    if len(parts) > 1 and parts[-1].lower() == 'index':
        parts = parts[:-1]
    return '/'.join(_SLUG_WS_RE.sub('-', p.strip().lower()) for p in parts)


class FileSystemContentRepository(ContentRepository):
    """Reads content collections from a directory tree"""

    def __init__(self, content_root, cache: Optional[CollectionCache] = None):
        self.content_root = Path(content_root)
        self.cache = cache if cache is not None else CollectionCache()

    def collection_dir(self, source_type: SourceType) -> Path:
        return self.content_root / source_type.value

    def iter_content_files(self, source_type: SourceType) -> List[Path]:
        directory = self.collection_dir(source_type)
        if not directory.is_dir():
            raise CollectionNotFoundError(source_type)
        return sorted(p for p in directory.rglob('*') if p.is_file() and p.suffix.lower() in CONTENT_SUFFIXES)

    def load_record(self, path: Path, source_type: SourceType) -> ContentRecord:
        content = path.read_text(encoding='utf-8')
        data, body = split_frontmatter(content)
        slug = data.get('slug')
        if not isinstance(slug, str) or not slug.strip():
            slug = slug_for(path, self.collection_dir(source_type))
        return ContentRecord(slug=slug.strip(), data=data, body=body)

    def load_all(self, source_type: SourceType) -> List[ContentRecord]:
        """Load every record of a collection regardless of status."""
        records = []
        for path in self.iter_content_files(source_type):
            try:
                records.append(self.load_record(path, source_type))
            except (OSError, UnicodeDecodeError, ValueError) as e:
                logger.warning("Skipping %s: %s", path, e)
        return records

    def get_collection(self, source_type: SourceType) -> List[ContentRecord]:
        cached = self.cache.get(source_type)
        if cached is not None:
            return cached

        records = [r for r in self.load_all(source_type) if r.data.get('status', DEFAULT_STATUS) == PUBLISHED]
        logger.debug("Loaded %d published %s records", len(records), source_type.value)
        self.cache.put(source_type, records)
        return records


__all__ = ["FileSystemContentRepository", "split_frontmatter", "slug_for", "FrontmatterError"]
