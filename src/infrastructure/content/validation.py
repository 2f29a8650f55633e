"""Frontmatter checks for content files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ...domain.entities.document import SourceType
from ...domain.services.document_builder import parse_instant
from .markdown_repository import FileSystemContentRepository, FrontmatterError, split_frontmatter

VALID_STATUSES = ('draft', 'published')
DATE_FIELDS = ('publishedAt', 'updatedAt', 'date')
TEXT_FIELDS = ('summary', 'description', 'category')


@dataclass
class ValidationResult:
    path: Path
    source_type: SourceType
    problems: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems


def validate_content(content: str) -> List[str]:
    """Return the problems found in one file's frontmatter (empty when valid)."""
    try:
        data, _ = split_frontmatter(content)
    except FrontmatterError as e:
        return [str(e)]

    if not data:
        return ["No frontmatter found (should start with ---)"]

    problems = []
    title = data.get('title')
    if not isinstance(title, str) or not title.strip():
        problems.append("Missing required field: title")

    status = data.get('status', 'draft')
    if status not in VALID_STATUSES:
        problems.append(f"Invalid status {status!r} (expected one of {', '.join(VALID_STATUSES)})")

    for name in DATE_FIELDS:
        value = data.get(name)
        # CMS writes empty strings for unset dates
        if value is None or value == "":
            continue
        if parse_instant(value) is None:
            problems.append(f"Unparseable date in '{name}': {value!r}")

    tags = data.get('tags')
    if tags is not None and (not isinstance(tags, list) or not all(isinstance(t, str) for t in tags)):
        problems.append("'tags' must be a list of strings")

    for name in TEXT_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            problems.append(f"'{name}' must be a string")

    return problems


def validate_collections(repository: FileSystemContentRepository, source_types=None) -> List[ValidationResult]:
    """Validate every content file of the given collections (missing ones are skipped)."""
    results = []
    for source_type in source_types or list(SourceType):
        if not repository.collection_dir(source_type).is_dir():
            continue
        for path in repository.iter_content_files(source_type):
            try:
                problems = validate_content(path.read_text(encoding='utf-8'))
            except (OSError, UnicodeDecodeError) as e:
                problems = [f"Can't read file: {e}"]
            results.append(ValidationResult(path=path, source_type=source_type, problems=problems))
    return results


__all__ = ["validate_content", "validate_collections", "ValidationResult"]
