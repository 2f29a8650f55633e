"""
Document Builder - maps raw content records onto the uniform Document model.

Field resolution uses explicit, ordered fallback chains evaluated left to
right by ``resolve_first``. Every field access is defensive: missing or
malformed upstream data yields the field's zero value instead of failing
the document.
"""

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable, List, Optional, Sequence

from ..entities.document import ContentRecord, Document, SourceProfile, SourceType, SOURCE_PROFILES
from .text_processing import DEFAULT_EXCERPT_LENGTH, excerpt, normalize

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

DATE_FALLBACK_KEYS = ("publishedAt", "date")
DESCRIPTION_FALLBACK_KEYS = ("summary", "description")


def to_iso_instant(value: datetime) -> str:
    """Format as a fixed-width UTC instant, e.g. ``2024-01-01T00:00:00.000Z``.

    Fixed width keeps string order identical to chronological order.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def parse_instant(value: Any) -> Optional[datetime]:
    """Parse a frontmatter date-like value into an aware UTC datetime.

    Accepts datetimes (naive ones are UTC), dates (midnight UTC), ISO-8601
    strings and epoch milliseconds. Anything else, including empty strings
    and booleans, is treated as absent.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in ('Z', 'z'):
            text = text[:-1] + '+00:00'
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    return None


def _as_text(value: Any) -> Optional[str]:
    """Plain scalars become strings, everything else is absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _non_empty_text(value: Any) -> Optional[str]:
    text = _as_text(value)
    return text if text and text.strip() else None


def resolve_first(data: Any, keys: Sequence[str], parse: Callable[[Any], Any] = _non_empty_text) -> Any:
    """Return the first value among ``keys`` that survives ``parse``.

    ``parse`` maps a raw value to ``None`` when it should count as absent,
    which makes the chain fall through to the next key.
    """
    if not isinstance(data, Mapping):
        return None
    for key in keys:
        value = parse(data.get(key))
        if value is not None:
            return value
    return None


def resolve_date(data: Any) -> str:
    """publishedAt -> legacy date -> Unix epoch"""
    instant = resolve_first(data, DATE_FALLBACK_KEYS, parse=parse_instant)
    return to_iso_instant(instant or EPOCH)


def resolve_description(data: Any) -> Optional[str]:
    """summary -> legacy description -> absent"""
    return resolve_first(data, DESCRIPTION_FALLBACK_KEYS)


def resolve_tags(data: Any) -> List[str]:
    raw = data.get("tags") if isinstance(data, Mapping) else None
    if not isinstance(raw, (list, tuple)):
        return []
    tags = []
    for item in raw:
        text = _as_text(item)
        if text:
            tags.append(text)
    return tags


class DocumentBuilder:
    """Builds Documents from content records according to their source profile"""

    def __init__(self, excerpt_max_length: int = DEFAULT_EXCERPT_LENGTH, profiles=None):
        self._excerpt_max_length = excerpt_max_length
        self._profiles = profiles or SOURCE_PROFILES

    def profile_for(self, source_type: SourceType) -> SourceProfile:
        return self._profiles[source_type]

    def build(self, record: ContentRecord, source_type: SourceType) -> Document:
        profile = self.profile_for(source_type)
        data = record.data if isinstance(record.data, Mapping) else {}

        title = _as_text(data.get("title")) or ""
        tags = resolve_tags(data)
        description = resolve_description(data) if profile.include_summary else None
        extra = [_as_text(data.get(name)) or "" for name in profile.extra_fields]
        body = excerpt(_as_text(record.body) or "", self._excerpt_max_length)

        parts = [title, description or ""] + extra + [" ".join(tags), body]
        text = normalize("\n".join(p for p in parts if p))

        return Document(
            id=f"{source_type.value}:{record.slug}",
            source_type=source_type,
            title=title,
            tags=tags,
            date=resolve_date(data),
            url=profile.url_for(record.slug),
            text=text,
            description=description,
        )

    def build_many(self, records: Sequence[ContentRecord], source_type: SourceType) -> List[Document]:
        documents = [self.build(r, source_type) for r in records]
        logger.debug("Built %d %s documents", len(documents), source_type.value)
        return documents


__all__ = [
    "DocumentBuilder",
    "resolve_first",
    "resolve_date",
    "resolve_description",
    "resolve_tags",
    "parse_instant",
    "to_iso_instant",
    "EPOCH",
]
