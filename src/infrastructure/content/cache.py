"""Explicit collection cache owned by a single repository instance."""
from __future__ import annotations

from typing import Dict, List, Optional

from ...domain.entities.document import ContentRecord, SourceType


class CollectionCache:
    """Holds loaded collections until invalidated.

    One instance belongs to one repository (and so to one build); nothing
    is shared across builds or processes.
    """

    def __init__(self):
        self._entries: Dict[SourceType, List[ContentRecord]] = {}

    def get(self, source_type: SourceType) -> Optional[List[ContentRecord]]:
        records = self._entries.get(source_type)
        return list(records) if records is not None else None

    def put(self, source_type: SourceType, records: List[ContentRecord]) -> None:
        self._entries[source_type] = list(records)

    def invalidate(self, source_type: Optional[SourceType] = None) -> None:
        """Drop one collection, or everything when no source type is given."""
        if source_type is None:
            self._entries.clear()
        else:
            self._entries.pop(source_type, None)

    def __contains__(self, source_type: SourceType) -> bool:
        return source_type in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["CollectionCache"]
