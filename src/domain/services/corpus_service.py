"""
Domain Services - Corpus assembly
Fetches every content collection, merges them and orders them by recency
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Sequence

from ..entities.document import ContentRecord, Document, SourceType
from ..repositories.base import ContentRepository
from .document_builder import DocumentBuilder

logger = logging.getLogger(__name__)


def sort_by_date_desc(documents: Sequence[Document]) -> List[Document]:
    """Newest first by ISO string; equal dates keep their incoming order."""
    return sorted(documents, key=lambda d: d.date, reverse=True)


class CorpusAssembler:
    """
    Domain Service that builds the merged, sorted document corpus

    Fetches run concurrently, one per source type. A failed fetch is
    replaced by an empty collection so a single broken source never aborts
    the build.
    """

    def __init__(
        self,
        content_repository: ContentRepository,
        document_builder: Optional[DocumentBuilder] = None,
        source_types: Optional[Sequence[SourceType]] = None,
        max_workers: Optional[int] = None,
    ):
        self._content_repository = content_repository
        self._document_builder = document_builder or DocumentBuilder()
        # Concatenation order is always the SourceType declaration order
        wanted = set(source_types) if source_types is not None else set(SourceType)
        self._source_types = [st for st in SourceType if st in wanted]
        self._max_workers = max_workers

    @property
    def source_types(self) -> List[SourceType]:
        return list(self._source_types)

    def _safe_fetch(self, source_type: SourceType) -> List[ContentRecord]:
        try:
            return list(self._content_repository.get_collection(source_type))
        except Exception as e:
            logger.warning("Skipping collection '%s': %s", source_type.value, e)
            return []

    def fetch_all(self, progress_callback=None) -> Dict[SourceType, List[ContentRecord]]:
        """Fetch every collection concurrently, tolerating per-collection failure.

        Parameters
        ----------
        progress_callback: Optional[callable]
            Receives {'phase': 'fetched_collection', 'source': <type>, 'count': n}
            as each collection resolves. Callback errors are ignored.

        Returns
        -------
        Dict[SourceType, List[ContentRecord]]
            Records per source type, in concatenation order.
        """
        if not self._source_types:
            return {}

        workers = self._max_workers or len(self._source_types)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = {st: pool.submit(self._safe_fetch, st) for st in self._source_types}
            results = {}
            for source_type in self._source_types:
                records = futures[source_type].result()
                results[source_type] = records
                if progress_callback:
                    try:
                        progress_callback({'phase': 'fetched_collection', 'source': source_type.value, 'count': len(records)})
                    except Exception:
                        pass
        return results

    def assemble(self, progress_callback=None) -> List[Document]:
        """Fetch, convert, concatenate and sort all documents"""
        collections = self.fetch_all(progress_callback=progress_callback)

        documents: List[Document] = []
        for source_type in self._source_types:
            documents.extend(self._document_builder.build_many(collections.get(source_type, []), source_type))

        logger.info("Assembled %d documents from %d collections", len(documents), len(collections))
        return sort_by_date_desc(documents)


class ContentCatalogService:
    """Derived listings over published content (recent entries, featured projects)"""

    def __init__(self, content_repository: ContentRepository, document_builder: Optional[DocumentBuilder] = None):
        self._content_repository = content_repository
        self._document_builder = document_builder or DocumentBuilder()

    def _records(self, source_type: SourceType) -> List[ContentRecord]:
        try:
            return list(self._content_repository.get_collection(source_type))
        except Exception as e:
            logger.warning("Collection '%s' unavailable: %s", source_type.value, e)
            return []

    def recent(self, source_type: SourceType, limit: Optional[int] = 3) -> List[Document]:
        documents = sort_by_date_desc(self._document_builder.build_many(self._records(source_type), source_type))
        return documents[:limit] if limit is not None else documents

    def featured_projects(self, limit: Optional[int] = 3) -> List[Document]:
        featured = [
            r for r in self._records(SourceType.PROJECTS)
            if isinstance(r.data, dict) and r.data.get('featured') is True
        ]
        documents = sort_by_date_desc(self._document_builder.build_many(featured, SourceType.PROJECTS))
        return documents[:limit] if limit is not None else documents


__all__ = ["CorpusAssembler", "ContentCatalogService", "sort_by_date_desc"]
