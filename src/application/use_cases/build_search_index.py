"""
Application Use Cases - Orchestration Layer
Following Use Case pattern and Clean Architecture principles
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from ...domain.entities.document import SearchArtifact, SourceType
from ...domain.services.corpus_service import CorpusAssembler
from ...domain.services.document_builder import to_iso_instant
from ...domain.services.index_builder import IndexBuilder

logger = logging.getLogger(__name__)


@dataclass
class BuildSearchIndexRequest:
    """Request DTO for the index build use case"""
    source_types: Optional[List[SourceType]] = None


@dataclass
class BuildSearchIndexResponse:
    """Response DTO for the index build use case"""
    artifact: SearchArtifact
    documents_per_type: Dict[str, int] = field(default_factory=dict)

    @property
    def total_documents(self) -> int:
        return len(self.artifact.documents)

    @property
    def total_keys(self) -> int:
        return len(self.artifact.index)

    @property
    def total_postings(self) -> int:
        return sum(len(p) for p in self.artifact.index.values())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BuildSearchIndexUseCase:
    """
    Primary Use Case for generating the search artifact
    Orchestrates corpus assembly and index construction
    """

    def __init__(
        self,
        corpus_assembler: CorpusAssembler,
        index_builder: Optional[IndexBuilder] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._corpus_assembler = corpus_assembler
        self._index_builder = index_builder or IndexBuilder()
        self._clock = clock

    def execute(self, request: Optional[BuildSearchIndexRequest] = None, progress_callback=None) -> BuildSearchIndexResponse:
        """
        Execute one full build
        Always returns a well-formed artifact, even for an empty corpus
        """
        documents = self._corpus_assembler.assemble(progress_callback=progress_callback)

        if request and request.source_types is not None:
            wanted = set(request.source_types)
            documents = [d for d in documents if d.source_type in wanted]

        index = self._index_builder.build(documents)

        counts: Dict[str, int] = {st.value: 0 for st in SourceType}
        for document in documents:
            counts[document.source_type.value] += 1

        artifact = SearchArtifact(
            generated_at=to_iso_instant(self._clock()),
            documents=documents,
            index=index,
        )
        logger.info("Built search index: %d documents, %d keys", len(documents), len(index))
        return BuildSearchIndexResponse(artifact=artifact, documents_per_type=counts)


__all__ = ["BuildSearchIndexUseCase", "BuildSearchIndexRequest", "BuildSearchIndexResponse"]
