"""
Domain Repository Interfaces
Following Repository Pattern and Dependency Inversion Principle
"""

from abc import ABC, abstractmethod
from typing import List
from ..entities.document import ContentRecord, SourceType


class CollectionNotFoundError(LookupError):
    """Raised when a content collection does not exist upstream"""

    def __init__(self, source_type: SourceType):
        self.source_type = source_type
        super().__init__(f"Collection '{source_type.value}' not found")


class ContentRepository(ABC):
    """
    Repository interface for content collections
    Implementations return only published records
    """

    @abstractmethod
    def get_collection(self, source_type: SourceType) -> List[ContentRecord]:
        """Get all published records of one collection"""
        pass
