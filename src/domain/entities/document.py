"""
Domain Entities - Core Search Objects
Uniform document model shared by every content collection
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from enum import Enum


class SourceType(Enum):
    """Content collection a document comes from.

    Declaration order is the fixed concatenation order used when the
    collections are merged into one corpus.
    """
    BLOG = "blog"
    NOTES = "notes"
    PROJECTS = "projects"
    RESEARCH = "research"


@dataclass(frozen=True)
class SourceProfile:
    """Per-collection rules for turning a record into a Document"""
    source_type: SourceType
    include_summary: bool = False
    extra_fields: tuple = ()

    def url_for(self, slug: str) -> str:
        return f"/{self.source_type.value}/{slug}/"


SOURCE_PROFILES: Dict[SourceType, SourceProfile] = {
    SourceType.BLOG: SourceProfile(SourceType.BLOG, include_summary=True),
    SourceType.NOTES: SourceProfile(SourceType.NOTES),
    SourceType.PROJECTS: SourceProfile(SourceType.PROJECTS, include_summary=True, extra_fields=("category",)),
    SourceType.RESEARCH: SourceProfile(SourceType.RESEARCH, extra_fields=("type",)),
}


@dataclass
class ContentRecord:
    """Raw record handed over by the content repository (frontmatter + body)"""
    slug: str
    data: Dict[str, Any] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self):
        if not self.slug or not str(self.slug).strip():
            raise ValueError("Content record slug cannot be empty")


@dataclass
class Document:
    """
    Core Document Entity
    One normalized, indexable unit derived from a content record
    """
    id: str
    source_type: SourceType
    title: str
    tags: List[str]
    date: str
    url: str
    text: str
    description: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValueError("Document id is required")
        if not isinstance(self.source_type, SourceType):
            raise ValueError(f"Unknown source type: {self.source_type!r}")

    def to_dict(self) -> dict:
        """Convert to the artifact representation"""
        data = {
            "id": self.id,
            "type": self.source_type.value,
            "title": self.title,
        }
        if self.description:
            data["description"] = self.description
        data.update({
            "tags": list(self.tags),
            "date": self.date,
            "url": self.url,
            "text": self.text,
        })
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Document":
        return cls(
            id=data["id"],
            source_type=SourceType(data["type"]),
            title=data.get("title", ""),
            tags=list(data.get("tags") or []),
            date=data["date"],
            url=data["url"],
            text=data.get("text", ""),
            description=data.get("description"),
        )


@dataclass
class SearchArtifact:
    """The single generated output of one build"""
    generated_at: str
    documents: List[Document]
    index: Dict[str, List[int]]

    @property
    def is_empty(self) -> bool:
        return not self.documents

    def to_dict(self) -> dict:
        return {
            "generatedAt": self.generated_at,
            "documents": [d.to_dict() for d in self.documents],
            "index": self.index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SearchArtifact":
        return cls(
            generated_at=data.get("generatedAt", ""),
            documents=[Document.from_dict(d) for d in data.get("documents", [])],
            index={k: list(v) for k, v in (data.get("index") or {}).items()},
        )
