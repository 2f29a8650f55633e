"""
Integration tests: content files on disk -> search artifact
"""

import shutil
from datetime import datetime, timezone

from src.application.use_cases.build_search_index import BuildSearchIndexRequest, BuildSearchIndexUseCase
from src.domain.entities.document import SourceType
from src.domain.services.corpus_service import CorpusAssembler
from src.domain.services.text_processing import tokenize
from src.infrastructure.content.markdown_repository import FileSystemContentRepository
from src.infrastructure.persistence import serialize_artifact


FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def build(content_root, clock=lambda: FIXED_NOW):
    assembler = CorpusAssembler(FileSystemContentRepository(content_root))
    return BuildSearchIndexUseCase(assembler, clock=clock).execute()


def test_documents_are_published_only_and_newest_first(content_root):
    artifact = build(content_root).artifact

    ids = [d.id for d in artifact.documents]
    assert ids == ["notes:lab-2", "blog:signal-theory", "projects:amplifier", "research:weekly-1"]
    assert "blog:draft-post" not in ids
    for a, b in zip(artifact.documents, artifact.documents[1:]):
        assert a.date >= b.date


def test_document_fields(content_root):
    docs = {d.id: d for d in build(content_root).artifact.documents}

    blog = docs["blog:signal-theory"]
    assert blog.description == "Notes on the Fourier transform"
    assert blog.url == "/blog/signal-theory/"
    assert "numpy" not in blog.text

    project = docs["projects:amplifier"]
    assert project.description == "Legacy project description"
    assert project.date == "2023-06-15T08:00:00.000Z"
    assert "analog" in project.text.split(" ")

    research = docs["research:weekly-1"]
    assert research.date == "1970-01-01T00:00:00.000Z"
    assert "reading" in research.text.split(" ")
    assert research.description is None

    note = docs["notes:lab-2"]
    assert note.text == "lab 2 pspice measured the op-amp gain."


def test_prefix_completeness(content_root):
    artifact = build(content_root).artifact

    for ordinal, doc in enumerate(artifact.documents):
        for token in tokenize(doc.text):
            assert ordinal in artifact.index[token]
            for k in range(2, min(12, len(token)) + 1):
                assert ordinal in artifact.index[token[:k]]


def test_postings_are_strictly_increasing_and_valid(content_root):
    artifact = build(content_root).artifact
    count = len(artifact.documents)

    for key, postings in artifact.index.items():
        assert all(a < b for a, b in zip(postings, postings[1:])), key
        assert all(0 <= o < count for o in postings), key


def test_index_is_reconstructable_from_documents(content_root):
    artifact = build(content_root).artifact

    expected_keys = set()
    for doc in artifact.documents:
        for token in tokenize(doc.text):
            expected_keys.add(token)
            expected_keys.update(token[:k] for k in range(2, min(12, len(token)) + 1))

    assert set(artifact.index) == expected_keys


def test_repeated_token_is_posted_once(content_root):
    artifact = build(content_root).artifact
    assert artifact.index["fourier"].count(1) == 1


def test_idempotent_builds(content_root):
    first = build(content_root, clock=lambda: datetime(2025, 1, 1, tzinfo=timezone.utc)).artifact
    second = build(content_root, clock=lambda: datetime(2026, 1, 1, tzinfo=timezone.utc)).artifact

    first.generated_at = second.generated_at
    assert serialize_artifact(first) == serialize_artifact(second)


def test_generated_at_uses_clock(content_root):
    assert build(content_root).artifact.generated_at == "2025-03-01T12:00:00.000Z"


def test_missing_notes_collection_is_tolerated(content_root):
    shutil.rmtree(content_root / "notes")

    response = build(content_root)
    artifact = response.artifact

    assert [d.source_type for d in artifact.documents] == [SourceType.BLOG, SourceType.PROJECTS, SourceType.RESEARCH]
    assert "lab" not in artifact.index
    assert response.documents_per_type["notes"] == 0


def test_empty_corpus(tmp_path):
    response = build(tmp_path / "does-not-exist")

    assert response.artifact.to_dict()["documents"] == []
    assert response.artifact.to_dict()["index"] == {}
    assert response.total_documents == 0


def test_request_can_restrict_source_types(content_root):
    response = build_with_request(content_root, [SourceType.NOTES])
    assert [d.id for d in response.artifact.documents] == ["notes:lab-2"]
    assert set(response.artifact.index["lab"]) == {0}


def build_with_request(content_root, source_types):
    assembler = CorpusAssembler(FileSystemContentRepository(content_root))
    use_case = BuildSearchIndexUseCase(assembler, clock=lambda: FIXED_NOW)
    return use_case.execute(BuildSearchIndexRequest(source_types=source_types))


def test_signal_theory_scenario(tmp_path, corpus_writer):
    root = corpus_writer(tmp_path / "content", {
        "blog/signal.md": (
            "---\ntitle: Signal Theory\nstatus: published\ntags: [fourier]\ndate: 2024-01-01\n---\n"
            "the fourier transform\n"
        ),
        "notes/lab.md": "---\ntitle: Lab 2\nstatus: published\ndate: 2024-02-01\n---\n",
    })

    artifact = build(root).artifact
    note_ordinal, blog_ordinal = 0, 1

    assert artifact.documents[note_ordinal].id == "notes:lab"
    assert artifact.documents[blog_ordinal].id == "blog:signal"
    assert artifact.index["fourier"] == [blog_ordinal]
    assert artifact.index["fo"] == [blog_ordinal]
    assert artifact.index["lab"] == [note_ordinal]
    assert not any(postings == [0, 1] for postings in artifact.index.values())
