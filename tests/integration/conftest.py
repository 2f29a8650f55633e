from pathlib import Path

import pytest


CORPUS = {
    "blog/signal-theory.md": (
        "---\n"
        "title: Signal Theory\n"
        "status: published\n"
        "publishedAt: 2024-01-01\n"
        "summary: Notes on the Fourier transform\n"
        "tags: [fourier, signals]\n"
        "---\n"
        "The Fourier transform maps time to frequency. Fourier, fourier, fourier.\n"
        "```python\nimport numpy\n```\n"
    ),
    "blog/draft-post.md": (
        "---\n"
        "title: Unfinished Draft\n"
        "status: draft\n"
        "publishedAt: 2024-09-01\n"
        "---\n"
        "Should never be indexed.\n"
    ),
    "notes/lab-2.md": (
        "---\n"
        "title: Lab 2\n"
        "status: published\n"
        "date: 2024-02-01\n"
        "tags: [pspice]\n"
        "---\n"
        "Measured the <b>op-amp</b> gain.\n"
    ),
    "projects/amplifier/index.md": (
        "---\n"
        "title: Class AB Amplifier\n"
        "status: published\n"
        "publishedAt: '2023-06-15T08:00:00Z'\n"
        "description: Legacy project description\n"
        "category: Analog\n"
        "featured: true\n"
        "---\n"
        "Push-pull output stage.\n"
    ),
    "research/weekly-1.md": (
        "---\n"
        "title: Weekly Reading\n"
        "status: published\n"
        "publishedAt: not-a-date\n"
        "type: reading\n"
        "---\n"
        "Electromagnetism chapter one.\n"
    ),
}


def write_corpus(root: Path, files=None) -> Path:
    for rel, text in (files or CORPUS).items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def content_root(tmp_path):
    return write_corpus(tmp_path / "content")


@pytest.fixture
def corpus_writer():
    return write_corpus
