"""
Prefix-capable inverted index over a sorted document list.

Index format:
{
  "<token or prefix>": [<ordinal>, ...]
}

Ordinals are positions in the final, sorted document array. Every token of
a document is posted under its exact key and under each prefix of length
``MIN_PREFIX_LENGTH``..``min(max_prefix_length, len(token))``, so a client
resolves a 2-12 character prefix query with a single lookup.
"""
from __future__ import annotations

import bisect
import logging
from typing import Dict, List, Sequence

from ..entities.document import Document
from .text_processing import MIN_TOKEN_LENGTH, tokenize

logger = logging.getLogger(__name__)

MIN_PREFIX_LENGTH = 2
DEFAULT_MAX_PREFIX_LENGTH = 12

InvertedIndex = Dict[str, List[int]]


def add_posting(index: InvertedIndex, key: str, ordinal: int) -> None:
    """Insert ``ordinal`` under ``key``, at most once.

    Builds append ordinals in increasing order, so comparing against the
    last element is enough. An out-of-order ordinal goes through a bisect
    membership check instead, so the list stays strictly increasing.
    """
    postings = index.setdefault(key, [])
    if not postings or postings[-1] < ordinal:
        postings.append(ordinal)
        return
    if postings[-1] == ordinal:
        return
    pos = bisect.bisect_left(postings, ordinal)
    if pos == len(postings) or postings[pos] != ordinal:
        postings.insert(pos, ordinal)


def index_token(index: InvertedIndex, token: str, ordinal: int,
                max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH) -> None:
    """Post ``ordinal`` under ``token`` and its prefixes."""
    if not token or len(token) < MIN_PREFIX_LENGTH:
        return

    add_posting(index, token, ordinal)

    for size in range(MIN_PREFIX_LENGTH, min(max_prefix_length, len(token)) + 1):
        add_posting(index, token[:size], ordinal)


class IndexBuilder:
    """Builds the inverted index for an already sorted document sequence"""

    def __init__(self, max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH,
                 min_token_length: int = MIN_TOKEN_LENGTH):
        if max_prefix_length < MIN_PREFIX_LENGTH:
            raise ValueError(f"max_prefix_length must be at least {MIN_PREFIX_LENGTH}")
        self.max_prefix_length = max_prefix_length
        self.min_token_length = max(min_token_length, MIN_PREFIX_LENGTH)

    def build(self, documents: Sequence[Document]) -> InvertedIndex:
        index: InvertedIndex = {}

        for ordinal, document in enumerate(documents):
            # sorted() fixes key insertion order; set iteration order varies per process
            for token in sorted(tokenize(document.text, self.min_token_length)):
                index_token(index, token, ordinal, self.max_prefix_length)

        logger.debug("Indexed %d documents into %d keys", len(documents), len(index))
        return index


def build_index(documents: Sequence[Document], max_prefix_length: int = DEFAULT_MAX_PREFIX_LENGTH) -> InvertedIndex:
    return IndexBuilder(max_prefix_length=max_prefix_length).build(documents)


__all__ = ["IndexBuilder", "build_index", "add_posting", "index_token", "InvertedIndex"]
