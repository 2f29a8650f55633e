"""
Text normalization and tokenization for search indexing.

All helpers are pure and total: ``None`` is treated as an empty string and
nothing here raises on odd input.
"""
from typing import Optional, Set
import re

DEFAULT_EXCERPT_LENGTH = 2000
MIN_TOKEN_LENGTH = 2

# Precompile regular expressions to avoid recompilation on every call
_FENCED_BLOCK_RE = re.compile(r'```[\s\S]*?```')
_MARKUP_TAG_RE = re.compile(r'<[^>]+>')
_ALL_WS_RE = re.compile(r'\s+')


def normalize(raw: Optional[str]) -> str:
    """Lowercase, collapse every whitespace run to a single space and trim."""
    if not raw:
        return ""
    return _ALL_WS_RE.sub(' ', str(raw).lower()).strip()


def excerpt(raw: Optional[str], max_len: int = DEFAULT_EXCERPT_LENGTH) -> str:
    """Strip fenced code and markup tags, collapse whitespace, then cut.

    The cut is a hard character cut at ``max_len`` and is not word aware;
    a token split mid-word only loses that one token from the index.
    """
    if not raw:
        return ""

    text = _FENCED_BLOCK_RE.sub(' ', str(raw))
    text = _MARKUP_TAG_RE.sub(' ', text)
    text = _ALL_WS_RE.sub(' ', text).strip()

    if max_len is not None and max_len >= 0:
        text = text[:max_len]
    return text


def tokenize(normalized_text: Optional[str], min_length: int = MIN_TOKEN_LENGTH) -> Set[str]:
    """Split already-normalized text into its distinct tokens.

    Token boundaries are exactly single spaces. Tokens shorter than
    ``min_length`` are discarded.
    """
    if not normalized_text:
        return set()
    return {t for t in normalized_text.split(' ') if t and len(t) >= min_length}


__all__ = ["normalize", "excerpt", "tokenize", "DEFAULT_EXCERPT_LENGTH", "MIN_TOKEN_LENGTH"]
