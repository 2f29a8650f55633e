from src.domain.services.text_processing import excerpt, normalize, tokenize


def test_normalize_lowercases_and_collapses_whitespace():
    assert normalize("  Signal\n\tTheory   NOTES ") == "signal theory notes"


def test_normalize_is_total():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize(" \n ") == ""


def test_excerpt_removes_code_fences_across_lines():
    raw = "before\n```python\nsecret_token = 1\n```\nafter"
    assert excerpt(raw) == "before after"


def test_excerpt_removes_markup_tags():
    raw = "<p>Hello <strong>world</strong></p><br/>"
    assert excerpt(raw) == "Hello world"


def test_excerpt_keeps_case_and_collapses_whitespace():
    assert excerpt("A\n\n  B") == "A B"


def test_excerpt_hard_cut_is_not_word_aware():
    assert excerpt("abcdef ghijkl", max_len=9) == "abcdef gh"


def test_excerpt_default_length_is_2000():
    assert len(excerpt("x" * 5000)) == 2000


def test_excerpt_empty():
    assert excerpt(None) == ""
    assert excerpt("```\nonly code\n```") == ""


def test_tokenize_returns_distinct_tokens():
    tokens = tokenize("fourier fourier transform fourier")
    assert tokens == {"fourier", "transform"}


def test_tokenize_drops_short_tokens():
    assert tokenize("a bb c dd") == {"bb", "dd"}


def test_tokenize_keeps_punctuation_inside_tokens():
    # Token boundaries are spaces only
    assert tokenize("c++ node.js 2024-01-01") == {"c++", "node.js", "2024-01-01"}


def test_tokenize_empty_and_min_length():
    assert tokenize("") == set()
    assert tokenize(None) == set()
    assert tokenize("ab abc abcd", min_length=4) == {"abcd"}
