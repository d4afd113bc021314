"""
Tests for keyword extraction.
"""

from outliner.keywords import _by_frequency, extract_keywords


def test_phrases_split_on_stop_words():
    """Stop-words and short tokens close the current phrase."""
    prompt = "El impacto de la inteligencia artificial en la educación"
    assert extract_keywords(prompt) == ["Impacto", "Inteligencia Artificial", "Educación"]


def test_phrases_are_capped_at_three_tokens():
    prompt = "quantum computing hardware design principles"
    assert extract_keywords(prompt) == ["Quantum Computing Hardware", "Design Principles"]


def test_duplicates_removed_case_insensitively():
    assert extract_keywords("Solar Energy and solar energy") == ["Solar Energy"]


def test_max_keywords_truncates():
    prompt = "one of two of three of four"
    assert extract_keywords(prompt) == ["One", "Two", "Three", "Four"]
    assert extract_keywords(prompt, 2) == ["One", "Two"]
    assert extract_keywords(prompt, 0) == []


def test_punctuation_is_stripped():
    assert extract_keywords("C++ & AI: the future!") == ["Future"]


def test_digits_are_kept():
    assert extract_keywords("web3 platforms 2024") == ["Web3 Platforms 2024"]


def test_no_content_words():
    assert extract_keywords("a la de el y en") == []
    assert extract_keywords("") == []
    assert extract_keywords(None) == []


def test_non_latin_prompt_yields_nothing():
    assert extract_keywords("人工智能的未来") == []


def test_frequency_ranking():
    tokens = ["data", "big", "data", "cloud", "big", "data"]
    assert _by_frequency(tokens) == ["data", "big", "cloud"]


def test_frequency_ties_keep_first_seen_order():
    tokens = ["beta", "alpha", "beta", "alpha", "gamma", "of", "ai"]
    assert _by_frequency(tokens) == ["beta", "alpha", "gamma"]


def test_latin_letters_outside_latin1_are_kept():
    assert extract_keywords("Česká republika a Kraków") == ["Česká Republika", "Kraków"]
    assert extract_keywords("straße verkehr") == ["Straße Verkehr"]
    assert extract_keywords("łódź œuvre") == ["Łódź Œuvre"]
