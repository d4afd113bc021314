# outliner/keywords.py
"""
Heuristic keyword extraction: no stemming, no model, just stop-word aware
phrase grouping with a frequency ranking as fallback.
"""
import unicodedata
from collections import Counter
from typing import List

from .config import DEFAULT_MAX_KEYWORDS
from .text import capitalize_first
from .topic import STOP_WORDS

MAX_PHRASE_TOKENS = 3
MIN_TOKEN_CHARS = 3


# Latin-script letters (any accent), ASCII digits and whitespace survive; every
# other character becomes a token boundary.
def _keep(ch: str) -> bool:
    if ch.isspace() or "0" <= ch <= "9":
        return True
    return ch.isalpha() and unicodedata.name(ch, "").startswith("LATIN")


def _tokenize(text: str) -> List[str]:
    return "".join(ch if _keep(ch) else " " for ch in (text or "").lower()).split()


def _is_content(token: str) -> bool:
    return len(token) >= MIN_TOKEN_CHARS and token not in STOP_WORDS


def _dedupe(items: List[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        key = item.lower()
        if not item or key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


def _phrases(tokens: List[str]) -> List[str]:
    phrases: List[str] = []
    current: List[str] = []
    for token in tokens:
        if not _is_content(token):
            if current:
                phrases.append(" ".join(current))
                current = []
            continue
        current.append(token)
        if len(current) >= MAX_PHRASE_TOKENS:
            phrases.append(" ".join(current))
            current = []
    if current:
        phrases.append(" ".join(current))
    return phrases


def _by_frequency(tokens: List[str]) -> List[str]:
    counts = Counter(t for t in tokens if _is_content(t))
    # sorted() is stable and Counter keeps first-seen order, so ties rank by position
    return [word for word, _ in sorted(counts.items(), key=lambda kv: kv[1], reverse=True)]


def extract_keywords(prompt: str, max_keywords: int = DEFAULT_MAX_KEYWORDS) -> List[str]:
    tokens = _tokenize(prompt)
    candidates = _dedupe(_phrases(tokens))
    if not candidates:
        candidates = _by_frequency(tokens)

    keywords = [" ".join(capitalize_first(w) for w in phrase.split()) for phrase in candidates]
    return [k for k in keywords if k][:max(0, max_keywords)]
