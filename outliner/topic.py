# outliner/topic.py
"""
Topic label derivation.

The topic is the first sentence of the prompt, shortened and title-cased so it
can be dropped into the section templates.
"""
import re

from .config import DEFAULT_LANGUAGE, TOPIC_MAX_CHARS
from .structures import get_library
from .text import collapse_ws, title_word, truncate

# Spanish and English function words that stay lower-case in titles and never
# start a keyword phrase.
STOP_WORDS = frozenset({
    "el", "la", "los", "las", "de", "del", "y", "o", "que", "en", "para", "con",
    "por", "sobre", "desde", "hasta", "a", "un", "una", "unos", "unas", "se",
    "su", "sus", "al", "lo", "es", "son", "como", "más", "menos",
    "the", "and", "for", "from", "into", "onto", "about", "of", "to", "in",
    "on", "by", "an", "or", "at", "this", "that", "these", "those", "it",
    "its", "be", "are", "was", "were", "etc", "etc.", "u",
})

_SENTENCE_END_RE = re.compile(r"[.?!\n]")


def _first_segment(text: str) -> str:
    for segment in _SENTENCE_END_RE.split(text):
        if segment.strip():
            return segment
    return ""


def _case_word(word: str) -> str:
    lower = word.lower()
    if lower in STOP_WORDS:
        return lower
    return title_word(word)


def normalize_topic(prompt: str, language: str = DEFAULT_LANGUAGE) -> str:
    segment = collapse_ws(_first_segment(prompt or ""))
    if not segment:
        # Empty prompts and prompts made only of terminators.
        return get_library(language).fallback_topic
    # Casing can lengthen a word ("ß" -> "SS"), so shrink the cut until the
    # cased result fits.
    limit = TOPIC_MAX_CHARS
    while True:
        limited = truncate(segment, limit)
        topic = " ".join(_case_word(w) for w in limited.split(" "))
        if len(topic) <= TOPIC_MAX_CHARS:
            return topic
        limit -= len(topic) - TOPIC_MAX_CHARS
