# outliner/outline.py
"""
Heuristic outline builder and sanitizer.

build_outline() maps a prompt and a slide count to an ordered list of section
titles of exactly that length; sanitize() is the cleanup applied to every
generated or hand-edited outline before it is stored.
"""
import json
import logging
from typing import Any, Iterable, List, Optional, Sequence

from .config import DEFAULT_LANGUAGE, SECTION_MAX_CHARS
from .keywords import extract_keywords
from .structures import get_library
from .text import capitalize_first, collapse_ws, truncate
from .topic import normalize_topic

logger = logging.getLogger(__name__)


def format_section(text: Optional[str], index: int, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Clean one outline entry: single spaces, trimmed, first letter capitalized,
    capped at SECTION_MAX_CHARS. Blank entries become "Section {index + 1}".
    """
    cleaned = collapse_ws(text or "")
    if not cleaned:
        return get_library(language).section_label(index + 1)
    return truncate(capitalize_first(cleaned), SECTION_MAX_CHARS)


def _dedupe_sections(items: Iterable[str]) -> List[str]:
    seen = set()
    uniques: List[str] = []
    for raw in items:
        cleaned = collapse_ws(raw)
        key = cleaned.lower()
        if not cleaned or key in seen:
            continue
        seen.add(key)
        uniques.append(cleaned)
    return uniques


def build_outline(prompt: str, slide_count: int, language: str = DEFAULT_LANGUAGE) -> List[str]:
    if slide_count < 1:
        raise ValueError(f"slide_count must be >= 1, got {slide_count}")

    library = get_library(language)
    trimmed = (prompt or "").strip()
    topic = normalize_topic(trimmed, library.code)
    base = library.base_sections(topic)

    if slide_count <= len(base):
        return [format_section(s, i, library.code) for i, s in enumerate(base[:slide_count])]

    keywords = extract_keywords(trimmed, slide_count)
    keyword_sections = [library.subtopic(i, kw, topic) for i, kw in enumerate(keywords, 1)]
    sections = _dedupe_sections(base + keyword_sections)

    # Padding wraps over the fallback structure, so very long decks repeat it.
    fallback_index = 0
    while len(sections) < slide_count:
        sections.append(library.fallback_section(fallback_index, topic))
        fallback_index += 1

    logger.debug(
        "outline built: topic=%r keywords=%d fallback=%d slides=%d",
        topic, len(keywords), fallback_index, slide_count,
    )
    return [format_section(s, i, library.code) for i, s in enumerate(sections[:slide_count])]


def sanitize(sections: Sequence[Optional[str]], language: str = DEFAULT_LANGUAGE) -> List[str]:
    return [format_section(s, i, language) for i, s in enumerate(sections)]


def arrays_equal(a: Sequence[str], b: Sequence[str]) -> bool:
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def resize_outline(sections: Sequence[Optional[str]], count: int, language: str = DEFAULT_LANGUAGE) -> List[str]:
    """
    Fit an existing (possibly hand-edited) outline to `count` entries without
    regenerating it: blank entries are dropped, missing ones are appended as
    "New section N", extra ones are cut from the end.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    library = get_library(language)
    result = [s for s in sections if s]
    while len(result) < count:
        result.append(library.new_section_label(len(result) + 1))
    return sanitize(result[:count], library.code)


def parse_outline(raw: Any, language: str = DEFAULT_LANGUAGE) -> List[str]:
    """
    Decode an outline as stored by the backend: a JSON string, a list, or an
    object with an "outline" list. Never raises; unusable input yields the
    single-entry default outline.
    """
    library = get_library(language)
    default = [library.new_section]
    if not raw:
        return default

    if isinstance(raw, str):
        try:
            decoded = json.loads(raw)
        except ValueError:
            return [raw]
        if isinstance(decoded, str):
            return [decoded] if decoded else default
        return parse_outline(decoded, library.code)

    if isinstance(raw, (list, tuple)):
        parsed = []
        for i, item in enumerate(raw):
            if isinstance(item, str):
                parsed.append(item)
            elif item is None:
                parsed.append(library.section_label(i + 1))
            else:
                parsed.append(str(item))
        return parsed or default

    if isinstance(raw, dict) and isinstance(raw.get("outline"), list):
        return parse_outline(raw["outline"], library.code)

    return default


def build_prompt_from_topic(
    title: str = "",
    description: str = "",
    tags: Optional[Sequence[str]] = None,
    category: str = "",
    topic_key: str = "",
) -> str:
    """Seed a prompt from a suggested-topic catalog entry, one labelled line per field."""
    lines = []
    if title:
        lines.append(f"Topic: {title}")
    if description:
        lines.append(f"Description: {description}")
    if tags:
        lines.append(f"Keywords: {', '.join(tags)}")
    if category:
        lines.append(f"Category: {category}")
    if topic_key:
        lines.append(f"Internal reference: {topic_key}")
    return "\n".join(lines)
