# outliner/session.py
"""
Editing session around the outline engine.

The session owns the "current outline". It is regenerated from the prompt on
every input change until the user edits a section; after that, edits are kept
and slide-count changes only resize the outline.
"""
import logging
from typing import List, Optional

from .config import (
    DEFAULT_DETAIL_LEVEL,
    DEFAULT_LANGUAGE,
    DEFAULT_SLIDE_COUNT,
    DEFAULT_STYLE,
    DEFAULT_TEMPLATE,
)
from .outline import arrays_equal, build_outline, resize_outline, sanitize
from .schemas import PresentationPayload
from .structures import get_library

logger = logging.getLogger(__name__)


class OutlineSession:
    """
    `language` is kept as given (e.g. "French") and sent to the backend
    unchanged; it only picks a template library, which falls back to English.
    """

    def __init__(self, prompt: str = "", slide_count: int = DEFAULT_SLIDE_COUNT, language: str = DEFAULT_LANGUAGE):
        if slide_count < 1:
            raise ValueError(f"slide_count must be >= 1, got {slide_count}")
        self.prompt = prompt or ""
        self.slide_count = slide_count
        self.language = (language or "").strip() or DEFAULT_LANGUAGE
        self.edited = False
        self.outline: List[str] = build_outline(self.prompt, self.slide_count, self.language)

    def _replace(self, outline: List[str]) -> bool:
        """Store `outline` unless it matches the current one. Returns True on change."""
        if arrays_equal(self.outline, outline):
            return False
        self.outline = outline
        return True

    def regenerate(self) -> bool:
        """Drop manual edits and rebuild from the prompt."""
        self.edited = False
        return self._replace(build_outline(self.prompt, self.slide_count, self.language))

    def set_prompt(self, prompt: str) -> bool:
        self.prompt = prompt or ""
        if self.edited:
            return False
        return self._replace(build_outline(self.prompt, self.slide_count, self.language))

    def set_language(self, language: str) -> bool:
        self.language = (language or "").strip() or DEFAULT_LANGUAGE
        if self.edited:
            return False
        return self._replace(build_outline(self.prompt, self.slide_count, self.language))

    def set_slide_count(self, slide_count: int) -> bool:
        if slide_count < 1:
            raise ValueError(f"slide_count must be >= 1, got {slide_count}")
        self.slide_count = slide_count
        if self.edited:
            resized = resize_outline(sanitize(self.outline, self.language), slide_count, self.language)
            return self._replace(resized)
        return self._replace(build_outline(self.prompt, self.slide_count, self.language))

    def load_outline(self, sections: List[str]) -> None:
        """Adopt a stored or hand-edited outline as-is; it counts as edited."""
        self.outline = list(sections) or [get_library(self.language).new_section]
        self.slide_count = len(self.outline)
        self.edited = True

    def edit_section(self, index: int, text: str) -> None:
        if not 0 <= index < len(self.outline):
            raise IndexError(f"section index {index} out of range (0..{len(self.outline) - 1})")
        outline = list(self.outline)
        outline[index] = text
        self.outline = outline
        self.edited = True

    def add_section(self) -> None:
        library = get_library(self.language)
        self.outline = self.outline + [library.new_section_label(len(self.outline) + 1)]
        self.slide_count = len(self.outline)
        self.edited = True

    def remove_section(self, index: int) -> None:
        if not 0 <= index < len(self.outline):
            raise IndexError(f"section index {index} out of range (0..{len(self.outline) - 1})")
        if len(self.outline) == 1:
            self.outline = [get_library(self.language).new_section]
        else:
            self.outline = self.outline[:index] + self.outline[index + 1:]
        self.slide_count = len(self.outline)
        self.edited = True

    def sanitized_outline(self) -> List[str]:
        return sanitize(self.outline[: self.slide_count], self.language)

    def to_payload(
        self,
        title: Optional[str] = None,
        template: str = DEFAULT_TEMPLATE,
        style: str = DEFAULT_STYLE,
        detail_level: str = DEFAULT_DETAIL_LEVEL,
    ) -> PresentationPayload:
        title = (title if title is not None else self.prompt).strip()
        if not title:
            raise ValueError("a presentation title (or prompt) is required")
        outline = self.sanitized_outline()
        logger.debug("payload built: slides=%d edited=%s", len(outline), self.edited)
        return PresentationPayload.from_outline(
            title=title,
            outline=outline,
            language=self.language,
            template=template or DEFAULT_TEMPLATE,
            style=style,
            detail_level=detail_level,
        )
