"""
outliner: rule-based slide outline generation for presentation drafts.

Turns a free-form prompt and a slide count into an ordered list of section
titles, and cleans hand-edited outlines before they are persisted.
"""

__version__ = "1.0.0"

from outliner.outline import arrays_equal, build_outline, sanitize
from outliner.session import OutlineSession

__all__ = [
    "build_outline",
    "sanitize",
    "arrays_equal",
    "OutlineSession",
]
