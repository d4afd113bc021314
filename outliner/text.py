# outliner/text.py
"""
Small string helpers shared by the topic, keyword and outline modules.
"""
import re

ELLIPSIS = "…"

_WS_RE = re.compile(r"\s+")


def collapse_ws(s: str) -> str:
    return _WS_RE.sub(" ", (s or "").strip())


def truncate(s: str, n: int) -> str:
    s = collapse_ws(s)
    return s if len(s) <= n else s[: n - 1].rstrip() + ELLIPSIS


def capitalize_first(s: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    return s[:1].upper() + s[1:]


def title_word(word: str) -> str:
    """Upper-case the first character and lower-case the remainder."""
    return word[:1].upper() + word[1:].lower()
