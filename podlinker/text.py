"""Text comparison helpers shared by show and episode matching."""
from __future__ import annotations
import re

_WS_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lowercase, trim and collapse whitespace. Used for comparison only."""
    return _WS_RE.sub(" ", (text or "").lower().strip())


def same_text(a: str, b: str) -> bool:
    return normalize_text(a) == normalize_text(b)


def fuzzy_match(candidate: str, target: str) -> bool:
    """True on normalized equality or containment in either direction."""
    a = normalize_text(candidate)
    b = normalize_text(target)
    return a == b or b in a or a in b
