import re
import unicodedata
from typing import Optional

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """Canonicalizes free text for tolerant comparison.

    Lower-cases, strips diacritics ("Atlético" -> "atletico"), drops anything
    that is not an ASCII letter, digit or whitespace, then collapses and trims
    whitespace. Empty or missing input yields an empty string.
    """
    if not text:
        return ""

    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    cleaned = _NON_ALNUM.sub("", stripped)
    return _WHITESPACE.sub(" ", cleaned).strip()
