"""
Text normalizers shared by the timestamp parser, tag synthesizer and renderer.
"""

import re
import unicodedata
from typing import Iterable, Optional

from shownotes.models.schemas import KeywordTables

DEFAULT_ACRONYMS = KeywordTables().acronyms
PLACEHOLDER_LABEL = "Segment"

# Best-effort block list, not a full emoji database
EMOJI_RE = re.compile(
    "["
    "\u2600-\u27BF"          # misc symbols, dingbats
    "\uE000-\uF8FF"          # private use area
    "\U0001F000-\U0001FAFF"  # mahjong .. symbols & pictographs extended-A
    "\u200D\uFE0F"           # zero-width joiner, variation selector-16
    "]"
)

TRAILING_PUNCT_RE = re.compile(r"[\s:;,\-–—|]+$")
MARKDOWN_SPECIAL_RE = re.compile(r"([*_`])")


def strip_emoji(text: str) -> str:
    """Remove emoji/symbol code points and trim the result."""
    return EMOJI_RE.sub("", text).strip()


def _acronym_pattern(acronyms: Iterable[str]) -> Optional[re.Pattern]:
    words = sorted({a.lower() for a in acronyms if a}, key=len, reverse=True)
    if not words:
        return None
    return re.compile(r"\b(" + "|".join(re.escape(w) for w in words) + r")\b", re.IGNORECASE)


def to_sentence_case_preserve_acronyms(text: str, acronyms: Iterable[str] = DEFAULT_ACRONYMS) -> str:
    """
    Sentence-case text, then restore whitelisted acronyms to upper case.

    Example:
        "the NBA finals" -> "The NBA finals"
    """
    lower = text.lower()
    sentence = lower[:1].upper() + lower[1:]
    pattern = _acronym_pattern(acronyms)
    if pattern is None:
        return sentence
    return pattern.sub(lambda m: m.group(0).upper(), sentence)


def tidy_label(text: str, acronyms: Iterable[str] = DEFAULT_ACRONYMS) -> str:
    """Collapse spacing, drop trailing separators and sentence-case a chapter label."""
    if not text:
        return PLACEHOLDER_LABEL
    text = re.sub(r"\s+", " ", text).strip()
    text = TRAILING_PUNCT_RE.sub("", text)
    if not text:
        return PLACEHOLDER_LABEL
    return to_sentence_case_preserve_acronyms(text, acronyms)


def slugify(text: str) -> str:
    """Lowercase, strip diacritics and join words with hyphens."""
    text = unicodedata.normalize("NFKD", text or "")
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"-{2,}", "-", text)
    return text.strip("-")


def escape_markdown(text: str) -> str:
    """Escape emphasis and code markers only."""
    return MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def ensure_period(text: str) -> str:
    return text if re.search(r"[.!?]$", text) else text + "."


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text or "").strip()
