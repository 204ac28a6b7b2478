"""
Module for turning hand-typed timestamp listings into chapter entries.

Accepts lines like " (1:23) LABEL ", "- 8:48 : note" or "(1:02:03) Thing".
"""

import re
from typing import Iterable, List

from shownotes.core.normalizers import DEFAULT_ACRONYMS, strip_emoji, tidy_label
from shownotes.models.schemas import ChapterEntry
from shownotes.utils.logger import logging

# H:MM:SS is tried before M:SS at each position, so the first clock wins
CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})|(\d{1,2}):(\d{2})")

LEADING_SEPARATORS_RE = re.compile(r"^[)\]\-–—:>=→|.\s]+")

RICH_TEXT_TOKEN = "{\\rtf"
RICH_TEXT_DELIMITER = "\\"


def format_clock(hours: int, minutes: int, seconds: int) -> str:
    """Render a clock value canonically ("M:SS" without hours, "H:MM:SS" with)."""
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def split_candidate_lines(raw_text: str) -> List[str]:
    """
    Split raw input into candidate lines.

    Rich-text exports are split on their control-word delimiter and filtered to
    the pieces that contain a clock pattern.
    """
    text = raw_text or ""
    if text.lstrip().startswith(RICH_TEXT_TOKEN):
        tokens = [re.sub(r"[{}]", "", t).strip() for t in text.split(RICH_TEXT_DELIMITER)]
        return [t for t in tokens if CLOCK_RE.search(t)]

    lines = (line.strip() for line in re.split(r"\r?\n", text))
    return [line for line in lines if line]


def parse_line(line: str, keep_emoji: bool = False, acronyms: Iterable[str] = DEFAULT_ACRONYMS):
    """
    Parse a single line into a ChapterEntry.

    Returns:
        ChapterEntry, or None when the line has no clock pattern
    """
    match = CLOCK_RE.search(line)
    if not match:
        return None

    if match.group(1) is not None:
        hours, minutes, seconds = (int(match.group(i)) for i in (1, 2, 3))
    else:
        hours = 0
        minutes, seconds = int(match.group(4)), int(match.group(5))

    label = LEADING_SEPARATORS_RE.sub("", line[match.end():])
    if not keep_emoji:
        label = LEADING_SEPARATORS_RE.sub("", strip_emoji(label))
    label = tidy_label(label, acronyms)

    return ChapterEntry(
        time=format_clock(hours, minutes, seconds),
        seconds=hours * 3600 + minutes * 60 + seconds,
        label=label,
    )


def collapse_consecutive_duplicates(entries: List[ChapterEntry]) -> List[ChapterEntry]:
    """Drop entries whose label repeats the previous kept entry's label (case-insensitive)."""
    kept: List[ChapterEntry] = []
    for entry in entries:
        if kept and kept[-1].label.lower() == entry.label.lower():
            continue
        kept.append(entry)
    return kept


def parse_timestamps(
    raw_text: str,
    keep_emoji: bool = False,
    dedupe: bool = True,
    acronyms: Iterable[str] = DEFAULT_ACRONYMS,
) -> List[ChapterEntry]:
    """
    Parse a raw timestamp listing into chapters, in source order.

    Lines without a clock pattern are skipped silently.

    Args:
        raw_text: Multi-line timestamp text (plain or rich-text wrapped)
        keep_emoji: Keep emoji glyphs in labels
        dedupe: Collapse consecutive entries with identical labels
        acronyms: Acronyms restored to upper case in labels

    Returns:
        List of ChapterEntry
    """
    acronyms = tuple(acronyms)
    lines = split_candidate_lines(raw_text)

    entries = []
    for line in lines:
        entry = parse_line(line, keep_emoji=keep_emoji, acronyms=acronyms)
        if entry is not None:
            entries.append(entry)

    skipped = len(lines) - len(entries)
    if dedupe:
        entries = collapse_consecutive_duplicates(entries)

    logging.debug(f"Parsed {len(entries)} chapters ({skipped} lines without a timestamp skipped)")
    return entries
