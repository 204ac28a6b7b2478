"""
Module for deriving SEO tags, hashtags and titles from episode metadata.

Matching is deliberately loose: a candidate phrase is picked when its first
word appears anywhere in the lowercased summary.
"""

import re
from typing import Iterable, List, Optional, Sequence

from shownotes.config import config
from shownotes.core.normalizers import collapse_whitespace, to_sentence_case_preserve_acronyms
from shownotes.models.schemas import EpisodeTags, KeywordTables, SEODetails, TagSet

TITLE_SPLIT_RE = re.compile(r"(?:[^\w+]|_)+")


def dedupe(items: Iterable[Optional[str]]) -> List[str]:
    """Case-insensitive dedupe that keeps the first spelling and drops empties."""
    seen = set()
    out = []
    for item in items:
        if not item:
            continue
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out


def pick_keywords(text: Optional[str], candidates: Iterable[str]) -> List[str]:
    """Keep candidates whose first word is a substring of the lowercased text."""
    t = (text or "").lower()
    return [k for k in candidates if k and k.split(" ")[0] in t]


def join_names(names: Sequence[str]) -> str:
    """'A', 'A & B', 'A, B & C'."""
    names = [n for n in names if n]
    if len(names) <= 1:
        return "".join(names)
    return f"{', '.join(names[:-1])} & {names[-1]}"


def _cap(s: str) -> str:
    return s[:1].upper() + s[1:]


class TagSynthesizer:
    """Deterministic tag, hashtag and title derivation over injected keyword tables."""

    def __init__(self, tables: Optional[KeywordTables] = None, max_tags: int = config.MAX_TAGS):
        self.tables = tables or KeywordTables()
        self.max_tags = max_tags
        self._triggers = [
            (re.compile(trigger.pattern, re.IGNORECASE), trigger.hashtags)
            for trigger in self.tables.hashtag_triggers
        ]

    def tokenize_title(self, title: Optional[str]) -> List[str]:
        """Lowercase title tokens longer than two characters."""
        return [tok.lower() for tok in TITLE_SPLIT_RE.split(title or "") if len(tok) > 2]

    def build_tags(self, title: Optional[str], theme: Optional[str], guests: Sequence[str] = ()) -> TagSet:
        """
        Build the generic keyword tag set.

        Args:
            title: Episode title
            theme: Theme string, usually the brand name
            guests: Guest names

        Returns:
            TagSet of anchors, theme, title tokens and guests
        """
        candidates = [*self.tables.anchor_tags, theme, *self.tokenize_title(title), *guests]
        return TagSet.from_candidates(candidates, self.max_tags)

    def primary_keywords(self, summary: str, guests: Sequence[str] = ()) -> List[str]:
        out = pick_keywords(summary, self.tables.primary_candidates)
        out.extend(f"{guest.lower()} interview" for guest in guests if guest)
        return out

    def secondary_keywords(self, summary: str) -> List[str]:
        return pick_keywords(summary, self.tables.secondary_candidates)

    def trigger_hashtags(self, summary: str) -> List[str]:
        """Hashtag clusters unlocked by the trigger patterns that match the summary."""
        out: List[str] = []
        for pattern, hashtags in self._triggers:
            if pattern.search(summary or ""):
                out.extend(hashtags)
        return out

    def synthesize(
        self,
        title: Optional[str],
        summary: str,
        guests: Sequence[str] = (),
        theme: Optional[str] = None,
        seo: Optional[SEODetails] = None,
    ) -> EpisodeTags:
        """
        Derive every tag artifact for one episode.

        Tag sets are lowercase and whitespace-free. Hashtags only lose their
        internal whitespace and keep the curated casing.

        Args:
            title: Resolved episode title
            summary: Free-text episode summary
            guests: Guest names
            theme: Theme string (brand name)
            seo: Optional operator-supplied SEO details

        Returns:
            EpisodeTags
        """
        seo = seo or SEODetails()
        primary = TagSet.from_candidates(
            [
                *self.tables.primary_tags,
                *self.primary_keywords(summary, guests),
                seo.main_keyword,
                seo.guest_expertise,
            ],
            self.max_tags,
        )
        secondary = TagSet.from_candidates(
            [*self.tables.secondary_tags, *self.secondary_keywords(summary), seo.target_audience],
            self.max_tags,
        )
        hashtags = dedupe(
            "".join(tag.split()) for tag in [*self.tables.hashtags, *self.trigger_hashtags(summary)]
        )
        return EpisodeTags(
            primary=primary,
            secondary=secondary,
            keywords=self.build_tags(title, theme, guests),
            hashtags=tuple(hashtags[: self.max_tags]),
        )

    def auto_title(
        self,
        summary: str,
        guests: Sequence[str] = (),
        brand_name: Optional[str] = None,
        max_words: int = config.AUTO_TITLE_WORDS,
    ) -> str:
        """
        Suggest a title when none was given.

        Uses up to three matched title keywords, falling back to the first words
        of the summary, then appends the guests and the brand.
        """
        parts = []
        core = pick_keywords(summary, self.tables.title_keywords)
        if core:
            parts.append(", ".join(_cap(k) for k in core[:3]))
        else:
            words = collapse_whitespace(summary).split(" ")[:max_words]
            lead = re.sub(r"[\s.,;:!?\-–—]+$", "", " ".join(words))
            if lead:
                parts.append(to_sentence_case_preserve_acronyms(lead, self.tables.acronyms))
        if guests:
            parts.append(f"With {join_names(guests)}")
        if brand_name:
            parts.append(brand_name)
        return " | ".join(parts)
