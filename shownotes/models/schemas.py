"""
Data models for the show-notes generator.
"""
import re
from enum import Enum
from typing import Optional, List, Dict, Any, Iterable, Tuple
from pydantic import AliasChoices, BaseModel, Field, field_validator

from shownotes.config import config


class OutputFormat(str, Enum):
    """Document formats that can be rendered."""
    MARKDOWN = "md"
    JSON = "json"
    BOTH = "both"


class ChapterEntry(BaseModel):
    """One normalized timestamped segment marker."""
    time: str
    seconds: int = Field(ge=0)
    label: str = Field(min_length=1)

    model_config = {"frozen": True}


class HashtagTrigger(BaseModel):
    """Regex trigger that unlocks a cluster of hashtags when it matches the summary."""
    pattern: str
    hashtags: Tuple[str, ...]

    model_config = {"frozen": True}

    @field_validator("pattern")
    @classmethod
    def pattern_compiles(cls, v):
        try:
            re.compile(v, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"invalid hashtag trigger pattern {v!r}: {e}") from e
        return v


class KeywordTables(BaseModel):
    """
    Lookup tables used by the normalizers and the tag synthesizer.

    Defaults are the tables of The Searchers Podcast; a brand entry in the
    configuration file may replace any of them.
    """
    acronyms: Tuple[str, ...] = (
        "nbl1", "nbl", "nba", "wnbl", "afl", "aflw", "nrl", "nfl", "ufc", "mma",
        "ais", "ai", "api", "seo", "ceo", "phd", "tv", "uk", "usa",
    )
    primary_tags: Tuple[str, ...] = (
        "the searchers podcast", "atem bior", "kirron byrne",
        "australian podcast", "self improvement podcast", "motivation podcast",
        "basketball podcast", "leadership podcast",
    )
    secondary_tags: Tuple[str, ...] = (
        "growth mindset", "athlete mindset", "coaching", "culture",
        "personal stories", "life lessons", "australia", "south sudan",
    )
    hashtags: Tuple[str, ...] = (
        "#TheSearchersPodcast", "#AtemBior", "#KirronByrne",
        "#PodcastAustralia", "#SelfImprovement", "#MotivationPodcast",
    )
    anchor_tags: Tuple[str, ...] = ("podcast", "australia")
    title_keywords: Tuple[str, ...] = (
        "basketball", "parent", "athlete", "leadership", "culture",
        "faith", "love", "career", "motivation", "coaching",
    )
    primary_candidates: Tuple[str, ...] = (
        "athlete", "parenting", "basketball", "coaching", "leadership",
        "women in sport", "performance", "mindset",
        "australian institute of sport", "wnbl", "nbl1",
    )
    secondary_candidates: Tuple[str, ...] = (
        "youth sport", "junior development", "mental skills", "injury and recovery",
        "habits", "team culture", "motivation tips", "work life balance",
    )
    hashtag_triggers: Tuple[HashtagTrigger, ...] = (
        HashtagTrigger(pattern="basketball", hashtags=("#BasketballPodcast", "#NBL1", "#WNBL")),
        HashtagTrigger(pattern="parent", hashtags=("#SportsParenting",)),
        HashtagTrigger(pattern="athlete|performance", hashtags=("#AthleteMindset",)),
        HashtagTrigger(pattern="leadership", hashtags=("#LeadershipPodcast",)),
    )

    model_config = {"frozen": True}


class PlatformLinks(BaseModel):
    """Platform key -> URL map; every platform is optional."""
    youtube: Optional[str] = None
    spotify: Optional[str] = None
    apple: Optional[str] = None
    anchor: Optional[str] = None
    tiktok: Optional[str] = None
    facebook: Optional[str] = None
    instagram: Optional[str] = None
    patreon: Optional[str] = None
    misc: Optional[str] = Field(default=None, validation_alias=AliasChoices("misc", "mbk"))

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    def present(self) -> Dict[str, str]:
        """Links that are actually set, in platform order."""
        return {k: v for k, v in self.model_dump().items() if v}


class SEODetails(BaseModel):
    """Optional SEO answers collected from the operator."""
    main_keyword: Optional[str] = Field(default=None, alias="mainKeyword")
    guest_expertise: Optional[str] = Field(default=None, alias="guestExpertise")
    target_audience: Optional[str] = Field(default=None, alias="targetAudience")
    key_takeaways: Optional[str] = Field(default=None, alias="keyTakeaways")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def is_empty(self) -> bool:
        return not any(self.model_dump().values())


class BrandProfile(BaseModel):
    """Show identity: display name, default hosts, CTA text and link defaults."""
    name: str
    handle: Optional[str] = None
    hosts: List[str] = []
    cta: Optional[str] = None
    links: PlatformLinks = PlatformLinks()
    misc_label: str = "More clips"
    keywords: KeywordTables = KeywordTables()

    model_config = {"frozen": True}


def split_names(v):
    if v is None:
        return []
    if isinstance(v, str):
        v = [v]
    names = []
    for item in v:
        names.extend(part.strip() for part in str(item).split(","))
    return [n for n in names if n]


class EpisodeRequest(BaseModel):
    """Everything needed to render one episode's show notes."""
    title: Optional[str] = None
    guests: List[str] = []
    hosts: List[str] = []
    brand_name: str = ""
    summary: str
    timestamps_raw: str
    links: PlatformLinks = PlatformLinks()
    seo: SEODetails = SEODetails()
    keep_emoji: bool = False
    dedupe_labels: bool = True

    model_config = {"frozen": True}

    @field_validator("guests", "hosts", mode="before")
    @classmethod
    def split_name_lists(cls, v):
        return split_names(v)

    @field_validator("summary")
    @classmethod
    def summary_not_blank(cls, v):
        if not v or not v.strip():
            raise ValueError("summary must not be empty")
        return v.strip()

    @field_validator("title")
    @classmethod
    def blank_title_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class TagSet(BaseModel):
    """Ordered-unique, lowercase, whitespace-free tag tokens."""
    tags: Tuple[str, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def from_candidates(cls, candidates: Iterable[Optional[str]], max_tags: int = config.MAX_TAGS) -> "TagSet":
        """
        Build a tag set from raw candidate strings.

        Empty candidates are dropped, tokens are lowercased and stripped of all
        whitespace, and the first occurrence of each token wins.
        """
        seen = set()
        tags: List[str] = []
        for candidate in candidates:
            if not candidate:
                continue
            token = "".join(str(candidate).lower().split())
            if not token or token in seen:
                continue
            seen.add(token)
            tags.append(token)
            if len(tags) >= max_tags:
                break
        return cls(tags=tuple(tags))

    @property
    def hashtags(self) -> Tuple[str, ...]:
        return tuple(f"#{t}" for t in self.tags)

    def __len__(self) -> int:
        return len(self.tags)


class EpisodeTags(BaseModel):
    """
    All SEO artifacts derived for one episode.

    `hashtags` are the curated brand and trigger hashtags, which keep their
    CamelCase (`#TheSearchersPodcast`). The lowercase `#`-prefixed form of a
    tag set is `TagSet.hashtags`.
    """
    primary: TagSet = TagSet()
    secondary: TagSet = TagSet()
    keywords: TagSet = TagSet()
    hashtags: Tuple[str, ...] = ()

    model_config = {"frozen": True}


class RenderedDocument(BaseModel):
    """Final rendered show notes."""
    title: str
    slug: str
    markdown_text: str
    json_text: Optional[str] = None
    payload: Dict[str, Any] = {}

    model_config = {"frozen": True}
