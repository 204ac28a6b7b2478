"""
Module for assembling show notes into Markdown and a JSON mirror.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from shownotes.core.normalizers import collapse_whitespace, ensure_period, escape_markdown
from shownotes.core.tagging import join_names
from shownotes.models.schemas import (
    BrandProfile,
    ChapterEntry,
    EpisodeTags,
    PlatformLinks,
    SEODetails,
)

NO_TIMESTAMPS = "_No timestamps provided._"
LINKS_COMING_SOON = "_Links coming soon._"

LISTEN_LABELS = {
    "youtube": "YouTube",
    "spotify": "Spotify",
    "apple": "Apple Podcasts",
    "anchor": "Anchor (RSS)",
}

FOLLOW_LABELS = {
    "anchor": "Anchor",
    "spotify": "Spotify",
    "apple": "Apple",
    "youtube": "YouTube",
    "tiktok": "TikTok",
    "facebook": "Facebook",
    "instagram": "Instagram",
}

PATREON_PERKS = [
    "Early episode access",
    "Behind-the-scenes clips",
    "Your name shouted out on the show",
    "A front-row seat in our journey 💯",
]


def build_description(
    summary: str,
    hosts: Sequence[str] = (),
    guests: Sequence[str] = (),
    brand_name: Optional[str] = None,
    seo: Optional[SEODetails] = None,
) -> str:
    """
    Build the description body, mentioning brand, hosts and guests for SEO.

    Missing hosts or guests drop their phrase rather than leaving a gap.
    """
    lead = f"In this episode of **{brand_name}**" if brand_name else "In this episode"
    if hosts:
        lead += f", hosted by **{join_names(hosts)}**"
    if guests:
        lead += f", featuring **{join_names(guests)}**"

    summary = collapse_whitespace(summary)
    description = f"{lead}. {ensure_period(summary)}" if summary else f"{lead}."
    if seo and seo.key_takeaways:
        description += f"\n\n**Key Takeaways:**\n{seo.key_takeaways}"
    return description


class ShowNotesRenderer:
    """Pure string templating over already-normalized episode content."""

    def __init__(self, brand: BrandProfile):
        self.brand = brand

    def render_chapters(self, chapters: Sequence[ChapterEntry]) -> str:
        if not chapters:
            return NO_TIMESTAMPS
        return "\n".join(f"{c.time} – {escape_markdown(c.label)}" for c in chapters)

    def render_listen(self, links: PlatformLinks) -> str:
        present = links.present()
        lines = [f"{label} → {present[key]}" for key, label in LISTEN_LABELS.items() if key in present]
        return "\n".join(lines) if lines else LINKS_COMING_SOON

    def render_follow(self, links: PlatformLinks) -> str:
        present = links.present()
        labels = dict(FOLLOW_LABELS, misc=self.brand.misc_label)
        lines = [f"{label} - {present[key]}" for key, label in labels.items() if key in present]
        return "\n".join(lines) if lines else LINKS_COMING_SOON

    def render_support(self, brand_name: str, links: PlatformLinks) -> Optional[str]:
        """Patreon call to action; None when there is neither CTA text nor a Patreon link."""
        if not links.patreon and not self.brand.cta:
            return None

        parts = [f"## 🪙 **Support {brand_name} on Patreon**"]
        if self.brand.cta:
            parts.append(self.brand.cta.strip())
        if links.patreon:
            parts.append(f"🪙 **Join the movement for just $10/month:**  \n{links.patreon}")
            parts.append("You’ll get:\n" + "\n".join(f"* {perk}" for perk in PATREON_PERKS))
        return "\n\n".join(parts)

    def render_markdown(
        self,
        title: str,
        description: str,
        chapters: Sequence[ChapterEntry],
        tags: EpisodeTags,
        links: PlatformLinks,
        brand_name: Optional[str] = None,
    ) -> str:
        """
        Render the full Markdown document.

        Section order: title, description, timestamps, listen links, support,
        follow links, tags, hashtags.
        """
        brand_name = brand_name or self.brand.name
        handle = f" @{self.brand.handle}" if self.brand.handle else ""

        sections: List[str] = [
            f"## 🎙️ **Episode Title**\n**{escape_markdown(title)}**",
            f"## 📝 **Episode Description**\n{description}",
            f"## 💬 **Timestamps**\n{self.render_chapters(chapters)}",
            f"## 🎧 **Listen on Spotify, Apple & More**\n{self.render_listen(links)}",
        ]

        support = self.render_support(brand_name, links)
        if support:
            sections.append(support)

        sections.append(f"## 📲 **Follow {brand_name}{handle}**\n{self.render_follow(links)}")

        if tags.primary.tags:
            sections.append(f"## 🏷️ **Primary Tags**\n{', '.join(tags.primary.tags)}")
        if tags.secondary.tags:
            sections.append(f"## 🔖 **Secondary Tags**\n{', '.join(tags.secondary.tags)}")
        if tags.keywords.tags:
            sections.append(f"## 🔎 **Search Keywords**\n{', '.join(tags.keywords.tags)}")
        if tags.hashtags:
            sections.append(f"## #️⃣ **Hashtags**\n{' '.join(tags.hashtags)}")

        return "\n\n".join(sections) + "\n"

    def build_payload(
        self,
        title: str,
        slug: str,
        description: str,
        chapters: Sequence[ChapterEntry],
        tags: EpisodeTags,
        links: PlatformLinks,
        seo: Optional[SEODetails] = None,
        brand_name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Structured mirror of the Markdown document."""
        return {
            "title": title,
            "slug": slug,
            "brand": brand_name or self.brand.name,
            "description": description,
            "chapters": [c.model_dump() for c in chapters],
            "links": links.present(),
            "tags": {
                "primary": list(tags.primary.tags),
                "secondary": list(tags.secondary.tags),
                "keywords": list(tags.keywords.tags),
            },
            "hashtags": list(tags.hashtags),
            "seo": {k: v for k, v in (seo or SEODetails()).model_dump().items() if v},
        }

    def render_json(self, payload: Dict[str, Any], markdown_text: str) -> str:
        return json.dumps({**payload, "markdown": markdown_text}, indent=2, ensure_ascii=False)
