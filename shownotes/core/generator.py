"""
Module for turning an episode request into rendered show notes.
"""

from typing import Optional

from shownotes.config import config
from shownotes.core.normalizers import slugify
from shownotes.core.renderer import ShowNotesRenderer, build_description
from shownotes.core.tagging import TagSynthesizer
from shownotes.core.timestamps import parse_timestamps
from shownotes.models.schemas import BrandProfile, EpisodeRequest, OutputFormat, RenderedDocument
from shownotes.utils.logger import logging


class EpisodeGenerator:
    """Class to run the parse -> tag -> render pipeline for one brand."""

    def __init__(self, brand: BrandProfile, max_tags: int = config.MAX_TAGS):
        """
        Initialize the generator with a brand profile.

        Args:
            brand: Brand profile supplying keyword tables and CTA text
            max_tags: Cap applied to every tag list
        """
        self.brand = brand
        self.tables = brand.keywords
        self.synthesizer = TagSynthesizer(self.tables, max_tags=max_tags)
        self.renderer = ShowNotesRenderer(brand)

    def resolve_title(self, request: EpisodeRequest) -> str:
        """Explicit title wins; otherwise derive one from the summary."""
        if request.title:
            return request.title
        return self.synthesizer.auto_title(
            request.summary,
            request.guests,
            request.brand_name or self.brand.name,
            max_words=config.AUTO_TITLE_WORDS,
        )

    def generate(
        self,
        request: EpisodeRequest,
        output_format: OutputFormat = OutputFormat.MARKDOWN,
    ) -> RenderedDocument:
        """
        Generate show notes for one episode.

        Args:
            request: Episode request
            output_format: Whether to also build the JSON mirror

        Returns:
            RenderedDocument
        """
        brand_name = request.brand_name or self.brand.name

        chapters = parse_timestamps(
            request.timestamps_raw,
            keep_emoji=request.keep_emoji,
            dedupe=request.dedupe_labels,
            acronyms=self.tables.acronyms,
        )
        logging.info(f"Parsed {len(chapters)} chapter(s)")

        title = self.resolve_title(request)
        logging.info(f"Episode title: {title}")

        tags = self.synthesizer.synthesize(
            title, request.summary, request.guests, theme=brand_name, seo=request.seo
        )
        description = build_description(
            request.summary, request.hosts, request.guests, brand_name, request.seo
        )

        markdown_text = self.renderer.render_markdown(
            title, description, chapters, tags, request.links, brand_name
        )

        slug = slugify(title)
        payload = self.renderer.build_payload(
            title, slug, description, chapters, tags, request.links, request.seo, brand_name
        )

        json_text = None
        if output_format in (OutputFormat.JSON, OutputFormat.BOTH):
            json_text = self.renderer.render_json(payload, markdown_text)

        return RenderedDocument(
            title=title,
            slug=slug,
            markdown_text=markdown_text,
            json_text=json_text,
            payload=payload,
        )


def generate_episode_markdown(request: EpisodeRequest, brand: Optional[BrandProfile] = None) -> str:
    """Render only the Markdown show notes for a request."""
    brand = brand or BrandProfile(name=request.brand_name or "Podcast")
    return EpisodeGenerator(brand).generate(request).markdown_text
