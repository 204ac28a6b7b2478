"""
Tests for the Markdown/JSON renderer and the episode generator.
"""

import json

import pytest

from shownotes.core.generator import EpisodeGenerator, generate_episode_markdown
from shownotes.core.renderer import LINKS_COMING_SOON, NO_TIMESTAMPS, ShowNotesRenderer, build_description
from shownotes.models.schemas import (
    BrandProfile,
    ChapterEntry,
    EpisodeRequest,
    EpisodeTags,
    OutputFormat,
    PlatformLinks,
    SEODetails,
)


def _section(markdown, header):
    """Return the body of the section whose header contains `header`."""
    blocks = markdown.split("\n\n## ")
    for block in blocks:
        head, _, body = block.partition("\n")
        if header in head:
            return body
    raise AssertionError(f"section {header!r} not found")


def test_description_mentions_brand_hosts_and_guests():
    """Test the description lead-in."""
    text = build_description("we talk hoops", ["Atem Bior", "Kirron Byrne"], ["Mikhaela Cann"], "The Show")

    assert text == (
        "In this episode of **The Show**, hosted by **Atem Bior & Kirron Byrne**, "
        "featuring **Mikhaela Cann**. we talk hoops."
    )


def test_description_without_people_or_brand():
    """Test that empty fields are omitted rather than rendered."""
    text = build_description("Just us.", [], [], "")

    assert text == "In this episode. Just us."


def test_description_blank_summary():
    """Test that a blank summary leaves no stray punctuation."""
    assert build_description("  ", brand_name="Show") == "In this episode of **Show**."


def test_description_key_takeaways():
    """Test the optional takeaways block."""
    text = build_description("Talk.", seo=SEODetails(keyTakeaways="- one\n- two"))

    assert text.endswith("**Key Takeaways:**\n- one\n- two")


def test_empty_inputs_render_placeholders(plain_brand):
    """Test placeholder sections for missing chapters and links."""
    renderer = ShowNotesRenderer(plain_brand)
    markdown = renderer.render_markdown("Title", "Desc", [], EpisodeTags(), PlatformLinks())

    assert _section(markdown, "Timestamps") == NO_TIMESTAMPS
    assert _section(markdown, "Listen on") == LINKS_COMING_SOON
    assert _section(markdown, "Follow Plain Show") == LINKS_COMING_SOON
    assert "Patreon" not in markdown
    assert "Tags" not in markdown
    assert "None" not in markdown
    assert "undefined" not in markdown


def test_section_order(bundled_brand):
    """Test the fixed section order."""
    request = EpisodeRequest(
        summary="Leadership lessons.",
        timestamps_raw="0:00 Intro",
        links=bundled_brand.links,
        brand_name=bundled_brand.name,
    )
    markdown = EpisodeGenerator(bundled_brand).generate(request).markdown_text

    headers = [line for line in markdown.splitlines() if line.startswith("## ")]
    order = ["Episode Title", "Episode Description", "Timestamps", "Listen on", "Support",
             "Follow", "Primary Tags", "Secondary Tags", "Search Keywords", "Hashtags"]
    assert len(headers) == len(order)
    for header, expected in zip(headers, order):
        assert expected in header


def test_links_rendering(bundled_brand):
    """Test listen/follow links and the brand-specific misc link."""
    renderer = ShowNotesRenderer(bundled_brand)
    links = PlatformLinks(youtube="https://yt.example", mbk="https://clips.example")
    markdown = renderer.render_markdown("T", "D", [], EpisodeTags(), links)

    assert _section(markdown, "Listen on") == "YouTube → https://yt.example"
    assert "MBK Digital (clips) - https://clips.example" in _section(markdown, "Follow")
    assert "@THESEARCHERSPODCAST" in markdown


def test_title_and_labels_are_escaped(plain_brand):
    """Test minimal Markdown escaping."""
    chapters = [ChapterEntry(time="0:00", seconds=0, label="Snake_case *talk*")]
    markdown = ShowNotesRenderer(plain_brand).render_markdown(
        "The `best` *ever*", "D", chapters, EpisodeTags(), PlatformLinks()
    )

    assert "**The \\`best\\` \\*ever\\***" in markdown
    assert "0:00 – Snake\\_case \\*talk\\*" in markdown


def test_end_to_end_basketball_episode(bundled_brand, basketball_request):
    """Test the documented end-to-end example."""
    markdown = EpisodeGenerator(bundled_brand).generate(basketball_request).markdown_text

    chapters = _section(markdown, "Timestamps").splitlines()
    assert chapters == ["0:00 – Intro", "1:30 – Discussion"]

    primary = _section(markdown, "Primary Tags").split(", ")
    assert "basketball" in primary


def test_explicit_title_wins(bundled_brand, basketball_request):
    """Test title resolution."""
    request = basketball_request.model_copy(update={"title": "Court Side"})

    document = EpisodeGenerator(bundled_brand).generate(request)

    assert document.title == "Court Side"
    assert document.slug == "court-side"


def test_json_mirror(bundled_brand, basketball_request):
    """Test the JSON document mirrors the Markdown payload."""
    document = EpisodeGenerator(bundled_brand).generate(basketball_request, OutputFormat.BOTH)
    data = json.loads(document.json_text)

    assert data["title"] == document.title
    assert data["chapters"] == [
        {"time": "0:00", "seconds": 0, "label": "Intro"},
        {"time": "1:30", "seconds": 90, "label": "Discussion"},
    ]
    assert "basketball" in data["tags"]["primary"]
    assert data["links"] == {"spotify": "https://open.spotify.com/show/x"}
    assert data["markdown"] == document.markdown_text
    assert data["seo"] == {}


def test_markdown_only_has_no_json(bundled_brand, basketball_request):
    """Test that JSON is rendered only when requested."""
    document = EpisodeGenerator(bundled_brand).generate(basketball_request, OutputFormat.MARKDOWN)

    assert document.json_text is None


def test_generate_episode_markdown_without_brand():
    """Test the convenience function with no brand profile."""
    request = EpisodeRequest(summary="A quick chat.", timestamps_raw="")

    markdown = generate_episode_markdown(request)

    assert NO_TIMESTAMPS in markdown
    assert "In this episode of **Podcast**. A quick chat." in markdown


def test_blank_summary_is_rejected():
    """Test that the summary is required."""
    with pytest.raises(ValueError):
        EpisodeRequest(summary="   ", timestamps_raw="0:00 Intro")


def test_request_splits_comma_separated_names():
    """Test guest/host normalization."""
    request = EpisodeRequest(summary="x", timestamps_raw="", guests="A, B", hosts=["C", " "])

    assert request.guests == ["A", "B"]
    assert request.hosts == ["C"]


def test_brand_without_cta_still_renders_patreon(plain_brand):
    """Test the support section when only a Patreon link exists."""
    brand = BrandProfile(name="Plain Show")
    markdown = ShowNotesRenderer(brand).render_markdown(
        "T", "D", [], EpisodeTags(), PlatformLinks(patreon="https://patreon.example")
    )

    assert "https://patreon.example" in _section(markdown, "Support Plain Show on Patreon")
