"""
Tests for the text normalizers.
"""

from shownotes.core.normalizers import (
    ensure_period,
    escape_markdown,
    slugify,
    strip_emoji,
    tidy_label,
    to_sentence_case_preserve_acronyms,
)


def test_sentence_case_restores_acronyms():
    """Test acronym-aware sentence casing."""
    assert to_sentence_case_preserve_acronyms("the NBA finals") == "The NBA finals"
    assert to_sentence_case_preserve_acronyms("nba FINALS recap") == "NBA finals recap"


def test_sentence_case_whole_words_only():
    """Test that acronyms inside longer words are left alone."""
    assert to_sentence_case_preserve_acronyms("TRAINING with afl stars") == "Training with AFL stars"


def test_sentence_case_with_custom_whitelist():
    """Test that the acronym table is injected data."""
    assert to_sentence_case_preserve_acronyms("the nba and fiba", acronyms=["fiba"]) == "The nba and FIBA"
    assert to_sentence_case_preserve_acronyms("the nba", acronyms=[]) == "The nba"


def test_tidy_label():
    """Test whitespace collapsing and trailing separator removal."""
    assert tidy_label("  growing   UP in   melbourne :") == "Growing up in melbourne"
    assert tidy_label("Final thoughts —") == "Final thoughts"
    assert tidy_label("") == "Segment"
    assert tidy_label(" - ; ") == "Segment"


def test_strip_emoji():
    """Test emoji removal."""
    assert strip_emoji("🏀 Hoops ✨ talk 🔥") == "Hoops  talk"
    assert strip_emoji("no emoji") == "no emoji"


def test_slugify():
    """Test slug generation."""
    assert slugify("Basketball, Parent | With Zoë Smith") == "basketball-parent-with-zoe-smith"
    assert slugify("  a -- b  ") == "a-b"
    assert slugify("") == ""


def test_escape_markdown():
    """Test that only emphasis and code markers are escaped."""
    assert escape_markdown("snake_case *bold* `code` [link]") == "snake\\_case \\*bold\\* \\`code\\` [link]"


def test_ensure_period():
    """Test sentence termination."""
    assert ensure_period("Hello") == "Hello."
    assert ensure_period("Hello?") == "Hello?"
