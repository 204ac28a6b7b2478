"""
Configuration for pytest tests.
"""

import json
import pytest
from pathlib import Path

from shownotes.core.brands import get_brand
from shownotes.models.schemas import BrandProfile, EpisodeRequest, KeywordTables, PlatformLinks


@pytest.fixture(scope="session")
def bundled_brand() -> BrandProfile:
    """Return the brand profile shipped with the package."""
    return get_brand("searchers")


@pytest.fixture
def tables():
    """Return the default keyword tables."""
    return KeywordTables()


@pytest.fixture
def plain_brand():
    """Return a brand with no links, hosts or CTA."""
    return BrandProfile(name="Plain Show")


@pytest.fixture
def timestamps_file(tmp_path):
    """Write the two-line timestamps file used by the end-to-end checks."""
    path = tmp_path / "timestamps.txt"
    path.write_text("0:00 Intro\n1:30 Discussion\n", encoding="utf-8")
    return path


@pytest.fixture
def brands_file(tmp_path):
    """Write a small brand configuration file."""
    path = tmp_path / "brands.json"
    path.write_text(json.dumps({
        "version": 1,
        "brands": {
            "Hoops": {
                "name": "Hoops Talk",
                "handle": "HOOPSTALK",
                "hosts": ["Jo Smith"],
                "links": {"spotify": "https://spotify.example/hoops", "mbk": "https://clips.example"},
                "misc_label": "Clips",
                "keywords": {"primary_tags": ["hoops talk"], "anchor_tags": ["hoops"]},
            }
        },
    }), encoding="utf-8")
    return path


@pytest.fixture
def basketball_request():
    """Return the request from the basketball/parenting example episode."""
    return EpisodeRequest(
        summary="A conversation about basketball and parenting.",
        timestamps_raw="0:00 Intro\n1:30 Discussion",
        brand_name="The Searchers Podcast",
        hosts=["Atem Bior", "Kirron Byrne"],
        links=PlatformLinks(spotify="https://open.spotify.com/show/x"),
    )
