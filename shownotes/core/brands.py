"""
Module for loading brand profiles and resolving per-episode link overrides.
"""

import json
from pathlib import Path
from typing import Dict, Mapping, Optional, Sequence, List

from pydantic import ValidationError

from shownotes.config import config
from shownotes.models.schemas import BrandProfile, PlatformLinks
from shownotes.utils.error_handling import BrandConfigError
from shownotes.utils.helpers import load_json
from shownotes.utils.logger import logging


def load_brand_registry(path: Optional[Path] = None) -> Dict[str, BrandProfile]:
    """
    Load every brand profile from a configuration file.

    Expected JSON:
    {
      "version": 1,
      "brands": {
        "searchers": {"name": "The Searchers Podcast", "hosts": [...], "links": {...}}
      }
    }

    Args:
        path: Configuration file (defaults to config.BRANDS_FILE)

    Returns:
        Mapping of lowercase brand id to BrandProfile
    """
    path = Path(path or config.BRANDS_FILE).expanduser()
    if not path.is_file():
        raise BrandConfigError(f"brand configuration not found: {path}")

    try:
        data = load_json(str(path))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BrandConfigError(f"could not read brand configuration {path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("brands"), dict):
        raise BrandConfigError(f"brand configuration must contain a 'brands' object: {path}")

    registry: Dict[str, BrandProfile] = {}
    for brand_id, entry in data["brands"].items():
        try:
            registry[brand_id.lower()] = BrandProfile.model_validate(entry)
        except ValidationError as e:
            raise BrandConfigError(f"invalid brand '{brand_id}' in {path}: {e}") from e

    logging.debug(f"Loaded {len(registry)} brand profile(s) from {path}")
    return registry


def get_brand(brand_id: Optional[str] = None, path: Optional[Path] = None) -> BrandProfile:
    """
    Look up a brand profile by identifier (case-insensitive).

    Args:
        brand_id: Brand identifier (defaults to config.DEFAULT_BRAND)
        path: Configuration file

    Returns:
        BrandProfile
    """
    brand_id = (brand_id or config.DEFAULT_BRAND).lower()
    registry = load_brand_registry(path)
    if brand_id not in registry:
        known = ", ".join(sorted(registry)) or "none"
        raise BrandConfigError(f"unknown brand '{brand_id}' (known brands: {known})")
    return registry[brand_id]


def merge_links(defaults: PlatformLinks, overrides: Optional[Mapping[str, Optional[str]]] = None) -> PlatformLinks:
    """Brand link defaults overridden by any non-empty per-episode value."""
    update = {k: v for k, v in (overrides or {}).items() if v}
    if "mbk" in update:
        update.setdefault("misc", update.pop("mbk"))
    unknown = set(update) - set(PlatformLinks.model_fields)
    if unknown:
        raise BrandConfigError(f"unknown link platform(s): {', '.join(sorted(unknown))}")
    return PlatformLinks.model_validate({**defaults.model_dump(), **update})


def resolve_hosts(explicit: Optional[Sequence[str]], brand: BrandProfile) -> List[str]:
    """Explicit hosts win; otherwise the brand's default hosts."""
    hosts = [h for h in (explicit or []) if h and h.strip()]
    return hosts or list(brand.hosts)
