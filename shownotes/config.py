"""
Configuration settings for the episode show-notes generator.
"""

import os
from typing import Dict
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Episode Show Notes Generator"
    APP_VERSION = "0.2.0"

    # Package and data locations
    PACKAGE_DIR = Path(__file__).resolve().parent
    BRANDS_FILE = Path(os.getenv("SHOWNOTES_BRANDS_FILE", PACKAGE_DIR / "data" / "brands.json"))
    OUTPUT_DIR = Path(os.getenv("SHOWNOTES_OUTPUT_DIR", Path.cwd() / "episodes"))

    # Brand used when --brand is not given
    DEFAULT_BRAND = os.getenv("SHOWNOTES_BRAND", "searchers")

    # Generation limits
    MAX_TAGS = 15
    AUTO_TITLE_WORDS = 6

    @classmethod
    def get_paths(cls) -> Dict[str, Path]:
        """Get all application paths."""
        return {
            "package_dir": cls.PACKAGE_DIR,
            "brands_file": cls.BRANDS_FILE,
            "output_dir": cls.OUTPUT_DIR,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "production").lower()
    if env == "development":
        return DevelopmentConfig
    else:
        return ProductionConfig


# Create a config instance
config = get_config()
