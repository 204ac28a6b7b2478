"""
Episode Show Notes Generator.

This application turns a raw list of podcast timestamps and a few metadata
fields into SEO-ready show notes in Markdown and JSON.
"""

from shownotes.config import config

__version__ = config.APP_VERSION
