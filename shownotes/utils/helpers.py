"""
Helper utility functions for reading inputs and writing rendered show notes.
"""

import os
import sys
import json
import time
from typing import Dict, Any, Optional, TextIO
from pathlib import Path

from shownotes.utils.error_handling import UserInputError

STDIN_MARKER = "-"


def get_timestamp() -> str:
    """
    Get the current timestamp in a readable format.

    Returns:
        Formatted timestamp string
    """
    return time.strftime("%Y%m%d_%H%M%S")


def load_json(filepath: str) -> Dict[str, Any]:
    """
    Load data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Loaded JSON data
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def ensure_dir(directory: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Directory path to ensure exists
    """
    os.makedirs(directory, exist_ok=True)


def read_text_source(source: str, stdin: Optional[TextIO] = None) -> str:
    """
    Read raw text from a file path, or from standard input when source is "-".

    Args:
        source: File path or "-"
        stdin: Stream used for "-" (defaults to sys.stdin)

    Returns:
        The text content
    """
    if source == STDIN_MARKER:
        return (stdin or sys.stdin).read()

    path = Path(source).expanduser()
    if not path.exists():
        raise UserInputError(f"timestamps file not found: {source}")
    if not path.is_file():
        raise UserInputError(f"timestamps path is not a file: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UserInputError(f"could not read timestamps file {source}: {e}") from e


def write_text(text: str, filepath: Path) -> Path:
    """
    Write text to a file, creating parent directories.

    Args:
        text: Content to write
        filepath: Destination path

    Returns:
        The resolved destination path
    """
    filepath = Path(filepath)
    if filepath.parent and str(filepath.parent) not in ("", "."):
        ensure_dir(str(filepath.parent))
    filepath.write_text(text, encoding="utf-8")
    return filepath.resolve()


def build_output_path(out_dir: Path, slug: str, extension: str) -> Path:
    """
    Compute an output file name inside a directory.

    Args:
        out_dir: Target directory
        slug: Slugified episode title (falls back to a timestamp when empty)
        extension: File extension without the dot

    Returns:
        Output file path
    """
    stem = slug or f"episode_{get_timestamp()}"
    return Path(out_dir) / f"{stem}.{extension}"
