"""
Centralized error handling for the application.
"""

import sys
import json
import traceback
from typing import Optional, Dict, Any

from shownotes.config import config
from shownotes.utils.logger import logging


class ShowNotesError(Exception):
    """Base class for errors reported to the operator."""


class UserInputError(ShowNotesError):
    """Missing or unusable input (summary, timestamps source, request fields)."""


class BrandConfigError(ShowNotesError):
    """Unknown brand identifier or unreadable brand configuration."""


def report_user_error(error: ShowNotesError) -> int:
    """
    Report an operator-facing error.

    Args:
        error: The error to report

    Returns:
        Process exit status
    """
    logging.error(str(error))
    print(f"Error: {error}", file=sys.stderr)
    return 1


def handle_unexpected_error(error: Exception, context: Optional[Dict[str, Any]] = None) -> int:
    """
    Report a failure that was not anticipated by the pipeline.

    Args:
        error: The exception that occurred
        context: Optional diagnostic information about the invocation

    Returns:
        Process exit status
    """
    logging.error(f"Unexpected error during generation: {error}")
    logging.error(traceback.format_exc())
    if context:
        log_diagnostic_info(context)
    print(f"Error: unexpected failure: {error}", file=sys.stderr)
    return 1


def log_diagnostic_info(context: Dict[str, Any]):
    """
    Log diagnostic information for debugging.

    Args:
        context: Dictionary of diagnostic information
    """
    if not getattr(config, "DEBUG", False):
        return

    logging.info(f"Diagnostic info: {json.dumps(context, default=str)}")
