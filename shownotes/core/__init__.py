"""
Core functionality for the show-notes generator.

This package contains modules for parsing timestamps, normalizing text,
synthesizing tags and rendering the final documents.
"""
