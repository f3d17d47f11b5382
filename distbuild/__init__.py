"""Distbuild - static asset copier for the dist directory.

Copies a configured list of static files from a project root into an
output directory, reporting each file as copied or missing.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
