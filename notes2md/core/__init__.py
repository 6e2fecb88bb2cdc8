"""Core note functions for notes2md.

This module contains the note model, filename derivation and markdown
rendering.
"""

from .filenames import derive_filename, unique_filename
from .markdown import build_frontmatter, render_frontmatter, render_markdown
from .note import Note, derive_title

__all__ = [
    "Note",
    "derive_title",
    "derive_filename",
    "unique_filename",
    "build_frontmatter",
    "render_frontmatter",
    "render_markdown",
]
