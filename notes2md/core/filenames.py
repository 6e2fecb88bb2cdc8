"""Filename derivation for converted notes."""

from __future__ import annotations

import re
from collections.abc import Collection

from ..exceptions import InvalidFilenameError

# Leaves room for a " (n)" counter and an extension within the 255 byte limit.
MAX_FILENAME_BYTES = 200

ILLEGAL_CHARS_RE = re.compile(r'[:?*<>"|\x00-\x1f\x7f\ud800-\udfff]')
SEPARATORS_RE = re.compile(r"[/\\]")
RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)


def derive_filename(title: str) -> str:
    """Turn a note title into a filesystem-safe base filename.

    Characters that are illegal on common filesystems are replaced with ``_``.
    Leading spaces and dots are dropped, and when the title looks like a path
    or URL only its last segment is kept.

    Args:
        title: The note title.

    Returns:
        A non-empty base filename without extension.

    Raises:
        InvalidFilenameError: If the title is empty or sanitizes to nothing.
    """
    if title == "":
        raise InvalidFilenameError(f"title: '{title}' is not valid for a filename")

    name = ILLEGAL_CHARS_RE.sub("_", title)
    name = name.lstrip(" .").strip()
    name = name.rstrip("/\\")
    name = SEPARATORS_RE.split(name)[-1].strip()

    stem, dot, rest = name.partition(".")
    if stem.upper() in RESERVED_NAMES:
        name = f"{stem}_{dot}{rest}"

    encoded = name.encode("utf-8")[:MAX_FILENAME_BYTES]
    name = encoded.decode("utf-8", errors="ignore").rstrip(" .")

    if not name:
        raise InvalidFilenameError(f"title: '{title}' is not valid for a filename")
    return name


def unique_filename(base: str, taken: Collection[str]) -> str:
    """Return ``base`` or the first free ``base (n)`` variant.

    Names are compared case-insensitively so that the result is also unique
    on case-insensitive filesystems. ``taken`` must hold casefolded names.
    """
    candidate = base
    counter = 0
    while candidate.casefold() in taken:
        counter += 1
        candidate = f"{base} ({counter})"
    return candidate
