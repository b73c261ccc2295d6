"""Path utilities for generated source files."""

import re

GENERATED_SOURCE_SUFFIX = ".g.cs"
MAX_FILENAME_STEM = 200

# anything outside this set, including C# nested (+) and generic (<>) syntax
_UNSAFE_RUN = re.compile(r"[^A-Za-z0-9_.\-]+")


def sanitize_for_filesystem(name: str, replacement: str = "_") -> str:
    """Turn a type or hint name into a portable filename stem.

    Each run of unsafe characters becomes a single ``replacement``.

    Args:
        name: Hint name such as ``Game.Outer+Inner.InteropGenerator``
        replacement: Substitute for unsafe characters

    Returns:
        Sanitized stem, ``unnamed`` when nothing usable remains
    """
    sanitized = _UNSAFE_RUN.sub(replacement, name).strip(replacement)
    if len(sanitized) > MAX_FILENAME_STEM:
        sanitized = sanitized[:MAX_FILENAME_STEM].rstrip(replacement)
    return sanitized or "unnamed"


def create_source_filename(hint_name: str) -> str:
    """Create a safe ``.g.cs`` filename for a generated artifact."""
    stem = hint_name.removesuffix(GENERATED_SOURCE_SUFFIX)
    return f"{sanitize_for_filesystem(stem)}{GENERATED_SOURCE_SUFFIX}"
