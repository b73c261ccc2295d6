"""Change-aware file writing for generated artifacts."""

import difflib
from pathlib import Path


def write_if_changed(path: Path, content: str, check: bool = False) -> str | None:
    """Write ``content`` to ``path`` unless it is already up to date.

    Args:
        path: Destination file
        content: Desired file content
        check: Do not write; only report whether the file would change

    Returns:
        None when the file is up to date or was written; in check mode, the
        unified diff between the current and desired content
    """
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    if existing == content:
        return None
    if check:
        diff = difflib.unified_diff(
            existing.splitlines(),
            content.splitlines(),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            lineterm="",
        )
        return "\n".join(diff)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return None
