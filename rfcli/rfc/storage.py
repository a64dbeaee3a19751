# rfcli/rfc/storage.py
"""Whole-file writes that readers never observe half-done."""

from __future__ import annotations

from pathlib import Path


def atomic_write_text(path: Path, text: str) -> None:
    """
    Write text to path via a sibling temp file and rename.

    The target is either untouched or fully replaced. Raises OSError on
    failure after removing the temp file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path.with_suffix(".tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        temp_path.replace(path)
    except OSError:
        if temp_path.exists():
            temp_path.unlink()
        raise


def read_text_exact(path: Path) -> str:
    """Read back what atomic_write_text wrote, line endings untouched."""
    with path.open("r", encoding="utf-8", errors="replace", newline="") as f:
        return f.read()
