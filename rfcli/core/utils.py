# rfcli/core/utils.py
"""Small helpers shared across rfcli."""

from __future__ import annotations

import re
from typing import Any


def extract_path(data: Any, path: str) -> Any:
    """
    Extract a value from nested JSON data using dot/bracket notation.

    Raises:
        KeyError: If a key is missing or a value cannot be traversed
        IndexError: If a list index is out of range

    Examples:
        >>> extract_path({"choices": [{"message": {"content": "hi"}}]}, "choices[0].message.content")
        'hi'
        >>> extract_path({"message": {"content": "hi"}}, "message.content")
        'hi'
    """
    if not path:
        return data

    # "choices[0].message" -> ["choices", "0", "message"]
    parts = [p for p in re.split(r"\.|\[|\]", path) if p]

    current = data
    for part in parts:
        if isinstance(current, dict):
            current = current[part]
        elif isinstance(current, list):
            try:
                current = current[int(part)]
            except ValueError:
                raise KeyError(f"Cannot index list with {part!r}") from None
        else:
            raise KeyError(f"Cannot traverse {type(current).__name__} with key {part!r}")

    return current


__all__ = ["extract_path"]
