# rfcli/core/paths.py
"""
Filesystem locations used by rfcli.

There is no process-wide path singleton: callers build a CacheLocations
value once and pass it to the caches that need it.

Layout:
    <cache root>/rfc-index.txt    master index (singleton)
    <cache root>/rfc<N>.txt       one file per fetched RFC
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from rfcli.core.exceptions import CacheIOError

APP_NAME = "rfcli"
INDEX_FILENAME = "rfc-index.txt"
CONFIG_ENV = "RFCLI_CONFIG"


def _home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as e:
        raise CacheIOError(f"Cannot determine home directory: {e}") from e


def default_cache_root() -> Path:
    """$XDG_CACHE_HOME/rfcli, falling back to ~/.cache/rfcli."""
    xdg = os.getenv("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return _home() / ".cache" / APP_NAME


def user_config_path() -> Path:
    """
    Location of the user config file.

    Priority: $RFCLI_CONFIG, $XDG_CONFIG_HOME/rfcli/config.yaml,
    ~/.config/rfcli/config.yaml.
    """
    explicit = os.getenv(CONFIG_ENV)
    if explicit:
        return Path(explicit).expanduser()
    xdg = os.getenv("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else _home() / ".config"
    return base / APP_NAME / "config.yaml"


@dataclass(frozen=True)
class CacheLocations:
    """Where the index and the per-RFC documents live on disk."""

    root: Path
    index_path: Path
    document_dir: Path

    @classmethod
    def at(cls, root: str | Path) -> "CacheLocations":
        root = Path(root).expanduser()
        return cls(root=root, index_path=root / INDEX_FILENAME, document_dir=root)

    @classmethod
    def default(cls, override: Optional[str | Path] = None) -> "CacheLocations":
        """
        Resolve the cache root.

        Raises:
            CacheIOError: If no cache directory can be determined at all.
        """
        if override:
            return cls.at(override)
        return cls.at(default_cache_root())

    def document_path(self, number: int) -> Path:
        return self.document_dir / f"rfc{number}.txt"
