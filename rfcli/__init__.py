"""
rfcli - a fast RFC reader with fuzzy search and TLDR.

Architecture:
    rfcli/
    ├── core/      # Paths, HTTP client factory, exceptions
    ├── config/    # Layered YAML configuration + schema
    ├── rfc/       # Remote source, caches, text normalization
    ├── reader/    # Fuzzy selector, pager, read session loop
    ├── llm/       # Summarization backends and TLDR excerpting
    └── cli/       # Typer app and terminal UI
"""

__version__ = "0.1.0"
