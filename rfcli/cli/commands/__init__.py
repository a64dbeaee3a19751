# rfcli/cli/commands/__init__.py
"""Command implementations, imported lazily by rfcli.cli.cli."""
