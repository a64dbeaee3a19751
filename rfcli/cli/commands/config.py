# rfcli/cli/commands/config.py
"""
Show the effective configuration.

Usage:
    rfcli config           # merged defaults + user overrides, as YAML
    rfcli config --path    # where the user config file lives
"""

from __future__ import annotations

import yaml

from rfcli.cli.context import CLIContext
from rfcli.cli.ui import ui


def command(show_path: bool = False, verbose: bool = False) -> None:
    ctx = CLIContext.load(verbose=verbose)

    if show_path:
        state = "exists" if ctx.has_user_config else "not created, using package defaults"
        ui.print(f"{ctx.config_path} ({state})")
        return

    ui.print(yaml.safe_dump(ctx.config.model_dump(mode="json"), sort_keys=False).rstrip())
    ui.info(f"Cache: {ctx.locations.root}")
