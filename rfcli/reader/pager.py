# rfcli/reader/pager.py
"""
Hand normalized RFC text to an external pager.

Preference order:
    1. read.pager from config (any command line, text piped to stdin)
    2. bat with man-page highlighting, paging through "less -FK"
    3. less -FK
    4. rich's built-in pager

The pager's exit status is never inspected; returning is all that matters.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
from typing import Optional

from rich.console import Console

from rfcli.logging.logger import get_logger
from rfcli.logging.tags import PAGER

logger = get_logger(__name__)

BAT_ARGS = ["-l", "man", "-p", "--pager", "less -FK"]
LESS_ARGS = ["-FK"]


class Pager:
    def __init__(self, command: Optional[str] = None, console: Optional[Console] = None):
        self.command = command
        self.console = console or Console()

    def resolve_command(self) -> Optional[list[str]]:
        if self.command:
            try:
                args = shlex.split(self.command)
            except ValueError as e:
                logger.warning(f"{PAGER} Ignoring pager command {self.command!r}: {e}")
                args = []
            if args:
                return args
        if shutil.which("bat"):
            return ["bat", *BAT_ARGS]
        if shutil.which("less"):
            return ["less", *LESS_ARGS]
        return None

    def show(self, text: str) -> None:
        """Block until the user leaves the pager."""
        cmd = self.resolve_command()
        if cmd is None:
            logger.debug(f"{PAGER} No external pager found, using rich pager")
            self._show_builtin(text)
            return

        logger.debug(f"{PAGER} Running {' '.join(cmd)}")
        try:
            proc = subprocess.Popen(cmd, stdin=subprocess.PIPE)
        except OSError as e:
            logger.warning(f"{PAGER} Could not start {cmd[0]}: {e}; using rich pager")
            self._show_builtin(text)
            return

        try:
            proc.communicate(text.encode("utf-8"))
        except BrokenPipeError:
            # Quit before reading all input.
            proc.wait()
        except KeyboardInterrupt:
            # less -K exits on Ctrl-C; the interrupt reaches us too.
            proc.wait()

    def _show_builtin(self, text: str) -> None:
        with self.console.pager():
            self.console.print(text, markup=False, highlight=False, soft_wrap=True)
