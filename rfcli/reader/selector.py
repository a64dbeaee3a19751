# rfcli/reader/selector.py
"""
Fuzzy RFC selection.

Ranking and the interactive picker are delegated to fzf; this module feeds
it the index entries and turns what comes back into a SelectionOutcome:

    Chosen(number)       the user picked a line with a valid RFC number
    Cancelled()          the user aborted (Esc or Ctrl-C)
    NoSelection(reason)  nothing usable came back; the caller may try again

Cancellation is a value, never an exception.
"""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from rfcli.core.exceptions import SelectorUnavailableError
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import SELECTOR
from rfcli.rfc.index import IndexCache, candidate_lines, parse_number

logger = get_logger(__name__)


# =============================================================================
# Outcomes
# =============================================================================


@dataclass(frozen=True)
class Chosen:
    number: int


@dataclass(frozen=True)
class Cancelled:
    pass


@dataclass(frozen=True)
class NoSelection:
    reason: str = ""


SelectionOutcome = Union[Chosen, Cancelled, NoSelection]


# =============================================================================
# fzf
# =============================================================================

# fzf exit statuses
FZF_OK = 0
FZF_NO_MATCH = 1
FZF_ERROR = 2
FZF_ABORTED = 130


@dataclass(frozen=True)
class FinderResult:
    aborted: bool
    line: Optional[str] = None


class FzfFinder:
    """
    Runs fzf in single-selection mode over newline-delimited candidates.

    fzf draws its UI on the terminal directly, so stdin/stdout are free for
    the candidate list and the chosen line.
    """

    def __init__(self, command: str = "fzf", height: str = "50%"):
        self.command = command
        self.height = height
        self.executable = shutil.which(command)

    def available(self) -> bool:
        return self.executable is not None

    def build_args(self, query: Optional[str] = None) -> list[str]:
        args = [
            self.executable or self.command,
            "--no-multi",
            f"--height={self.height}",
            "--bind",
            "esc:abort,ctrl-c:abort",
            "--prompt",
            "RFC> ",
        ]
        if query:
            args += ["--query", query]
        return args

    def run(self, candidates: Sequence[str], query: Optional[str] = None) -> FinderResult:
        """
        Raises:
            SelectorUnavailableError: fzf is missing or failed to run
        """
        if not self.available():
            raise SelectorUnavailableError(
                f"'{self.command}' not found on PATH. Install fzf: https://github.com/junegunn/fzf"
            )

        try:
            proc = subprocess.run(
                self.build_args(query),
                input="\n".join(candidates),
                stdout=subprocess.PIPE,
                text=True,
                check=False,
            )
        except KeyboardInterrupt:
            return FinderResult(aborted=True)
        except OSError as e:
            raise SelectorUnavailableError(f"Failed to run {self.command}: {e}") from e

        logger.debug(f"{SELECTOR} {self.command} exited with {proc.returncode}")

        if proc.returncode == FZF_ABORTED:
            return FinderResult(aborted=True)
        if proc.returncode == FZF_OK:
            line = proc.stdout.rstrip("\n")
            return FinderResult(aborted=False, line=line or None)
        if proc.returncode == FZF_NO_MATCH:
            return FinderResult(aborted=False)

        raise SelectorUnavailableError(f"{self.command} failed (exit status {proc.returncode})")


# =============================================================================
# Selector
# =============================================================================


class RfcSelector:
    """
    Presents the RFC index through the fuzzy finder.

    Usage:
        selector = RfcSelector(index_cache, FzfFinder())
        outcome = selector.select(force_refresh=True, initial_query="791")
    """

    def __init__(self, index: IndexCache, finder: FzfFinder):
        self.index = index
        self.finder = finder

    def select(self, force_refresh: bool = False, initial_query: Optional[str] = None) -> SelectionOutcome:
        """
        Load the index (refreshing if asked) and let the user pick an entry.

        Raises:
            RefreshError, CacheIOError: The index could not be obtained
            SelectorUnavailableError: The finder could not run
        """
        index_text = self.index.load(force_refresh=force_refresh)
        return self.choose(index_text, initial_query)

    def choose(self, index_text: str, initial_query: Optional[str] = None) -> SelectionOutcome:
        candidates = candidate_lines(index_text)
        logger.debug(f"{SELECTOR} Offering {len(candidates)} index entries")

        result = self.finder.run(candidates, initial_query)
        return outcome_from(result)


def outcome_from(result: FinderResult) -> SelectionOutcome:
    if result.aborted:
        return Cancelled()
    if result.line is None:
        return NoSelection("nothing matched")

    number = parse_number(result.line)
    if number is None:
        logger.debug(f"{SELECTOR} Unparseable selection: {result.line!r}")
        return NoSelection(f"no RFC number in {result.line.strip()!r}")
    return Chosen(number)
