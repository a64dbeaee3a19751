# rfcli/reader/session.py
"""
The read loop: select -> fetch -> normalize -> page, until the user cancels.

    SELECTING --Chosen(n)-----> FETCHING --ok----> DISPLAYING --pager exits--> SELECTING
        |                           +--error--> report, pause ----------------> SELECTING
        |--NoSelection------------------------------------------------------> SELECTING
        +--Cancelled--> EXITED

Only Cancelled (or an interrupt during an error pause) ends a session.
A forced index refresh and the initial query apply to the first selection
attempt only.
"""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

from rfcli.core.exceptions import RfcliError
from rfcli.logging.logger import get_logger
from rfcli.logging.tags import SESSION
from rfcli.reader.pager import Pager
from rfcli.reader.selector import Cancelled, Chosen, NoSelection, RfcSelector
from rfcli.rfc.documents import DocumentCache
from rfcli.rfc.normalize import normalize

logger = get_logger(__name__)


class SessionState(str, Enum):
    SELECTING = "selecting"
    FETCHING = "fetching"
    DISPLAYING = "displaying"
    EXITED = "exited"


class ReadSession:
    """
    Strictly sequential read loop.

    Args:
        selector: Picks the next RFC (may refresh the index)
        documents: Read-through document cache
        pager: Displays normalized text, blocks until closed
        ui: Output sink with print/error/warning methods (rfcli.cli.ui.ui)
        pause_seconds: How long an error message stays up before reselecting
        max_consecutive_errors: Selection-stage failures in a row before giving up
        sleep: Injected for tests
    """

    def __init__(
        self,
        selector: RfcSelector,
        documents: DocumentCache,
        pager: Pager,
        ui,
        pause_seconds: float = 2.0,
        max_consecutive_errors: int = 3,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.selector = selector
        self.documents = documents
        self.pager = pager
        self.ui = ui
        self.pause_seconds = pause_seconds
        self.max_consecutive_errors = max_consecutive_errors
        self._sleep = sleep
        self.state = SessionState.SELECTING

    def run(self, force_refresh: bool = False, initial_query: Optional[str] = None) -> None:
        refresh = force_refresh
        query = initial_query
        failures = 0

        while True:
            self.state = SessionState.SELECTING
            try:
                outcome = self.selector.select(force_refresh=refresh, initial_query=query)
            except KeyboardInterrupt:
                outcome = Cancelled()
            except Exception as e:
                outcome = None
                failures += 1
                self._report(e)
            else:
                failures = 0
            finally:
                refresh = False
                query = None

            if outcome is None:
                if failures >= self.max_consecutive_errors:
                    self.ui.error(f"Giving up after {failures} failed attempts.")
                    break
                if not self._pause():
                    break
                continue

            if isinstance(outcome, Cancelled):
                break

            if isinstance(outcome, NoSelection):
                logger.debug(f"{SESSION} No selection ({outcome.reason}), selecting again")
                continue

            if isinstance(outcome, Chosen) and not self._read(outcome.number):
                break

        self.state = SessionState.EXITED
        self.ui.print("Exiting rfcli...")

    def _read(self, number: int) -> bool:
        """Fetch and page one RFC. False means the user interrupted an error pause."""
        self.state = SessionState.FETCHING
        self.ui.print(f"Fetching RFC {number}...")

        try:
            raw = self.documents.fetch(number)
        except Exception as e:
            self._report(e)
            return self._pause()

        self.state = SessionState.DISPLAYING
        self.pager.show(normalize(raw))
        logger.debug(f"{SESSION} Pager closed for RFC {number}")
        return True

    def _report(self, exc: Exception) -> None:
        if isinstance(exc, RfcliError):
            self.ui.error(f"Error: {exc}")
        else:
            logger.debug(f"{SESSION} Unexpected error", exc_info=exc)
            self.ui.error(f"Error: {type(exc).__name__}: {exc}")

    def _pause(self) -> bool:
        try:
            self._sleep(self.pause_seconds)
        except KeyboardInterrupt:
            return False
        return True
