# tests/test_read_session.py
"""
Tests for the read loop state machine.

Selector, pager and UI are mocks; sleep is a no-op so error pauses are instant.
"""

from __future__ import annotations

from unittest.mock import MagicMock, call

import pytest

from rfcli.core.exceptions import FetchError, RefreshError, SelectorUnavailableError
from rfcli.reader.selector import Cancelled, Chosen, FinderResult, NoSelection, RfcSelector
from rfcli.reader.session import ReadSession, SessionState
from rfcli.rfc.documents import DocumentCache
from rfcli.rfc.index import IndexCache
from rfcli.rfc.normalize import normalize

pytestmark = pytest.mark.tier2


def make_session(outcomes, documents=None, sleep=None, **kwargs):
    selector = MagicMock()
    selector.select.side_effect = list(outcomes)
    if documents is None:
        documents = MagicMock()
        documents.fetch.side_effect = lambda n: f"text {n}\n"
    session = ReadSession(
        selector=selector,
        documents=documents,
        pager=MagicMock(),
        ui=MagicMock(),
        sleep=sleep or MagicMock(),
        **kwargs,
    )
    return session


def printed(session) -> list[str]:
    return [c.args[0] for c in session.ui.print.call_args_list]


def errors(session) -> list[str]:
    return [c.args[0] for c in session.ui.error.call_args_list]


class TestReadSession:
    """Transitions between selecting, fetching and displaying."""

    def test_cancel_exits_immediately(self):
        session = make_session([Cancelled()])

        session.run()

        assert session.state is SessionState.EXITED
        assert printed(session) == ["Exiting rfcli..."]
        session.pager.show.assert_not_called()

    def test_chosen_is_fetched_normalized_and_paged(self):
        session = make_session([Chosen(791), Cancelled()])

        session.run()

        session.documents.fetch.assert_called_once_with(791)
        session.pager.show.assert_called_once_with("text 791\n")
        assert printed(session) == ["Fetching RFC 791...", "Exiting rfcli..."]

    def test_returns_to_selection_after_pager(self):
        session = make_session([Chosen(791), Chosen(2616), Cancelled()])

        session.run()

        assert session.pager.show.call_count == 2
        assert session.selector.select.call_count == 3

    def test_no_selection_selects_again(self):
        session = make_session([NoSelection("nothing matched"), Chosen(1), Cancelled()])

        session.run()

        assert session.selector.select.call_count == 3
        session.documents.fetch.assert_called_once_with(1)
        session.ui.error.assert_not_called()

    def test_keyboard_interrupt_during_selection_exits(self):
        session = make_session([KeyboardInterrupt()])

        session.run()

        assert session.state is SessionState.EXITED
        assert printed(session) == ["Exiting rfcli..."]

    def test_refresh_and_query_apply_to_first_selection_only(self):
        session = make_session([NoSelection(), Chosen(791), Cancelled()])

        session.run(force_refresh=True, initial_query="791")

        assert session.selector.select.call_args_list == [
            call(force_refresh=True, initial_query="791"),
            call(force_refresh=False, initial_query=None),
            call(force_refresh=False, initial_query=None),
        ]


class TestReadSessionErrors:
    """Errors are reported, paused on, and never end the session by themselves."""

    def test_fetch_error_reports_pauses_and_continues(self):
        documents = MagicMock()
        documents.fetch.side_effect = [FetchError(99999, "not found (HTTP 404)"), "ok\n"]
        sleep = MagicMock()
        session = make_session([Chosen(99999), Chosen(1), Cancelled()], documents=documents, sleep=sleep)

        session.run()

        assert errors(session) == ["Error: RFC 99999: not found (HTTP 404)"]
        sleep.assert_called_once_with(2.0)
        session.pager.show.assert_called_once_with("ok\n")
        assert session.state is SessionState.EXITED

    def test_refresh_error_is_reported_and_retried_without_refresh(self):
        session = make_session(
            [RefreshError("Could not update RFC index: offline"), Cancelled()],
            pause_seconds=0.5,
        )

        session.run(force_refresh=True)

        assert errors(session) == ["Error: Could not update RFC index: offline"]
        session._sleep.assert_called_once_with(0.5)
        assert session.selector.select.call_args_list[1] == call(force_refresh=False, initial_query=None)

    def test_gives_up_after_consecutive_selection_failures(self):
        failure = SelectorUnavailableError("fzf failed (exit status 2)")
        session = make_session([failure] * 3, max_consecutive_errors=3)

        session.run()

        assert session.selector.select.call_count == 3
        assert errors(session)[-1] == "Giving up after 3 failed attempts."
        assert printed(session)[-1] == "Exiting rfcli..."

    def test_success_resets_failure_count(self):
        failure = RefreshError("offline")
        session = make_session(
            [failure, failure, NoSelection(), failure, failure, Cancelled()],
            max_consecutive_errors=3,
        )

        session.run()

        assert session.selector.select.call_count == 6
        assert not any("Giving up" in e for e in errors(session))

    def test_unexpected_error_names_its_type(self):
        session = make_session([ValueError("bad"), Cancelled()])

        session.run()

        assert errors(session) == ["Error: ValueError: bad"]

    def test_interrupt_during_pause_exits(self):
        documents = MagicMock()
        documents.fetch.side_effect = FetchError(5, "offline")
        session = make_session(
            [Chosen(5), Chosen(6)],
            documents=documents,
            sleep=MagicMock(side_effect=KeyboardInterrupt),
        )

        session.run()

        assert session.selector.select.call_count == 1
        assert printed(session)[-1] == "Exiting rfcli..."


class TestReadSessionEndToEnd:
    """Real caches over a fake source, fake finder, mock pager."""

    def test_forced_refresh_with_initial_query(self, locations, fake_source):
        finder = MagicMock()
        finder.run.side_effect = [
            FinderResult(aborted=False, line="0791 Internet Protocol. J. Postel. September 1981."),
            FinderResult(aborted=True),
        ]
        index = IndexCache(locations, fake_source)
        documents = DocumentCache(locations, fake_source)
        session = ReadSession(
            selector=RfcSelector(index, finder),
            documents=documents,
            pager=MagicMock(),
            ui=MagicMock(),
            sleep=MagicMock(),
        )

        session.run(force_refresh=True, initial_query="791")

        assert fake_source.index_calls == 1
        assert locations.index_path.exists()
        assert finder.run.call_args_list[0].args[1] == "791"
        assert finder.run.call_args_list[1].args[1] is None
        assert fake_source.document_calls == [791]
        assert locations.document_path(791).exists()
        session.pager.show.assert_called_once_with(normalize("INTERNET PROTOCOL\n\nbody\n"))
        assert printed(session) == ["Fetching RFC 791...", "Exiting rfcli..."]


class TestModuleSource:
    def test_compiles_without_escape_warnings(self):
        import inspect
        import warnings

        from rfcli.reader import session as session_module

        source = inspect.getsource(session_module)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            compile(source, "session.py", "exec")
