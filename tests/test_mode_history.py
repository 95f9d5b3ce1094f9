from __future__ import annotations

import pytest

from recall.review import ModeHistory, RetrievalMode, SessionModeLog


def test_history_keeps_only_latest_entries() -> None:
    history = ModeHistory(capacity=3)
    for mode in [RetrievalMode.STANDARD, RetrievalMode.REVERSED, RetrievalMode.TEACH, RetrievalMode.CONNECT]:
        history.record(mode)

    assert len(history) == 3
    assert history.snapshot() == (RetrievalMode.REVERSED, RetrievalMode.TEACH, RetrievalMode.CONNECT)
    assert history.last(2) == (RetrievalMode.TEACH, RetrievalMode.CONNECT)
    assert history.last(0) == ()
    assert history.count(RetrievalMode.STANDARD) == 0


def test_history_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        ModeHistory(capacity=0)


def test_history_tokens_round_trip() -> None:
    history = ModeHistory([RetrievalMode.GENERATE, RetrievalMode.STANDARD], capacity=5)
    tokens = history.to_tokens()

    assert tokens == ["generate", "standard"]
    assert ModeHistory.from_tokens(tokens, capacity=5).snapshot() == history.snapshot()


def test_unknown_token_is_rejected() -> None:
    with pytest.raises(ValueError):
        ModeHistory.from_tokens(["sideways"])


def test_session_log_tracks_items_and_session() -> None:
    log = SessionModeLog(capacity=4)
    log.record("a", RetrievalMode.STANDARD)
    log.record("b", RetrievalMode.REVERSED)
    log.record("a", RetrievalMode.TEACH)

    assert log.for_item("a").snapshot() == (RetrievalMode.STANDARD, RetrievalMode.TEACH)
    assert log.for_item("b").snapshot() == (RetrievalMode.REVERSED,)
    assert log.session.snapshot() == (RetrievalMode.STANDARD, RetrievalMode.REVERSED, RetrievalMode.TEACH)
    assert log.last_mode("a") == RetrievalMode.TEACH
    assert log.last_mode("missing") is None
    assert log.item_ids() == ["a", "b"]
