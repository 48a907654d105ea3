import pytest

from devconsole.interface import HistoryBuffer


def test_readding_moves_line_to_end() -> None:
    history = HistoryBuffer()
    for line in ("a", "b", "a"):
        history.add(line)

    assert history.entries() == ("b", "a")
    assert history.cursor == 2


def test_previous_then_next_recovers_prior_state() -> None:
    history = HistoryBuffer()
    for line in ("one", "two", "three"):
        history.add(line)

    assert history.previous() == "three"
    assert history.previous() == "two"
    assert history.next() == "three"
    assert history.next() == ""


def test_previous_at_oldest_returns_empty_repeatedly() -> None:
    history = HistoryBuffer()
    history.add("only")

    assert history.previous() == "only"
    assert history.previous() == ""
    assert history.previous() == ""
    assert history.cursor == 0


def test_blank_lines_ignored() -> None:
    history = HistoryBuffer()
    history.add("")
    history.add("   ")
    assert len(history) == 0
    assert history.cursor == -1
    assert history.previous() == ""
    assert history.next() == ""


def test_cap_evicts_oldest_first() -> None:
    history = HistoryBuffer(max_size=3)
    for line in ("1", "2", "3", "4", "5"):
        history.add(line)

    assert history.entries() == ("3", "4", "5")
    assert history.cursor == 3


def test_clear_resets_cursor() -> None:
    history = HistoryBuffer()
    history.add("x")
    history.clear()

    assert list(history) == []
    assert history.cursor == -1
    assert history.previous() == ""


def test_add_resets_cursor_after_navigation() -> None:
    history = HistoryBuffer()
    history.add("a")
    history.add("b")
    history.previous()
    history.previous()
    history.add("c")

    assert history.previous() == "c"


def test_invalid_size_rejected() -> None:
    with pytest.raises(ValueError):
        HistoryBuffer(max_size=0)
