"""Tests for prompt completion and input history."""

import pytest

from file_explorer import history


def test_completer_offers_current_directory_names(make_explorer, sample_tree):
    (sample_tree / "another.txt").write_text("")
    completer = history.make_completer(make_explorer())

    assert completer("a", 0) == "a.txt"
    assert completer("a", 1) == "another.txt"
    assert completer("a", 2) is None
    assert completer("s", 0) == "sub"


def test_completer_follows_navigation(make_explorer, sample_tree):
    (sample_tree / "sub" / "inside.txt").write_text("")
    explorer = make_explorer("2", "sub")
    completer = history.make_completer(explorer)

    explorer.navigate()

    assert completer("in", 0) == "inside.txt"


def test_completer_on_missing_directory(make_explorer, tmp_path):
    completer = history.make_completer(make_explorer(start=tmp_path / "gone"))
    assert completer("", 0) is None


def test_disabled_history_is_a_no_op(monkeypatch):
    monkeypatch.setattr(history, "readline", None)
    history.load_history("/nonexistent/history")
    history.save_history("/nonexistent/history")
    assert history.install_completer(object()) is False


@pytest.mark.skipif(history.readline is None, reason="readline not available")
def test_history_round_trip(tmp_path):
    history_file = str(tmp_path / "history")
    history.readline.clear_history()
    history.readline.add_history("sub")
    history.save_history(history_file)
    history.readline.clear_history()

    history.load_history(history_file)

    assert history.readline.get_history_item(history.readline.get_current_history_length()) == "sub"
