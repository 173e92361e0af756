"""Pytest configuration and shared fixtures."""

import io

import pytest
from rich.console import Console

from file_explorer.shell import FileExplorer


class ScriptedInput:
    """Feeds canned answers to the explorer prompts and records each prompt."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def make_console():
    return Console(
        file=io.StringIO(),
        color_system=None,
        highlight=False,
        soft_wrap=True,
        width=200,
    )


def stdout_of(explorer):
    return explorer.console.file.getvalue()


def stderr_of(explorer):
    return explorer.err_console.file.getvalue()


@pytest.fixture
def make_explorer(tmp_path):
    """Build a FileExplorer rooted at tmp_path (or start) answering with answers."""
    def factory(*answers, start=None):
        return FileExplorer(
            start_path=str(start if start is not None else tmp_path),
            console=make_console(),
            err_console=make_console(),
            input_func=ScriptedInput(answers),
            history_file=None,
        )
    return factory


@pytest.fixture
def sample_tree(tmp_path):
    """
    tmp_path/
        a.txt        (10 bytes)
        sub/
    """
    (tmp_path / "a.txt").write_bytes(b"0123456789")
    (tmp_path / "sub").mkdir()
    return tmp_path
