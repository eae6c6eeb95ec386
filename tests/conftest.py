"""Shared fixtures: a scripted operator and package archive helpers."""

import os

import pytest

from errors import OperatorInputError
from versioning.parser import parse_package_path

CACHE_DIR = "/var/cache/pacman/pkg"


class ScriptedOperator:
    """Operator answering from a fixed list of lines and recording output."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.shown = []
        self.prompts = []

    def show(self, text=""):
        self.shown.append(text)

    def ask(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise OperatorInputError("no scripted answer left")
        return self.answers.pop(0)

    @property
    def output(self):
        return "\n".join(self.shown)


def make_package(filename, directory=CACHE_DIR):
    """Parse `filename` inside `directory`, failing the test on a parse error."""
    parsed = parse_package_path(os.path.join(directory, filename))
    assert not hasattr(parsed, "reason"), parsed
    return parsed


def touch_all(directory, *names):
    """Create empty files in `directory` and return their paths."""
    paths = []
    for name in names:
        path = directory / name
        path.write_bytes(b"")
        paths.append(str(path))
    return paths


@pytest.fixture
def operator():
    """Factory for scripted operators: operator("1\\n", "y\\n")."""
    def _make(*answers):
        return ScriptedOperator(answers)
    return _make
