"""Operator interaction used for listings, choices and confirmations."""

from __future__ import annotations

import sys
from typing import Optional, Protocol, TextIO

from errors import OperatorInputError


class Operator(Protocol):
    """Something that can be shown text and asked for one line of input."""

    def show(self, text: str = "") -> None: ...

    def ask(self, prompt: str) -> str:
        """Show `prompt` and return the raw answer line, terminator included."""
        ...


class ConsoleOperator:
    """Operator bound to text streams, stdin/stdout by default."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def show(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask(self, prompt: str) -> str:
        """Blocking read of one line.

        Raises:
            OperatorInputError: The stream is closed, exhausted or unreadable.
                Nothing may be decided without an answer.
        """
        self.show(prompt)
        self.stdout.flush()
        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as e:
            raise OperatorInputError(
                f"Can't read from input to ask anything to the user: {e}"
            ) from e
        if not line:
            raise OperatorInputError(
                "Can't read from input to ask anything to the user: end of input"
            )
        return line
