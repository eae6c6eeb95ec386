"""Exceptions raised by the sweep pipeline."""

from __future__ import annotations

from typing import Iterable, List


class SweepError(Exception):
    """Base class for pkgsweep failures."""


class IntegrityError(SweepError):
    """The same path was seen twice in one run.

    Distinct filesystem entries cannot share a path, so this points at a bug in
    enumeration rather than at anything the operator can fix.
    """

    def __init__(self, paths: Iterable[str]):
        self.paths: List[str] = sorted(set(paths))
        super().__init__(
            "Cannot see the same path twice: " + ", ".join(self.paths)
        )


class OperatorInputError(SweepError, OSError):
    """Input from the operator could not be read while a question was pending."""
