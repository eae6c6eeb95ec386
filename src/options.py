"""Runtime options for a sweep, built from the parsed CLI arguments."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from constants import Constants


class ConfirmLevel(IntEnum):
    """What the operator is asked to confirm, lowest automation first."""

    NONE = 0
    REMOVAL = 1
    AMBIGUITIES = 2
    EVERYTHING = 3

    @classmethod
    def from_name(cls, name: str) -> "ConfirmLevel":
        try:
            return cls[str(name).upper()]
        except KeyError:
            raise ValueError(
                f"Unknown confirm level `{name}`, expected one of: "
                + ", ".join(Constants.CONFIRM_LEVELS)
            ) from None

    def is_at_least_removal(self) -> bool:
        return self >= ConfirmLevel.REMOVAL

    def is_at_least_ambiguities(self) -> bool:
        return self >= ConfirmLevel.AMBIGUITIES

    def is_everything(self) -> bool:
        return self is ConfirmLevel.EVERYTHING


@dataclass
class Options:
    """Configuration for one sweep of a directory."""

    directory: str
    confirm_level: ConfirmLevel = ConfirmLevel.REMOVAL
    dry_run: bool = False
    show_dates: bool = False

    @classmethod
    def from_args(cls, args: Any) -> "Options":
        directory = getattr(args, "DIRECTORY", None) or os.getcwd()
        return cls(
            directory=directory,
            confirm_level=ConfirmLevel.from_name(
                getattr(args, "CONFIRM_LEVEL", Constants.DEFAULT_CONFIRM_LEVEL)
            ),
            dry_run=bool(getattr(args, "DRY_RUN", False)),
            show_dates=bool(getattr(args, "SHOW_DATES", False)),
        )
