"""Settlement of package groups whose versions could not be ordered."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional

from constants import Constants
from options import ConfirmLevel
from versioning.models import Package
from .groups import PackageGroup
from .operator import Operator

logger = logging.getLogger(__name__)


@dataclass
class MediationResult:
    """Paths decided for every group handed to the mediator."""
    kept: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)


def presentation_order(group: PackageGroup) -> List[Package]:
    """Candidates with the "biggest" version string on top.

    Purely for display; it may disagree with the version comparator, which is
    the very reason these candidates reached the operator.
    """
    return sorted(group.members(), key=lambda p: (p.version_string, p.path), reverse=True)


class AmbiguityMediator:
    """Asks the operator which version to keep for every ambiguous group."""

    def __init__(self, operator: Operator, confirm_level: ConfirmLevel, show_dates: bool = False):
        self.operator = operator
        self.confirm_level = confirm_level
        self.show_dates = show_dates

    def settle(self, groups: Iterable[PackageGroup]) -> MediationResult:
        """Decide kept/removed/ignored paths for all groups, in name order."""
        result = MediationResult()
        groups = sorted(groups, key=lambda g: g.name)
        if any(g.has_ambiguities for g in groups):
            self.operator.show(Constants.SECTION_RULE)
            if self.confirm_level.is_everything():
                self.operator.show(
                    "Given the confirm level set to everything, we're asking for every package...\n"
                )
            else:
                self.operator.show("Handling ambiguous versions...\n")

        for group in groups:
            if not group.has_ambiguities:
                result.kept.append(group.best.path)
                continue
            self._settle_group(group, result)
        return result

    def _settle_group(self, group: PackageGroup, result: MediationResult) -> None:
        candidates = presentation_order(group)

        if self.confirm_level is ConfirmLevel.NONE:
            logger.debug("Keeping all %d versions of `%s`.", len(candidates), group.name)
            result.kept.extend(p.path for p in candidates)
            return

        self._show_candidates(group.name, candidates)
        if not self.confirm_level.is_at_least_ambiguities():
            self.operator.show("> keeping all")
            result.kept.extend(p.path for p in candidates)
            return

        choice = self.choose(len(candidates))
        if choice is None:
            result.ignored.extend(p.path for p in candidates)
            return
        for index, pkg in enumerate(candidates):
            if index == choice:
                result.kept.append(pkg.path)
            else:
                result.removed.append(pkg.path)

    def _show_candidates(self, name: str, candidates: List[Package]) -> None:
        kind = "versions" if self.confirm_level.is_everything() else "ambiguities"
        self.operator.show(f"Package `{name}` has {len(candidates)} {kind} :")
        # Index 0 ends up right above the prompt.
        for index in reversed(range(len(candidates))):
            pkg = candidates[index]
            line = f"{index:2}.\t{pkg.version_string}"
            if self.show_dates:
                line += f"\t(modified {_modified_at(pkg.path)})"
            self.operator.show(line)

    def choose(self, count: int) -> Optional[int]:
        """Ask for the index to keep until a usable answer is given.

        Returns:
            The chosen index, or None when the group is to be ignored.
        """
        while True:
            answer = self.operator.ask(Constants.CHOOSE_PROMPT)
            answer = answer[:-1] if answer.endswith("\n") else answer
            if not answer:
                return 0
            if answer == Constants.IGNORE_ANSWER:
                return None
            if not (answer.isascii() and answer.isdigit()):
                logger.warning("Can't parse input `%s` into number.", answer)
                continue
            number = int(answer)
            if number < count:
                return number
            logger.warning(
                "Parsed number %d from `%s` is out of range, please provide a number "
                "between 0 and %d.",
                number,
                answer,
                count - 1,
            )


def _modified_at(path: str) -> str:
    try:
        stamp = os.stat(path).st_mtime
    except OSError:
        return "unknown"
    return datetime.fromtimestamp(stamp).strftime(Constants.DATE_FORMAT)
