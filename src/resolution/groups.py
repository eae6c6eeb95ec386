"""Grouping of parsed packages by name and selection of the newest one.

Each logical name owns a PackageGroup: one best package plus the packages that
could not be ordered strictly below it. Groups are immutable snapshots;
`resolve_insert` returns a new snapshot for every package folded in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Tuple

from common.logging_utils import is_debug_enabled
from versioning.compare import compare_packages
from versioning.models import Package, VersionOrder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageGroup:
    """Candidate set for one package name."""
    best: Package
    ambiguous: FrozenSet[Package] = frozenset()

    def __post_init__(self):
        if self.best in self.ambiguous:
            raise ValueError(f"`{self.best.path}` cannot be both best and ambiguous")
        if any(p.name != self.best.name for p in self.ambiguous):
            raise ValueError(f"Group `{self.best.name}` mixes package names")

    @property
    def name(self) -> str:
        return self.best.name

    @property
    def has_ambiguities(self) -> bool:
        return bool(self.ambiguous)

    def members(self) -> List[Package]:
        """Best first, then ambiguous packages ordered by path."""
        return [self.best] + sorted(self.ambiguous, key=lambda p: p.path)

    def paths(self) -> List[str]:
        return [p.path for p in self.members()]


@dataclass(frozen=True)
class InsertResult:
    """Outcome of folding one package into a group."""
    group: PackageGroup
    removed: Tuple[Package, ...] = ()
    anomalies: Tuple[Package, ...] = ()
    duplicate: bool = False


def _demote(
    displaced: Iterable[Package],
    best: Package,
    review_all: bool,
) -> Tuple[FrozenSet[Package], Tuple[Package, ...], Tuple[Package, ...]]:
    """Re-compare former members against a newly promoted best package.

    Returns (ambiguous, removed, anomalies).
    """
    ambiguous = set()
    removed = []
    anomalies = []
    for pkg in sorted(displaced, key=lambda p: p.path):
        order = compare_packages(pkg, best)
        if order is VersionOrder.LESS and not review_all:
            removed.append(pkg)
            continue
        if order is VersionOrder.GREATER:
            logger.warning(
                "Ambiguous package `%s` from an older version is seen with a greater "
                "version than the newer `%s`.",
                pkg.path,
                best.path,
            )
            anomalies.append(pkg)
        ambiguous.add(pkg)
    return frozenset(ambiguous), tuple(removed), tuple(anomalies)


def resolve_insert(group: PackageGroup, candidate: Package, review_all: bool = False) -> InsertResult:
    """Fold `candidate` into `group` and return the new snapshot.

    Args:
        group: Current snapshot for the candidate's name.
        candidate: Newly parsed package with the same name.
        review_all: Keep strictly older packages as ambiguous instead of
            marking them removed, so every version reaches the operator.

    Returns:
        InsertResult with the new group and the packages that lost.
    """
    if candidate.name != group.name:
        raise ValueError(f"`{candidate.name}` cannot join the group of `{group.name}`")
    if candidate.path in group.paths():
        return InsertResult(group=group, duplicate=True)

    order = compare_packages(candidate, group.best)
    if order is VersionOrder.GREATER:
        if is_debug_enabled(logger):
            logger.debug(
                "=====> Keeping ver. `%s` over `%s`.",
                candidate.version_string,
                group.best.version_string,
            )
        displaced = {group.best} | group.ambiguous
        ambiguous, removed, anomalies = _demote(displaced, candidate, review_all)
        return InsertResult(
            group=PackageGroup(best=candidate, ambiguous=ambiguous),
            removed=removed,
            anomalies=anomalies,
        )

    if order is VersionOrder.LESS and not review_all:
        if is_debug_enabled(logger):
            logger.debug(
                "=====> Keeping ver. `%s` over `%s`.",
                group.best.version_string,
                candidate.version_string,
            )
        return InsertResult(group=group, removed=(candidate,))

    return InsertResult(
        group=PackageGroup(best=group.best, ambiguous=group.ambiguous | {candidate})
    )


@dataclass
class FoldResult:
    """State accumulated over the fold of every parsed package."""
    groups: Dict[str, PackageGroup] = field(default_factory=dict)
    removed: List[Package] = field(default_factory=list)
    anomalies: List[Package] = field(default_factory=list)
    duplicates: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.duplicates


class GroupResolver:
    """Left-to-right fold of packages into per-name groups."""

    def __init__(self, review_all: bool = False):
        self.review_all = review_all

    def fold(self, packages: Iterable[Package]) -> FoldResult:
        result = FoldResult()
        seen = set()
        for pkg in packages:
            if pkg.path in seen:
                logger.error("Cannot see the same path twice: %s", pkg.path)
                result.duplicates.append(pkg.path)
                continue
            seen.add(pkg.path)

            group = result.groups.get(pkg.name)
            if group is None:
                result.groups[pkg.name] = PackageGroup(best=pkg)
                continue

            inserted = resolve_insert(group, pkg, self.review_all)
            result.groups[pkg.name] = inserted.group
            result.removed.extend(inserted.removed)
            result.anomalies.extend(inserted.anomalies)
        return result
