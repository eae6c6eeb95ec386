"""Data models for package identities and version ordering."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from packaging.version import Version


# A version segment is either a numeric run or an alphabetic run.
Segment = Union[int, str]


class VersionOrder(Enum):
    """Outcome of comparing two versions.

    EQUAL means identical segments; AMBIGUOUS means the segments could not be
    ordered (e.g. a numeric run facing an alphabetic one). Both are ties.
    """
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    AMBIGUOUS = "ambiguous"

    @property
    def is_tie(self) -> bool:
        """True when the comparison leaves the order to a human."""
        return self in (VersionOrder.EQUAL, VersionOrder.AMBIGUOUS)

    def reverse(self) -> "VersionOrder":
        """Return the outcome seen from the other operand."""
        if self is VersionOrder.LESS:
            return VersionOrder.GREATER
        if self is VersionOrder.GREATER:
            return VersionOrder.LESS
        return self


@dataclass(frozen=True)
class VersionComponents:
    """Structured form of `[epoch:]pkgver-pkgrel` used for comparisons."""
    epoch: int
    segments: Tuple[Segment, ...]
    release: Version


@dataclass(frozen=True)
class Package:
    """One parsed package archive found on disk."""
    path: str
    name: str
    version_string: str
    version_components: VersionComponents
    arch: str
    extension: str


@dataclass(frozen=True)
class IgnoredFile:
    """A file that could not be parsed as a package, with the reason why."""
    path: str
    reason: str


ParseResult = Union[Package, IgnoredFile]
