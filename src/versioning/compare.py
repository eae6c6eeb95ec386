"""Version ordering for parsed packages.

Segments are compared pairwise: numeric runs numerically, alphabetic runs
lexically. A numeric run facing an alphabetic one cannot be ordered and the
result is AMBIGUOUS rather than a guess, since a wrong answer deletes a file.
"""

from typing import Sequence

from .models import Package, Segment, VersionComponents, VersionOrder


def _order(a, b) -> VersionOrder:
    if a < b:
        return VersionOrder.LESS
    if a > b:
        return VersionOrder.GREATER
    return VersionOrder.EQUAL


def compare_segments(a: Sequence[Segment], b: Sequence[Segment]) -> VersionOrder:
    """Compare two segment sequences.

    A sequence extending a strict prefix of the other is GREATER.
    """
    for left, right in zip(a, b):
        if isinstance(left, int) != isinstance(right, int):
            return VersionOrder.AMBIGUOUS
        result = _order(left, right)
        if result is not VersionOrder.EQUAL:
            return result
    return _order(len(a), len(b))


def compare_versions(a: VersionComponents, b: VersionComponents) -> VersionOrder:
    """Order `a` relative to `b`: epoch, then segments, then release number."""
    result = _order(a.epoch, b.epoch)
    if result is not VersionOrder.EQUAL:
        return result
    result = compare_segments(a.segments, b.segments)
    if result is not VersionOrder.EQUAL:
        return result
    return _order(a.release, b.release)


def compare_packages(pkg: Package, other: Package) -> VersionOrder:
    """Order `pkg` relative to `other` by their parsed versions."""
    return compare_versions(pkg.version_components, other.version_components)
