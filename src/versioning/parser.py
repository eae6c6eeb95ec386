"""Filename parsing utilities for package archives.

Package archives follow ``<name>-<pkgver>-<pkgrel>-<arch>.pkg.tar[.<compression>]``.
The name may itself contain hyphens, so the fields are taken from the right.
"""

import os
import re
from typing import Tuple

from packaging.version import InvalidVersion, Version

from constants import Constants
from .models import IgnoredFile, Package, ParseResult, Segment, VersionComponents


_ARCHIVE_RE = re.compile(r"^(?P<stem>.+)\.pkg\.tar(?P<compression>\.[A-Za-z0-9]+)?$")
_PKGVER_RE = re.compile(r"^[A-Za-z0-9._+~]+$")
_PKGREL_RE = re.compile(r"^\d+(\.\d+)*$")
_ARCH_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_SEGMENT_RE = re.compile(r"\d+|[A-Za-z]+")


def is_signature_path(path: str) -> bool:
    """Return True for detached signature files (``*.sig``)."""
    return path.endswith(Constants.SIGNATURE_SUFFIX)


def signature_base(path: str) -> str:
    """Return the path of the file a signature belongs to."""
    return path[:-len(Constants.SIGNATURE_SUFFIX)]


def split_segments(pkgver: str) -> Tuple[Segment, ...]:
    """Split an upstream version into alternating numeric and alphabetic runs.

    Separators such as ``.``, ``_`` or ``+`` only delimit runs and are dropped:
    ``"1.0+1+g1bcc8585"`` -> ``(1, 0, 1, "g", 1, "bcc", 8585)``.
    """
    return tuple(
        int(run) if run.isdigit() else run
        for run in _SEGMENT_RE.findall(pkgver)
    )


def _parse_pkgver(pkgver: str) -> Tuple[int, Tuple[Segment, ...]]:
    """Return (epoch, segments), raising ValueError with a reason on bad input."""
    epoch = 0
    if Constants.EPOCH_SEPARATOR in pkgver:
        epoch_part, pkgver = pkgver.split(Constants.EPOCH_SEPARATOR, 1)
        if not epoch_part.isdigit():
            raise ValueError(f"invalid epoch `{epoch_part}`")
        epoch = int(epoch_part)
    if not _PKGVER_RE.match(pkgver) or not any(c.isdigit() for c in pkgver):
        raise ValueError(f"invalid version `{pkgver}`")
    return epoch, split_segments(pkgver)


def _parse_pkgrel(pkgrel: str) -> Version:
    """Return the release number, raising ValueError with a reason on bad input."""
    if not _PKGREL_RE.match(pkgrel):
        raise ValueError(f"invalid release number `{pkgrel}`")
    try:
        return Version(pkgrel)
    except InvalidVersion as e:
        raise ValueError(f"invalid release number `{pkgrel}`: {e}") from e


def parse_package_path(path: str) -> ParseResult:
    """Parse a package archive path into a Package.

    Never raises for a malformed name: the file is returned as an IgnoredFile
    carrying the original path and the reason it was rejected.

    Args:
        path: Path to the archive; only the basename is inspected.

    Returns:
        Package on success, IgnoredFile otherwise.
    """
    filename = os.path.basename(path)
    match = _ARCHIVE_RE.match(filename)
    if not match:
        return IgnoredFile(path, "not a package archive")

    fields = match.group("stem").rsplit("-", 3)
    if len(fields) != 4 or not all(fields):
        return IgnoredFile(path, "missing name, version, release or architecture field")
    name, pkgver, pkgrel, arch = fields

    if not _ARCH_RE.match(arch):
        return IgnoredFile(path, f"invalid architecture `{arch}`")
    try:
        epoch, segments = _parse_pkgver(pkgver)
        release = _parse_pkgrel(pkgrel)
    except ValueError as e:
        return IgnoredFile(path, str(e))

    return Package(
        path=path,
        name=name,
        version_string=f"{pkgver}-{pkgrel}",
        version_components=VersionComponents(epoch=epoch, segments=segments, release=release),
        arch=arch,
        extension=Constants.PACKAGE_MARKER + (match.group("compression") or ""),
    )
