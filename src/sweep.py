"""Sweep of a package directory: find superseded archives and remove them.

Returns and listings:
    - removed: packages with a newer version present, their signatures, and
      ambiguous candidates the operator did not pick
    - ignored: unparseable files, groups the operator declined to resolve, and
      signatures whose package is not kept
    - kept: the newest package of every name
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from constants import Constants
from errors import IntegrityError
from options import ConfirmLevel, Options
from resolution.groups import GroupResolver
from resolution.mediator import AmbiguityMediator
from resolution.operator import ConsoleOperator, Operator
from resolution.signatures import associate_signatures
from versioning.models import IgnoredFile, Package
from versioning.parser import is_signature_path, parse_package_path

logger = logging.getLogger(__name__)


@dataclass
class ResolutionOutcome:
    """Disjoint, sorted partition of the files of one directory."""
    kept: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    ignored: List[str] = field(default_factory=list)


def list_directory(directory: str) -> List[str]:
    """Return the regular files directly inside `directory`, sorted by path."""
    with os.scandir(directory) as entries:
        return sorted(entry.path for entry in entries if entry.is_file())


def classify_paths(paths: Iterable[str]) -> Tuple[List[Package], List[IgnoredFile], List[str]]:
    """Split paths into parsed packages, unparseable files and signatures."""
    packages: List[Package] = []
    ignored: List[IgnoredFile] = []
    signatures: List[str] = []
    for path in paths:
        if is_signature_path(path):
            signatures.append(path)
            continue
        parsed = parse_package_path(path)
        if isinstance(parsed, IgnoredFile):
            logger.info("%s ignored: %s", parsed.path, parsed.reason)
            ignored.append(parsed)
        else:
            packages.append(parsed)
    return packages, ignored, signatures


def resolve_outcome(
    paths: Iterable[str],
    operator: Operator,
    confirm_level: ConfirmLevel = ConfirmLevel.REMOVAL,
    show_dates: bool = False,
) -> ResolutionOutcome:
    """Decide which of `paths` are kept, removed or ignored.

    Raises:
        IntegrityError: The same path was given twice.
        OperatorInputError: The operator could not be asked about an ambiguity.
    """
    packages, unparsed, signatures = classify_paths(paths)

    fold = GroupResolver(review_all=confirm_level.is_everything()).fold(packages)
    if not fold.ok:
        raise IntegrityError(fold.duplicates)

    mediation = AmbiguityMediator(operator, confirm_level, show_dates).settle(
        fold.groups.values()
    )
    removed = [p.path for p in fold.removed] + mediation.removed
    ignored = [f.path for f in unparsed] + mediation.ignored
    removed_sigs, ignored_sigs = associate_signatures(signatures, mediation.kept, removed)

    return ResolutionOutcome(
        kept=sorted(mediation.kept),
        removed=sorted(removed + removed_sigs),
        ignored=sorted(ignored + ignored_sigs),
    )


def list_old_packages(options: Options, operator: Operator) -> ResolutionOutcome:
    """Resolve the files of `options.directory`."""
    logger.debug("Scanning %s", options.directory)
    return resolve_outcome(
        list_directory(options.directory),
        operator,
        options.confirm_level,
        options.show_dates,
    )


def list_files(operator: Operator, files: List[str], what: str) -> None:
    operator.show(Constants.SECTION_RULE)
    operator.show(f"{len(files)} files {what}...\n")
    for path in files:
        operator.show(path)


def confirm_removal(operator: Operator) -> bool:
    """Only an exact `y` line confirms; anything else aborts every removal."""
    operator.show(Constants.SECTION_RULE)
    return operator.ask(Constants.CONFIRM_PROMPT) == Constants.CONFIRM_ANSWER


def remove_files(
    files: List[str],
    operator: Operator,
    unlink: Callable[[str], None] = os.remove,
) -> None:
    """Delete `files` in order, stopping at the first failure.

    Raises:
        OSError: Propagated from the first failed deletion; later files are
            left in place.
    """
    operator.show(Constants.SECTION_RULE)
    operator.show(f"Actually removing {len(files)} files...\n")
    for path in files:
        operator.show(os.path.basename(path))
        unlink(path)
        logger.debug("Removed %s", path)


def remove_old_packages(
    options: Options,
    operator: Optional[Operator] = None,
) -> Tuple[ResolutionOutcome, bool]:
    """Run a full sweep of `options.directory`.

    Args:
        options: Directory and confirm level of the run.
        operator: Where listings go and answers come from; the console when
            omitted.

    Returns:
        (outcome, deleted) where `deleted` tells whether removal ran.
    """
    operator = operator if operator is not None else ConsoleOperator()
    outcome = list_old_packages(options, operator)

    list_files(operator, outcome.removed, "about to be removed")
    list_files(operator, outcome.ignored, "ignored")

    if options.dry_run:
        logger.info("Dry run: not removing any file.")
        return outcome, False

    level = options.confirm_level
    if level.is_at_least_removal() and outcome.removed and not confirm_removal(operator):
        operator.show(Constants.SECTION_RULE)
        operator.show("Aborting : Not removing any file.")
        return outcome, False

    remove_files(outcome.removed, operator)
    return outcome, True
