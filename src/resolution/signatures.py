"""Association of detached signatures with the packages they sign."""

from typing import Iterable, List, Tuple

from versioning.parser import signature_base


def associate_signatures(
    signatures: Iterable[str],
    kept: Iterable[str],
    removed: Iterable[str],
) -> Tuple[List[str], List[str]]:
    """Route signature files after the packages have been decided.

    A signature follows its package into the removal list. If its package is
    not kept either (ignored, or never a package at all) the signature is
    ignored, never deleted. Signatures of kept packages are left alone.

    Returns:
        (removed_signatures, ignored_signatures)
    """
    kept = set(kept)
    removed = set(removed)
    removed_sigs: List[str] = []
    ignored_sigs: List[str] = []
    for sig_path in signatures:
        base = signature_base(sig_path)
        if base in removed:
            removed_sigs.append(sig_path)
        elif base not in kept:
            ignored_sigs.append(sig_path)
    return removed_sigs, ignored_sigs
