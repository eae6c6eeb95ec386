"""Selection of the package versions to keep, remove or leave alone."""

from .groups import FoldResult, GroupResolver, InsertResult, PackageGroup, resolve_insert
from .mediator import AmbiguityMediator, MediationResult, presentation_order
from .operator import ConsoleOperator, Operator
from .signatures import associate_signatures

__all__ = [
    "FoldResult",
    "GroupResolver",
    "InsertResult",
    "PackageGroup",
    "resolve_insert",
    "AmbiguityMediator",
    "MediationResult",
    "presentation_order",
    "ConsoleOperator",
    "Operator",
    "associate_signatures",
]
