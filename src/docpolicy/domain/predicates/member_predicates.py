"""Member fact predicates.

Building blocks for per-category exclusion specialization.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpolicy.domain.model.enums import DeclarationKind

if TYPE_CHECKING:
    from docpolicy.domain.model.facts import DeclarationFacts

PROPERTY_OR_METHOD_KINDS = frozenset(
    {
        DeclarationKind.PROPERTY_SIGNATURE,
        DeclarationKind.METHOD_SIGNATURE,
        DeclarationKind.PROPERTY_DECLARATION,
        DeclarationKind.METHOD_DECLARATION,
    }
)

SIGNATURE_KINDS = frozenset(
    {
        DeclarationKind.PROPERTY_SIGNATURE,
        DeclarationKind.METHOD_SIGNATURE,
    }
)


def is_property_or_method(facts: DeclarationFacts) -> bool:
    """Member is a typed property or method, not an accessor or constructor."""
    return facts.kind in PROPERTY_OR_METHOD_KINDS


def is_signature(facts: DeclarationFacts) -> bool:
    """Member is a signature rather than an implementation."""
    return facts.kind in SIGNATURE_KINDS


def is_simply_typed(facts: DeclarationFacts) -> bool:
    """Member is annotated with trivial types only."""
    return facts.is_simply_typed


def never(facts: DeclarationFacts) -> bool:
    """Predicate for facts a category does not consult."""
    return False
