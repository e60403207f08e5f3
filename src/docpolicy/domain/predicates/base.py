"""Predicate type aliases."""

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docpolicy.domain.model.facts import DeclarationFacts

# Type alias for predicates over member facts
FactPredicate = Callable[["DeclarationFacts"], bool]
