"""Domain predicates over declaration facts."""

from docpolicy.domain.predicates.base import FactPredicate
from docpolicy.domain.predicates.member_predicates import (
    PROPERTY_OR_METHOD_KINDS,
    SIGNATURE_KINDS,
    is_property_or_method,
    is_signature,
    is_simply_typed,
    never,
)

__all__ = [
    "FactPredicate",
    "PROPERTY_OR_METHOD_KINDS",
    "SIGNATURE_KINDS",
    "is_property_or_method",
    "is_signature",
    "is_simply_typed",
    "never",
]
