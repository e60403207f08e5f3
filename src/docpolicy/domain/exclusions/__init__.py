"""Documentation exclusions: the policy decision core.

Pure functions of a frozen descriptor and per-declaration facts.
No I/O, no source parsing, no docstring inspection.
"""

from docpolicy.domain.exclusions.base import Exclusion
from docpolicy.domain.exclusions.block import BlockExclusion
from docpolicy.domain.exclusions.member import (
    CategoryTraits,
    MemberExclusion,
    excludes,
    location_satisfied,
    privacy_satisfied,
    traits_for,
)

__all__ = [
    "BlockExclusion",
    "CategoryTraits",
    "Exclusion",
    "MemberExclusion",
    "excludes",
    "location_satisfied",
    "privacy_satisfied",
    "traits_for",
]
