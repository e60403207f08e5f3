"""Member exclusion: location, privacy and ignore-pattern policy.

Shared by class members and Protocol members. Categories differ only in
which facts they consult; the precedence chain below is written once and
its order is the policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docpolicy.domain.exclusions.base import Exclusion
from docpolicy.domain.model.enums import MemberCategory
from docpolicy.domain.model.policy import Location, Privacy
from docpolicy.domain.predicates.member_predicates import (
    is_property_or_method,
    is_signature,
    is_simply_typed,
    never,
)

if TYPE_CHECKING:
    from docpolicy.domain.model.descriptor import ExclusionDescriptor
    from docpolicy.domain.model.facts import DeclarationFacts
    from docpolicy.domain.predicates.base import FactPredicate


@dataclass(frozen=True, slots=True)
class CategoryTraits:
    """Fact predicates a construct category consults.

    Attributes:
        property_or_method: Member is a typed property or method
        signature: Member is a signature
        simply_typed: Member is simply typed
    """

    property_or_method: FactPredicate
    signature: FactPredicate
    simply_typed: FactPredicate


_CLASS_MEMBER_TRAITS = CategoryTraits(
    property_or_method=is_property_or_method,
    signature=is_signature,
    simply_typed=is_simply_typed,
)

# Protocol members never consult the simply-typed fact
_INTERFACE_MEMBER_TRAITS = CategoryTraits(
    property_or_method=is_property_or_method,
    signature=is_signature,
    simply_typed=never,
)


def traits_for(category: MemberCategory) -> CategoryTraits:
    """Select the fact predicates of a construct category.

    Args:
        category: Owning construct category

    Returns:
        Category traits
    """
    match category:
        case MemberCategory.CLASS_MEMBER:
            return _CLASS_MEMBER_TRAITS
        case MemberCategory.INTERFACE_MEMBER:
            return _INTERFACE_MEMBER_TRAITS


def excludes(
    facts: DeclarationFacts,
    descriptor: ExclusionDescriptor,
    category: MemberCategory,
) -> bool:
    """Check if a member is exempt from documentation.

    Exempt unless both the location and the privacy require documentation.
    A matching ignore pattern fails the location check outright, so an
    ignored name is exempt whatever its privacy.

    Args:
        facts: Member facts
        descriptor: Member policy
        category: Owning construct category

    Returns:
        True if exempt, False if documentation is required
    """
    traits = traits_for(category)
    return not (
        location_satisfied(facts, descriptor, traits) and privacy_satisfied(facts, descriptor)
    )


def location_satisfied(
    facts: DeclarationFacts,
    descriptor: ExclusionDescriptor,
    traits: CategoryTraits,
) -> bool:
    """Check if the member's location requires documentation.

    Guard order is precedence: ALL beats ignores, ignores beat the
    simply-typed and signature grants, SIMPLY_TYPED is tried before
    SIGNATURE.
    """
    locations = descriptor.locations

    if Location.ALL in locations:
        return True

    if facts.is_static and Location.STATIC in locations:
        return True

    if traits.property_or_method(facts):
        for ignore in descriptor.ignores:
            if ignore.matches(facts.name):
                return False

        if traits.simply_typed(facts) and Location.SIMPLY_TYPED in locations:
            return True

        if traits.signature(facts) and Location.SIGNATURE in locations:
            return True

    if not facts.is_static:
        return Location.INSTANCE in locations

    return False


def privacy_satisfied(facts: DeclarationFacts, descriptor: ExclusionDescriptor) -> bool:
    """Check if the member's privacy requires documentation."""
    privacies = descriptor.privacies

    if Privacy.ALL in privacies:
        return True

    if facts.is_private:
        return Privacy.PRIVATE in privacies

    if facts.is_protected:
        return Privacy.PROTECTED in privacies

    return Privacy.PUBLIC in privacies


class MemberExclusion(Exclusion["ExclusionDescriptor", "DeclarationFacts"]):
    """Member exclusion bound to one descriptor and one construct category.

    One instance exists per (doc type, category) pair.
    """

    __slots__ = ("_category",)

    def __init__(self, descriptor: ExclusionDescriptor, category: MemberCategory) -> None:
        """Initialize member exclusion.

        Args:
            descriptor: Member policy
            category: Construct category this exclusion evaluates

        Raises:
            TypeError: If descriptor or category is None (FAIL-FIRST)
        """
        super().__init__(descriptor)
        if category is None:
            raise TypeError("category must not be None")
        self._category = category

    @property
    def category(self) -> MemberCategory:
        """Construct category this exclusion evaluates."""
        return self._category

    def excludes(self, facts: DeclarationFacts) -> bool:
        """Check if member is exempt from documentation."""
        return excludes(facts, self._descriptor, self._category)
