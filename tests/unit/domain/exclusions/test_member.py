"""Tests for domain/exclusions/member.py."""

import itertools

import pytest

from docpolicy.domain.exclusions.member import (
    MemberExclusion,
    excludes,
    location_satisfied,
    privacy_satisfied,
    traits_for,
)
from docpolicy.domain.model.descriptor import ExclusionDescriptor
from docpolicy.domain.model.enums import DeclarationKind, MemberCategory, Visibility
from docpolicy.domain.model.policy import Ignore, Location, Privacy
from tests.factories import make_descriptor, make_facts

CLASS = MemberCategory.CLASS_MEMBER
INTERFACE = MemberCategory.INTERFACE_MEMBER

ALL_FACTS = [
    make_facts(kind=kind, visibility=vis, is_static=static, is_simply_typed=simple)
    for kind, vis, static, simple in itertools.product(
        DeclarationKind, Visibility, (False, True), (False, True)
    )
]


class TestRequireEverything:
    """Locations {ALL} and privacies {ALL} without ignores."""

    @pytest.mark.parametrize("category", list(MemberCategory))
    def test_never_excludes(self, category: MemberCategory) -> None:
        descriptor = ExclusionDescriptor.require_all()
        for facts in ALL_FACTS:
            assert excludes(facts, descriptor, category) is False


class TestRequireNothing:
    """Empty location and privacy sets."""

    @pytest.mark.parametrize("category", list(MemberCategory))
    def test_always_excludes(self, category: MemberCategory) -> None:
        descriptor = ExclusionDescriptor()
        for facts in ALL_FACTS:
            assert excludes(facts, descriptor, category) is True

    def test_empty_locations_with_all_privacies_excludes(self) -> None:
        descriptor = make_descriptor(privacies=(Privacy.ALL,))
        facts = make_facts(kind=DeclarationKind.OTHER)
        assert excludes(facts, descriptor, CLASS) is True

    def test_empty_privacies_with_all_locations_excludes(self) -> None:
        descriptor = make_descriptor(locations=(Location.ALL,))
        facts = make_facts(kind=DeclarationKind.OTHER)
        assert excludes(facts, descriptor, CLASS) is True


class TestScenarios:
    """End-to-end verdicts for representative policies."""

    def test_instance_public_requires_public_instance(self) -> None:
        descriptor = make_descriptor(locations=(Location.INSTANCE,), privacies=(Privacy.PUBLIC,))
        facts = make_facts(kind=DeclarationKind.OTHER)
        assert excludes(facts, descriptor, CLASS) is False

    def test_instance_public_exempts_private(self) -> None:
        descriptor = make_descriptor(locations=(Location.INSTANCE,), privacies=(Privacy.PUBLIC,))
        facts = make_facts(kind=DeclarationKind.OTHER, visibility=Visibility.PRIVATE)
        assert excludes(facts, descriptor, CLASS) is True

    def test_signature_requires_interface_signature(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIGNATURE,), privacies=(Privacy.ALL,))
        facts = make_facts(kind=DeclarationKind.METHOD_SIGNATURE)
        assert excludes(facts, descriptor, INTERFACE) is False

    def test_signature_exempts_class_property_declaration(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIGNATURE,), privacies=(Privacy.ALL,))
        facts = make_facts(kind=DeclarationKind.PROPERTY_DECLARATION)
        assert excludes(facts, descriptor, CLASS) is True

    def test_all_location_beats_ignore(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.ALL,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(prefix="_"),),
        )
        facts = make_facts(
            name="_cache",
            kind=DeclarationKind.PROPERTY_DECLARATION,
            visibility=Visibility.PROTECTED,
        )
        assert excludes(facts, descriptor, CLASS) is False

    def test_ignore_beats_simply_typed(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.SIMPLY_TYPED,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(suffix="Id"),),
        )
        facts = make_facts(
            name="userId",
            kind=DeclarationKind.PROPERTY_DECLARATION,
            is_simply_typed=True,
        )
        assert excludes(facts, descriptor, CLASS) is True

    def test_simply_typed_without_ignore_requires(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIMPLY_TYPED,), privacies=(Privacy.ALL,))
        facts = make_facts(
            name="userId",
            kind=DeclarationKind.PROPERTY_DECLARATION,
            is_simply_typed=True,
            is_static=True,
        )
        assert excludes(facts, descriptor, CLASS) is False


class TestIgnorePatterns:
    """Name-based ignores on property/method-like members."""

    @pytest.mark.parametrize(
        "locations",
        [
            (),
            (Location.INSTANCE,),
            (Location.SIGNATURE,),
            (Location.SIMPLY_TYPED,),
            (Location.INSTANCE, Location.SIGNATURE, Location.SIMPLY_TYPED),
        ],
    )
    @pytest.mark.parametrize(
        "kind",
        [
            DeclarationKind.PROPERTY_DECLARATION,
            DeclarationKind.METHOD_DECLARATION,
            DeclarationKind.PROPERTY_SIGNATURE,
            DeclarationKind.METHOD_SIGNATURE,
        ],
    )
    def test_matching_name_is_exempt(
        self, locations: tuple[Location, ...], kind: DeclarationKind
    ) -> None:
        descriptor = make_descriptor(
            locations=locations,
            privacies=(Privacy.ALL,),
            ignores=(Ignore(prefix="on"),),
        )
        facts = make_facts(name="onClick", kind=kind, is_simply_typed=True)
        for category in MemberCategory:
            assert excludes(facts, descriptor, category) is True

    def test_non_matching_name_is_not_exempt(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.INSTANCE,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(prefix="on"),),
        )
        facts = make_facts(name="render")
        assert excludes(facts, descriptor, CLASS) is False

    def test_ignore_not_consulted_for_accessor(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.INSTANCE,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(prefix="on"),),
        )
        facts = make_facts(name="onClick", kind=DeclarationKind.ACCESSOR)
        assert excludes(facts, descriptor, CLASS) is False

    def test_ignore_not_consulted_for_constructor(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.INSTANCE,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(),),
        )
        facts = make_facts(name="__init__", kind=DeclarationKind.CONSTRUCTOR)
        assert excludes(facts, descriptor, CLASS) is False

    def test_static_location_beats_ignore(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.STATIC,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(prefix="make"),),
        )
        facts = make_facts(name="make_default", is_static=True)
        assert excludes(facts, descriptor, CLASS) is False

    def test_any_of_several_ignores_matches(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.INSTANCE,),
            privacies=(Privacy.ALL,),
            ignores=(Ignore(prefix="get"), Ignore(suffix="_hook")),
        )
        facts = make_facts(name="pre_save_hook")
        assert excludes(facts, descriptor, CLASS) is True

    def test_ignore_exempts_regardless_of_privacy(self) -> None:
        descriptor = make_descriptor(
            locations=(Location.INSTANCE,),
            privacies=(Privacy.PRIVATE,),
            ignores=(Ignore(prefix="__"),),
        )
        facts = make_facts(name="__secret", visibility=Visibility.PRIVATE)
        assert excludes(facts, descriptor, CLASS) is True


class TestLocationSatisfied:
    """Guard order of the location check."""

    def test_static_with_static_location(self) -> None:
        descriptor = make_descriptor(locations=(Location.STATIC,))
        facts = make_facts(is_static=True)
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is True

    def test_static_without_static_location_non_member(self) -> None:
        descriptor = make_descriptor(locations=(Location.INSTANCE,))
        facts = make_facts(kind=DeclarationKind.OTHER, is_static=True)
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is False

    def test_instance_with_static_location(self) -> None:
        descriptor = make_descriptor(locations=(Location.STATIC,))
        facts = make_facts(is_static=False)
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is False

    @pytest.mark.parametrize("static", [False, True])
    def test_static_and_instance_are_exclusive(self, static: bool) -> None:
        only_static = make_descriptor(locations=(Location.STATIC,))
        only_instance = make_descriptor(locations=(Location.INSTANCE,))
        facts = make_facts(kind=DeclarationKind.OTHER, is_static=static)
        traits = traits_for(CLASS)
        via_static = location_satisfied(facts, only_static, traits)
        via_instance = location_satisfied(facts, only_instance, traits)
        assert via_static != via_instance
        assert via_static is static

    def test_static_signature_granted_by_signature(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIGNATURE,))
        facts = make_facts(kind=DeclarationKind.METHOD_SIGNATURE, is_static=True)
        assert location_satisfied(facts, descriptor, traits_for(INTERFACE)) is True

    def test_static_declaration_not_granted_by_instance(self) -> None:
        descriptor = make_descriptor(locations=(Location.INSTANCE,))
        facts = make_facts(kind=DeclarationKind.METHOD_DECLARATION, is_static=True)
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is False

    def test_non_static_declaration_falls_back_to_instance(self) -> None:
        descriptor = make_descriptor(locations=(Location.INSTANCE,))
        facts = make_facts(kind=DeclarationKind.PROPERTY_DECLARATION)
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is True

    def test_simply_typed_and_signature_both_configured(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIMPLY_TYPED, Location.SIGNATURE))
        facts = make_facts(
            kind=DeclarationKind.PROPERTY_SIGNATURE,
            is_static=True,
            is_simply_typed=True,
        )
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is True

    def test_simply_typed_ignored_for_non_member_kinds(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIMPLY_TYPED,))
        facts = make_facts(kind=DeclarationKind.ACCESSOR, is_static=True, is_simply_typed=True)
        assert location_satisfied(facts, descriptor, traits_for(CLASS)) is False


class TestInterfaceCategory:
    """Protocol members never consult the simply-typed fact."""

    def test_simply_typed_grant_unused(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIMPLY_TYPED,), privacies=(Privacy.ALL,))
        facts = make_facts(
            kind=DeclarationKind.PROPERTY_SIGNATURE,
            is_static=True,
            is_simply_typed=True,
        )
        assert excludes(facts, descriptor, CLASS) is False
        assert excludes(facts, descriptor, INTERFACE) is True

    def test_signature_grant_used(self) -> None:
        descriptor = make_descriptor(locations=(Location.SIGNATURE,), privacies=(Privacy.ALL,))
        facts = make_facts(kind=DeclarationKind.PROPERTY_SIGNATURE, is_simply_typed=True)
        assert excludes(facts, descriptor, INTERFACE) is False

    def test_traits_differ_only_in_simply_typed(self) -> None:
        class_traits = traits_for(CLASS)
        interface_traits = traits_for(INTERFACE)
        assert class_traits.property_or_method is interface_traits.property_or_method
        assert class_traits.signature is interface_traits.signature
        assert class_traits.simply_typed is not interface_traits.simply_typed


class TestPrivacySatisfied:
    """Privacy check."""

    @pytest.mark.parametrize(
        ("visibility", "privacy"),
        [
            (Visibility.PUBLIC, Privacy.PUBLIC),
            (Visibility.PROTECTED, Privacy.PROTECTED),
            (Visibility.PRIVATE, Privacy.PRIVATE),
        ],
    )
    def test_matching_privacy(self, visibility: Visibility, privacy: Privacy) -> None:
        descriptor = make_descriptor(privacies=(privacy,))
        assert privacy_satisfied(make_facts(visibility=visibility), descriptor) is True

    @pytest.mark.parametrize("visibility", list(Visibility))
    def test_all_privacy(self, visibility: Visibility) -> None:
        descriptor = make_descriptor(privacies=(Privacy.ALL,))
        assert privacy_satisfied(make_facts(visibility=visibility), descriptor) is True

    def test_private_not_satisfied_by_public(self) -> None:
        descriptor = make_descriptor(privacies=(Privacy.PUBLIC, Privacy.PROTECTED))
        facts = make_facts(visibility=Visibility.PRIVATE)
        assert privacy_satisfied(facts, descriptor) is False

    def test_default_visibility_is_public(self) -> None:
        descriptor = make_descriptor(privacies=(Privacy.PUBLIC,))
        implicit = make_facts()
        explicit = make_facts(visibility=Visibility.PUBLIC)
        assert privacy_satisfied(implicit, descriptor) is privacy_satisfied(explicit, descriptor)
        assert privacy_satisfied(implicit, descriptor) is True


class TestMemberExclusion:
    """Tests for MemberExclusion binding."""

    def test_delegates_to_excludes(self) -> None:
        descriptor = make_descriptor(locations=(Location.INSTANCE,), privacies=(Privacy.PUBLIC,))
        exclusion = MemberExclusion(descriptor, CLASS)
        for facts in ALL_FACTS:
            assert exclusion.excludes(facts) is excludes(facts, descriptor, CLASS)

    def test_exposes_descriptor_and_category(self) -> None:
        descriptor = ExclusionDescriptor()
        exclusion = MemberExclusion(descriptor, INTERFACE)
        assert exclusion.descriptor is descriptor
        assert exclusion.category is INTERFACE

    def test_none_descriptor_raises(self) -> None:
        with pytest.raises(TypeError, match="descriptor must not be None"):
            MemberExclusion(None, CLASS)  # type: ignore[arg-type]

    def test_none_category_raises(self) -> None:
        with pytest.raises(TypeError, match="category must not be None"):
            MemberExclusion(ExclusionDescriptor(), None)  # type: ignore[arg-type]

    def test_repeated_calls_agree(self) -> None:
        exclusion = MemberExclusion(ExclusionDescriptor.require_all(), CLASS)
        facts = make_facts()
        assert exclusion.excludes(facts) is exclusion.excludes(facts)
