"""Tests for domain/model/facts.py."""

import pytest

from docpolicy.domain.model.enums import DeclarationKind, Visibility
from docpolicy.domain.model.facts import BlockFacts, DeclarationFacts


class TestDeclarationFacts:
    """Tests for DeclarationFacts."""

    def test_defaults(self) -> None:
        facts = DeclarationFacts(name="run", kind=DeclarationKind.METHOD_DECLARATION)
        assert facts.visibility is Visibility.PUBLIC
        assert facts.is_static is False
        assert facts.is_simply_typed is False

    @pytest.mark.parametrize(
        ("visibility", "private", "protected"),
        [
            (Visibility.PUBLIC, False, False),
            (Visibility.PROTECTED, False, True),
            (Visibility.PRIVATE, True, False),
        ],
    )
    def test_visibility_flags_are_exclusive(
        self, visibility: Visibility, private: bool, protected: bool
    ) -> None:
        facts = DeclarationFacts(name="x", kind=DeclarationKind.OTHER, visibility=visibility)
        assert facts.is_private is private
        assert facts.is_protected is protected

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            DeclarationFacts(name="", kind=DeclarationKind.OTHER)


class TestBlockFacts:
    """Tests for BlockFacts."""

    def test_creation(self) -> None:
        facts = BlockFacts(name="main", is_exported=True)
        assert facts.name == "main"
        assert facts.is_exported is True

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name must not be empty"):
            BlockFacts(name="", is_exported=False)
