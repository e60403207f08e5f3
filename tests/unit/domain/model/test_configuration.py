"""Tests for domain/model/configuration.py."""

import pytest

from docpolicy.domain.model.configuration import (
    BLOCK_DOC_TYPES,
    MEMBER_DOC_TYPES,
    DocRequirement,
    DocsConfig,
)
from docpolicy.domain.model.descriptor import BlockDescriptor, ExclusionDescriptor
from docpolicy.domain.model.enums import DocType, Severity
from docpolicy.domain.model.policy import Exposure, Ignore, Location, Privacy
from tests.factories import make_block_descriptor, make_descriptor


class TestDocTypeGroups:
    """Member and block doc types partition all but enum-members."""

    def test_disjoint(self) -> None:
        assert not MEMBER_DOC_TYPES & BLOCK_DOC_TYPES

    def test_cover_all_but_enum_members(self) -> None:
        assert MEMBER_DOC_TYPES | BLOCK_DOC_TYPES | {DocType.ENUM_MEMBERS} == set(DocType)


class TestDocRequirement:
    """Tests for DocRequirement."""

    def test_everywhere(self) -> None:
        requirement = DocRequirement.everywhere(DocType.CLASSES)
        assert requirement.member is None
        assert requirement.block is None
        assert requirement.describe() == "all"

    def test_member_descriptor_on_block_type_raises(self) -> None:
        with pytest.raises(ValueError, match="classes does not accept a member descriptor"):
            DocRequirement(doc_type=DocType.CLASSES, member=ExclusionDescriptor())

    def test_block_descriptor_on_member_type_raises(self) -> None:
        with pytest.raises(ValueError, match="methods does not accept a block descriptor"):
            DocRequirement(doc_type=DocType.METHODS, block=BlockDescriptor())

    def test_block_descriptor_on_enum_members_raises(self) -> None:
        with pytest.raises(ValueError, match="enum-members does not accept a block descriptor"):
            DocRequirement(doc_type=DocType.ENUM_MEMBERS, block=BlockDescriptor())

    def test_describe_member(self) -> None:
        requirement = DocRequirement(
            doc_type=DocType.METHODS,
            member=make_descriptor(
                locations=(Location.STATIC, Location.INSTANCE),
                privacies=(Privacy.PUBLIC,),
                ignores=(Ignore(prefix="test_"),),
            ),
        )
        assert requirement.describe() == (
            "locations=instance,static; privacies=public; ignores=test_*"
        )

    def test_describe_empty_member(self) -> None:
        requirement = DocRequirement(doc_type=DocType.PROPERTIES, member=ExclusionDescriptor())
        assert requirement.describe() == "locations=none; privacies=none"

    def test_describe_block(self) -> None:
        requirement = DocRequirement(
            doc_type=DocType.FUNCTIONS,
            block=make_block_descriptor(Exposure.EXPORTED),
        )
        assert requirement.describe() == "exposures=exported"


class TestDocsConfig:
    """Tests for DocsConfig."""

    def test_empty(self) -> None:
        config = DocsConfig()
        assert config.requirement_for(DocType.CLASSES) is None
        assert config.severity is Severity.ERROR

    def test_default_requires_every_doc_type(self) -> None:
        config = DocsConfig.default()
        for doc_type in DocType:
            requirement = config.requirement_for(doc_type)
            assert requirement is not None
            assert requirement.describe() == "all"

    def test_requirements_are_read_only(self) -> None:
        source = {DocType.CLASSES: DocRequirement.everywhere(DocType.CLASSES)}
        config = DocsConfig(requirements=source)
        source[DocType.ENUMS] = DocRequirement.everywhere(DocType.ENUMS)
        assert config.requirement_for(DocType.ENUMS) is None
        with pytest.raises(TypeError):
            config.requirements[DocType.ENUMS] = source[DocType.ENUMS]  # type: ignore[index]

    def test_mismatched_key_raises(self) -> None:
        with pytest.raises(ValueError, match="requirement for enums is keyed as classes"):
            DocsConfig(requirements={DocType.ENUMS: DocRequirement.everywhere(DocType.CLASSES)})
