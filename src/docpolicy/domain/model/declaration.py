"""Declaration entity: one documentable element found in source."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docpolicy.domain.model.enums import DocType

if TYPE_CHECKING:
    from docpolicy.domain.model.enums import MemberCategory
    from docpolicy.domain.model.facts import BlockFacts, DeclarationFacts
    from docpolicy.domain.model.source_span import SourceSpan

_MEMBER_DOC_TYPES = frozenset({DocType.METHODS, DocType.PROPERTIES})


@dataclass(frozen=True, slots=True)
class Declaration:
    """Documentable declaration.

    Members (METHODS, PROPERTIES) carry member facts and the category of
    their owning class. Module-level declarations carry block facts.
    ENUM_MEMBERS carry neither.

    Attributes:
        doc_type: Documentation category
        qualified_name: Full path (module.Class.member)
        span: Source position
        has_docstring: Docstring attached, as reported by the detector
        member: Member facts for METHODS/PROPERTIES
        category: Owning construct category for members
        block: Block facts for module-level declarations
    """

    doc_type: DocType
    qualified_name: str
    span: SourceSpan
    has_docstring: bool
    member: DeclarationFacts | None = None
    category: MemberCategory | None = None
    block: BlockFacts | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.qualified_name:
            raise ValueError("qualified_name must not be empty")

        if self.doc_type in _MEMBER_DOC_TYPES:
            if self.member is None or self.category is None:
                raise ValueError(f"{self.doc_type.value} declaration requires member and category")
            if self.block is not None:
                raise ValueError(f"{self.doc_type.value} declaration cannot have block facts")
        elif self.member is not None or self.category is not None:
            raise ValueError(f"{self.doc_type.value} declaration cannot have member facts")

        if self.doc_type is DocType.ENUM_MEMBERS and self.block is not None:
            raise ValueError("enum-members declaration cannot have block facts")

    @property
    def name(self) -> str:
        """Short name (last segment of qualified_name)."""
        return self.qualified_name.rsplit(".", 1)[-1]
