"""Documentation requirement configuration.

A doc type absent from the requirements mapping is not checked.
A requirement without descriptor requires documentation everywhere.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from docpolicy.domain.model.descriptor import BlockDescriptor, ExclusionDescriptor
from docpolicy.domain.model.enums import DocType, Severity

MEMBER_DOC_TYPES: frozenset[DocType] = frozenset({DocType.METHODS, DocType.PROPERTIES})
BLOCK_DOC_TYPES: frozenset[DocType] = frozenset(
    {
        DocType.CLASSES,
        DocType.ENUMS,
        DocType.FUNCTIONS,
        DocType.INTERFACES,
        DocType.VARIABLES,
    }
)


@dataclass(frozen=True, slots=True)
class DocRequirement:
    """Documentation requirement for one doc type.

    Attributes:
        doc_type: Doc type the requirement applies to
        member: Member policy (METHODS, PROPERTIES only)
        block: Block policy (module-level doc types only)
    """

    doc_type: DocType
    member: ExclusionDescriptor | None = None
    block: BlockDescriptor | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.member is not None and self.doc_type not in MEMBER_DOC_TYPES:
            raise ValueError(f"{self.doc_type.value} does not accept a member descriptor")
        if self.block is not None and self.doc_type not in BLOCK_DOC_TYPES:
            raise ValueError(f"{self.doc_type.value} does not accept a block descriptor")

    @classmethod
    def everywhere(cls, doc_type: DocType) -> DocRequirement:
        """Requirement with no exemptions."""
        return cls(doc_type=doc_type)

    def describe(self) -> str:
        """One-line description of the policy."""
        if self.member is not None:
            parts = [
                "locations=" + _join(loc.value for loc in self.member.locations),
                "privacies=" + _join(p.value for p in self.member.privacies),
            ]
            if self.member.ignores:
                parts.append("ignores=" + ", ".join(str(i) for i in self.member.ignores))
            return "; ".join(parts)
        if self.block is not None:
            return "exposures=" + _join(e.value for e in self.block.exposures)
        return "all"


@dataclass(frozen=True, slots=True)
class DocsConfig:
    """Immutable documentation policy.

    Attributes:
        requirements: Doc type -> requirement. Read-only mapping.
        severity: Severity of produced violations
    """

    requirements: Mapping[DocType, DocRequirement] = field(
        default_factory=lambda: MappingProxyType({})
    )
    severity: Severity = Severity.ERROR

    def __post_init__(self) -> None:
        """Validate and freeze. FAIL-FIRST."""
        for doc_type, requirement in self.requirements.items():
            if requirement.doc_type is not doc_type:
                raise ValueError(
                    f"requirement for {doc_type.value} is keyed as {requirement.doc_type.value}"
                )
        if not isinstance(self.requirements, MappingProxyType):
            object.__setattr__(self, "requirements", MappingProxyType(dict(self.requirements)))

    def requirement_for(self, doc_type: DocType) -> DocRequirement | None:
        """Requirement for doc type, None if not checked."""
        return self.requirements.get(doc_type)

    @classmethod
    def default(cls) -> DocsConfig:
        """Require documentation for every doc type without exemptions."""
        return cls(requirements={dt: DocRequirement.everywhere(dt) for dt in DocType})


def _join(values: Iterable[str]) -> str:
    return ",".join(sorted(values)) or "none"
