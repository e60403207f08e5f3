"""Domain model: value objects, entities, configuration."""

from docpolicy.domain.model.check_result import CheckResult
from docpolicy.domain.model.configuration import (
    BLOCK_DOC_TYPES,
    MEMBER_DOC_TYPES,
    DocRequirement,
    DocsConfig,
)
from docpolicy.domain.model.declaration import Declaration
from docpolicy.domain.model.descriptor import BlockDescriptor, ExclusionDescriptor
from docpolicy.domain.model.enums import (
    DeclarationKind,
    DocType,
    MemberCategory,
    Severity,
    Visibility,
)
from docpolicy.domain.model.facts import BlockFacts, DeclarationFacts
from docpolicy.domain.model.policy import Exposure, Ignore, Location, Privacy
from docpolicy.domain.model.source_span import SourceSpan
from docpolicy.domain.model.violation import Violation

__all__ = [
    # Enums
    "DeclarationKind",
    "DocType",
    "MemberCategory",
    "Severity",
    "Visibility",
    # Policy primitives
    "Exposure",
    "Ignore",
    "Location",
    "Privacy",
    # Descriptors
    "BlockDescriptor",
    "ExclusionDescriptor",
    # Facts
    "BlockFacts",
    "DeclarationFacts",
    # Entities
    "Declaration",
    "SourceSpan",
    "Violation",
    "CheckResult",
    # Configuration
    "BLOCK_DOC_TYPES",
    "MEMBER_DOC_TYPES",
    "DocRequirement",
    "DocsConfig",
]
