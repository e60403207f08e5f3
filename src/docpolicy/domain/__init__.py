"""docpolicy domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, types, collections.abc
"""

from docpolicy.domain.exceptions import (
    ConfigurationError,
    DocPolicyError,
    ParsingError,
    UndocumentedError,
)
from docpolicy.domain.exclusions import BlockExclusion, MemberExclusion, excludes
from docpolicy.domain.model import (
    BlockDescriptor,
    BlockFacts,
    CheckResult,
    Declaration,
    DeclarationFacts,
    DeclarationKind,
    DocRequirement,
    DocsConfig,
    DocType,
    ExclusionDescriptor,
    Exposure,
    Ignore,
    Location,
    MemberCategory,
    Privacy,
    Severity,
    SourceSpan,
    Violation,
    Visibility,
)
from docpolicy.domain.ports import ReporterProtocol, SourceParserPort

__all__ = [
    # Exceptions
    "DocPolicyError",
    "ConfigurationError",
    "ParsingError",
    "UndocumentedError",
    # Enums
    "DeclarationKind",
    "DocType",
    "MemberCategory",
    "Severity",
    "Visibility",
    # Policy
    "Exposure",
    "Ignore",
    "Location",
    "Privacy",
    "BlockDescriptor",
    "ExclusionDescriptor",
    "DocRequirement",
    "DocsConfig",
    # Facts and entities
    "BlockFacts",
    "DeclarationFacts",
    "Declaration",
    "SourceSpan",
    "Violation",
    "CheckResult",
    # Exclusions
    "BlockExclusion",
    "MemberExclusion",
    "excludes",
    # Ports
    "ReporterProtocol",
    "SourceParserPort",
]
