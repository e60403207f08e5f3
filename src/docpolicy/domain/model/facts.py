"""Declaration facts consumed by exclusions."""

from dataclasses import dataclass

from docpolicy.domain.model.enums import DeclarationKind, Visibility


@dataclass(frozen=True, slots=True)
class DeclarationFacts:
    """Structural facts of one class or Protocol member.

    Computed fresh per node by the fact extractor.

    Attributes:
        name: Declared name
        kind: Structural tag
        visibility: PUBLIC/PROTECTED/PRIVATE, exactly one applies
        is_static: Bound to the class rather than instances
        is_simply_typed: Annotated with trivial types only
    """

    name: str
    kind: DeclarationKind
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = False
    is_simply_typed: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def is_private(self) -> bool:
        """True if declared private."""
        return self.visibility is Visibility.PRIVATE

    @property
    def is_protected(self) -> bool:
        """True if declared protected."""
        return self.visibility is Visibility.PROTECTED


@dataclass(frozen=True, slots=True)
class BlockFacts:
    """Facts of one module-level declaration.

    Attributes:
        name: Declared name
        is_exported: Part of the module's public surface
    """

    name: str
    is_exported: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
