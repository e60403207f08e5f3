"""Policy primitives: location, privacy and exposure switches, ignore patterns."""

from dataclasses import dataclass
from enum import Enum


class Location(Enum):
    """Structural location a member must be documented in.

    ALL is a wildcard: every location requires documentation.
    """

    ALL = "all"
    INSTANCE = "instance"
    STATIC = "static"
    SIGNATURE = "signature"
    SIMPLY_TYPED = "simply-typed"


class Privacy(Enum):
    """Declared privacy a member must be documented at.

    ALL is a wildcard: every privacy requires documentation.
    """

    ALL = "all"
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class Exposure(Enum):
    """Module-level exposure a declaration must be documented at."""

    ALL = "all"
    EXPORTED = "exported"
    INTERNAL = "internal"


@dataclass(frozen=True, slots=True)
class Ignore:
    """Name pattern exempting members from documentation.

    An unset side always matches. Empty strings are stored as None.

    Attributes:
        prefix: Required leading substring of the name
        suffix: Required trailing substring of the name
    """

    prefix: str | None = None
    suffix: str | None = None

    def __post_init__(self) -> None:
        """Validate and normalise. FAIL-FIRST."""
        for side in ("prefix", "suffix"):
            value = getattr(self, side)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"{side} must be str or None, got {type(value).__name__}")
            if value == "":
                object.__setattr__(self, side, None)

    def matches(self, name: str) -> bool:
        """Check if name carries the configured prefix and suffix."""
        if self.prefix is not None and not name.startswith(self.prefix):
            return False
        if self.suffix is not None and not name.endswith(self.suffix):
            return False
        return True

    def __str__(self) -> str:
        """Format as prefix*suffix glob."""
        return f"{self.prefix or ''}*{self.suffix or ''}"
