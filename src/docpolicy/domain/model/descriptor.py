"""Exclusion descriptors: immutable per-doc-type policy configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from docpolicy.domain.model.policy import Exposure, Ignore, Location, Privacy


@dataclass(frozen=True, slots=True)
class ExclusionDescriptor:
    """Policy for class and Protocol members.

    Fully defaulted: unset sets are empty, meaning no location or privacy
    ever requires documentation.

    Attributes:
        locations: Locations requiring documentation
        privacies: Privacies requiring documentation
        ignores: Name patterns exempting members, first match wins
    """

    locations: frozenset[Location] = field(default_factory=frozenset)
    privacies: frozenset[Privacy] = field(default_factory=frozenset)
    ignores: tuple[Ignore, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for location in self.locations:
            if not isinstance(location, Location):
                raise TypeError(f"locations must contain Location, got {location!r}")
        for privacy in self.privacies:
            if not isinstance(privacy, Privacy):
                raise TypeError(f"privacies must contain Privacy, got {privacy!r}")
        for ignore in self.ignores:
            if not isinstance(ignore, Ignore):
                raise TypeError(f"ignores must contain Ignore, got {ignore!r}")

    @classmethod
    def require_all(cls) -> ExclusionDescriptor:
        """Descriptor requiring documentation everywhere."""
        return cls(locations=frozenset({Location.ALL}), privacies=frozenset({Privacy.ALL}))


@dataclass(frozen=True, slots=True)
class BlockDescriptor:
    """Policy for module-level declarations.

    Attributes:
        exposures: Exposures requiring documentation
    """

    exposures: frozenset[Exposure] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for exposure in self.exposures:
            if not isinstance(exposure, Exposure):
                raise TypeError(f"exposures must contain Exposure, got {exposure!r}")

    @classmethod
    def require_all(cls) -> BlockDescriptor:
        """Descriptor requiring documentation at every exposure."""
        return cls(exposures=frozenset({Exposure.ALL}))
