"""Base class for documentation exclusions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

D = TypeVar("D")
F = TypeVar("F")


class Exclusion(ABC, Generic[D, F]):
    """Decides whether a declaration is exempt from documentation.

    Binds one immutable descriptor. Stateless between excludes() calls,
    safe to share across threads.

    Subclasses must implement excludes().
    """

    __slots__ = ("_descriptor",)

    def __init__(self, descriptor: D) -> None:
        """Initialize exclusion.

        Args:
            descriptor: Frozen policy descriptor

        Raises:
            TypeError: If descriptor is None (FAIL-FIRST)
        """
        if descriptor is None:
            raise TypeError("descriptor must not be None")
        self._descriptor = descriptor

    @property
    def descriptor(self) -> D:
        """Bound policy descriptor."""
        return self._descriptor

    @abstractmethod
    def excludes(self, facts: F) -> bool:
        """Check if declaration is exempt.

        Args:
            facts: Declaration facts

        Returns:
            True if exempt, False if documentation is required
        """
