"""Block exclusion: exposure policy for module-level declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docpolicy.domain.exclusions.base import Exclusion
from docpolicy.domain.model.policy import Exposure

if TYPE_CHECKING:
    from docpolicy.domain.model.descriptor import BlockDescriptor
    from docpolicy.domain.model.facts import BlockFacts


class BlockExclusion(Exclusion["BlockDescriptor", "BlockFacts"]):
    """Exempts module-level declarations by exposure.

    Used for classes, enums, Protocols, functions and variables.
    """

    __slots__ = ()

    def excludes(self, facts: BlockFacts) -> bool:
        """Check if declaration is exempt from documentation."""
        return not self._exposure_satisfied(facts)

    def _exposure_satisfied(self, facts: BlockFacts) -> bool:
        exposures = self._descriptor.exposures

        if Exposure.ALL in exposures:
            return True

        if facts.is_exported:
            return Exposure.EXPORTED in exposures

        return Exposure.INTERNAL in exposures
