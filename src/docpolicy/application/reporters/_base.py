"""Stream-bound reporter base.

Every bundled reporter writes one rendering of a CheckResult to a text
stream; this class owns that stream.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from docpolicy.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Reporter writing to a text stream (stdout unless given).

    Satisfies ReporterProtocol; subclasses only decide the rendering.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                self.output.write(f"{result.violation_count} undocumented\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output if output is not None else sys.stdout

    @property
    def output(self) -> TextIO:
        """Stream reports are written to."""
        return self._output

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Write one rendering of result to the output stream."""
