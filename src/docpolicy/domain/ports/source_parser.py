"""Source parser port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from docpolicy.domain.model.declaration import Declaration


class SourceParserPort(ABC):
    """Port for collecting documentable declarations from source code.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def parse_file(self, path: Path) -> tuple[Declaration, ...]:
        """Collect declarations of a single Python file.

        Args:
            path: Path to .py file

        Returns:
            Declarations in source order

        Raises:
            ParsingError: If file cannot be parsed
        """
        ...

    @abstractmethod
    def parse_directory(self, path: Path) -> tuple[Declaration, ...]:
        """Collect declarations of every Python file under a directory.

        Args:
            path: Root directory path

        Returns:
            Declarations, files in sorted path order

        Raises:
            ParsingError: If any file cannot be parsed
        """
        ...
