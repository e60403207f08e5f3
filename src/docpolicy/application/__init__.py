"""Application layer for documentation checking.

- services: Main facade (DocsChecker)
- reporters: Output formatting (PlainText, JSON, Console)
"""

from docpolicy.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from docpolicy.application.services import DocsChecker

__all__ = [
    # Reporters
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    # Services
    "DocsChecker",
]
