"""Reporters for check result output."""

from docpolicy.application.reporters._base import BaseReporter
from docpolicy.application.reporters.console import ConsoleConfig, ConsoleReporter
from docpolicy.application.reporters.json_reporter import JSONReporter
from docpolicy.application.reporters.plain_text import PlainTextReporter
from docpolicy.application.reporters.strategies import (
    ByDocTypeStrategy,
    ByFileStrategy,
    GroupStrategy,
)

__all__ = [
    "BaseReporter",
    "ByDocTypeStrategy",
    "ByFileStrategy",
    "ConsoleConfig",
    "ConsoleReporter",
    "GroupStrategy",
    "JSONReporter",
    "PlainTextReporter",
]
