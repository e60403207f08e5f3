"""Domain exceptions."""

from docpolicy.domain.exceptions.base import DocPolicyError
from docpolicy.domain.exceptions.configuration import ConfigurationError
from docpolicy.domain.exceptions.parsing import ParsingError
from docpolicy.domain.exceptions.violation import UndocumentedError

__all__ = [
    "DocPolicyError",
    "ConfigurationError",
    "ParsingError",
    "UndocumentedError",
]
