"""Domain ports (interfaces/protocols)."""

from docpolicy.domain.ports.reporter import ReporterProtocol
from docpolicy.domain.ports.source_parser import SourceParserPort

__all__ = [
    "ReporterProtocol",
    "SourceParserPort",
]
