"""Infrastructure adapters for external interfaces."""

from docpolicy.infrastructure.adapters.ast_parser import ASTSourceParser
from docpolicy.infrastructure.adapters.config_loader import config_from_mapping, load_config

__all__ = [
    "ASTSourceParser",
    "config_from_mapping",
    "load_config",
]
