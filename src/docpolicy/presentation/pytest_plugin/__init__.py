"""pytest plugin for docpolicy.

Provides fixtures for documentation checks:
    docpolicy_config: Documentation policy (override in conftest.py)
    docpolicy: DocPolicy over the source directory

Configuration (pytest.ini or pyproject.toml):
    docpolicy_source_dir: Source directory to analyze (default: "src")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from docpolicy.presentation.pytest_plugin.fixtures import docpolicy, docpolicy_config

if TYPE_CHECKING:
    import pytest

__all__ = [
    "docpolicy",
    "docpolicy_config",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "docpolicy_source_dir",
        "Source directory checked by the docpolicy fixture",
        default="src",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "docpolicy: mark test as documentation policy test",
    )
