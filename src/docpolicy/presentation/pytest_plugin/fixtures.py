"""pytest fixtures for documentation checks.

User overrides docpolicy_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from docpolicy.domain.model.configuration import DocsConfig
from docpolicy.infrastructure.adapters.config_loader import load_config
from docpolicy.presentation.api.policy import DocPolicy


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def _root_dir(request: pytest.FixtureRequest) -> Path:
    return Path(str(getattr(request.config, "rootpath", ".")))


@pytest.fixture(scope="session")
def docpolicy_config(request: pytest.FixtureRequest) -> DocsConfig:
    """Documentation policy from [tool.docpolicy] in rootdir pyproject.toml.

    Falls back to DocsConfig.default() without a pyproject.toml.
    Override in conftest.py for a code-defined policy.

    Returns:
        DocsConfig
    """
    pyproject = _root_dir(request) / "pyproject.toml"
    if not pyproject.exists():
        return DocsConfig.default()
    return load_config(pyproject)


@pytest.fixture(scope="session")
def docpolicy(request: pytest.FixtureRequest, docpolicy_config: DocsConfig) -> DocPolicy:
    """Declarations of the configured source directory under the active policy.

    Reads docpolicy_source_dir from pytest ini (default: "src").

    Returns:
        DocPolicy entry point
    """
    source_dir = _get_ini_value(request.config, "docpolicy_source_dir", "src")
    source_path = _root_dir(request) / source_dir

    if not source_path.exists():
        raise FileNotFoundError(
            f"docpolicy_source_dir '{source_path}' does not exist. "
            f"Configure docpolicy_source_dir in pytest.ini or pyproject.toml."
        )

    return DocPolicy.from_path(source_path, docpolicy_config)
