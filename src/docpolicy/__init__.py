"""docpolicy - documentation requirement policy engine for Python code."""

__version__ = "0.1.0"

from docpolicy.domain.exclusions import excludes
from docpolicy.infrastructure.adapters.config_loader import config_from_mapping, load_config
from docpolicy.presentation.api.policy import DocPolicy

__all__ = ["DocPolicy", "__version__", "config_from_mapping", "excludes", "load_config"]
