"""Application services."""

from docpolicy.application.services.docs_checker import DocsChecker

__all__ = ["DocsChecker"]
