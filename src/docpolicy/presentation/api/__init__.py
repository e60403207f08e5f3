"""Fluent API for documentation checks.

Public exports:
    DocPolicy: Entry point for fluent queries and assertions
"""

from docpolicy.presentation.api.policy import DocPolicy

__all__ = ["DocPolicy"]
