"""AST analyzers extracting declaration facts from Python code."""

from docpolicy.infrastructure.analyzers.base import (
    compute_module_name,
    extract_all_names,
    extract_base_names,
    find_module_root,
    get_visibility,
    has_decorator,
    is_exported,
    make_span,
    target_names,
)
from docpolicy.infrastructure.analyzers.declaration_collector import DeclarationCollector
from docpolicy.infrastructure.analyzers.docstring_detector import DocstringDetector
from docpolicy.infrastructure.analyzers.member_analyzer import MemberAnalyzer
from docpolicy.infrastructure.analyzers.type_analyzer import (
    is_classvar_annotation,
    is_simple_annotation,
    is_simply_typed_function,
)

__all__ = [
    # Base utilities
    "compute_module_name",
    "extract_all_names",
    "extract_base_names",
    "find_module_root",
    "get_visibility",
    "has_decorator",
    "is_exported",
    "make_span",
    "target_names",
    # Type analysis
    "is_classvar_annotation",
    "is_simple_annotation",
    "is_simply_typed_function",
    # Analyzers
    "DeclarationCollector",
    "DocstringDetector",
    "MemberAnalyzer",
]
