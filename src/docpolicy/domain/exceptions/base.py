"""Base exceptions for docpolicy domain."""


class DocPolicyError(Exception):
    """Root exception for all docpolicy errors.

    All domain exceptions inherit from this.
    Allows catching all docpolicy-specific errors.
    """
