"""Errors raised while generating helper methods."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all errors that abort a generation run."""

    pass


class SchemaError(GenerationError):
    """Raised when the API description file is malformed."""

    pass


class SchemaResolutionError(GenerationError):
    """Raised when a field type or a return type cannot be resolved against the API description."""

    pass


class RenderError(GenerationError):
    """Raised when the helper template fails to render."""

    pass
