"""Exceptions raised while parsing and rendering prompt templates."""
from typing import List, Optional


class TemplateError(Exception):
    """Base class for template rendering errors."""
    pass


class InvalidTemplate(TemplateError):
    """Raised when a template is empty or its bracket syntax is malformed."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)


class InvalidBindings(TemplateError):
    """Raised when a binding key or value cannot be used for substitution."""

    def __init__(self, message: str, label: Optional[str] = None):
        self.label = label
        super().__init__(message)


class UnresolvedPlaceholder(TemplateError):
    """Raised under the ``error`` policy when placeholders have no binding."""

    def __init__(self, labels: List[str]):
        self.labels = list(labels)
        joined = ", ".join(f"[{label}]" for label in self.labels)
        super().__init__(f"Unresolved placeholders: {joined}")


class TemplateNotFoundError(LookupError):
    """Raised when the template library has no template by the given name."""
    pass
