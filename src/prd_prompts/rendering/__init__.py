"""Template parsing and rendering."""
from .errors import (
    InvalidBindings,
    InvalidTemplate,
    TemplateError,
    TemplateNotFoundError,
    UnresolvedPlaceholder,
)
from .renderer import (
    TemplateRenderer,
    Token,
    UnresolvedPolicy,
    missing,
    parse,
    placeholders,
    render,
    validate_bindings,
)
