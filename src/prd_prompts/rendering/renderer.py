"""Placeholder substitution for bracketed prompt templates."""
import logging
from collections import abc
from enum import Enum
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from .errors import InvalidBindings, InvalidTemplate, UnresolvedPlaceholder

logger = logging.getLogger(__name__)

OPEN_BRACKET = "["
CLOSE_BRACKET = "]"

Bindings = Mapping[str, Union[str, int, float]]


class UnresolvedPolicy(str, Enum):
    """What to emit for a placeholder that has no binding."""
    LEAVE = "leave"
    BLANK = "blank"
    ERROR = "error"


class Token(NamedTuple):
    """A literal run of text or a single ``[Label]`` placeholder."""
    text: str
    offset: int
    label: Optional[str] = None

    @property
    def is_placeholder(self) -> bool:
        return self.label is not None


def _position(template: str, offset: int) -> Tuple[int, int]:
    """Return the 1-based line and column of ``offset``."""
    line = template.count("\n", 0, offset) + 1
    column = offset - (template.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _find_close(template: str, start: int) -> int:
    """
    Find the bracket closing the placeholder opened at ``start``.

    Args:
        template (str): The template text
        start (int): Offset of the opening bracket

    Returns:
        int: Offset of the matching closing bracket

    Raises:
        InvalidTemplate: If the bracket is nested or is not closed on its line
    """
    for index in range(start + 1, len(template)):
        char = template[index]
        if char == CLOSE_BRACKET:
            return index
        if char == OPEN_BRACKET:
            raise InvalidTemplate("Nested '[' inside placeholder", *_position(template, index))
        if char == "\n":
            break
    raise InvalidTemplate("Unterminated '[' in template", *_position(template, start))


def parse(template: str) -> List[Token]:
    """
    Split a template into literal and placeholder tokens.

    A placeholder runs from ``[`` to the next ``]`` on the same line. A stray
    ``]`` outside a placeholder is literal text.

    Args:
        template (str): The template text

    Returns:
        List[Token]: Tokens in template order; joining their text gives back the template

    Raises:
        InvalidTemplate: If the template is empty, not text, or has malformed brackets
    """
    if not isinstance(template, str):
        raise InvalidTemplate(f"Template must be text, got {type(template).__name__}")
    if not template:
        raise InvalidTemplate("Template must not be empty")

    tokens: List[Token] = []
    literal_start = 0
    index = template.find(OPEN_BRACKET)
    while index != -1:
        end = _find_close(template, index)
        label = template[index + 1:end]
        if not label:
            raise InvalidTemplate("Empty placeholder '[]'", *_position(template, index))

        if literal_start < index:
            tokens.append(Token(template[literal_start:index], literal_start))
        tokens.append(Token(template[index:end + 1], index, label))

        literal_start = end + 1
        index = template.find(OPEN_BRACKET, literal_start)

    if literal_start < len(template):
        tokens.append(Token(template[literal_start:], literal_start))

    logger.debug(f"Parsed template into {len(tokens)} tokens")
    return tokens


def validate_bindings(bindings: Optional[Bindings]) -> Dict[str, str]:
    """
    Check binding labels and convert their values to text.

    Args:
        bindings (Optional[Bindings]): Mapping of placeholder label to replacement value

    Returns:
        Dict[str, str]: The bindings with every value as a string

    Raises:
        InvalidBindings: If a label is not a bracket-free string or a value is not text
    """
    if bindings is None:
        return {}
    if not isinstance(bindings, abc.Mapping):
        raise InvalidBindings(f"Bindings must be a mapping, got {type(bindings).__name__}")

    values: Dict[str, str] = {}
    for label, value in bindings.items():
        if not isinstance(label, str) or not label:
            raise InvalidBindings(f"Binding label must be a non-empty string, got {label!r}")
        if OPEN_BRACKET in label or CLOSE_BRACKET in label:
            raise InvalidBindings(f"Binding label {label!r} must not contain brackets", label)

        # bool subclasses int but is not accepted as text
        if isinstance(value, str):
            values[label] = value
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            values[label] = str(value)
        else:
            raise InvalidBindings(
                f"Value for [{label}] is not representable as text: {value!r}", label
            )
    return values


def _unique_labels(tokens: List[Token]) -> List[str]:
    labels: List[str] = []
    for token in tokens:
        if token.is_placeholder and token.label not in labels:
            labels.append(token.label)
    return labels


class TemplateRenderer:
    """Renders templates against bindings under one unresolved-placeholder policy."""

    def __init__(self, policy: Union[UnresolvedPolicy, str] = UnresolvedPolicy.LEAVE):
        """Initialize the renderer with a policy name or ``UnresolvedPolicy`` value."""
        self.policy = UnresolvedPolicy(policy)

    def render(self, template: str, bindings: Optional[Bindings] = None) -> str:
        """
        Substitute every placeholder in the template.

        Bound placeholders are replaced by their text, which is inserted
        verbatim and never re-scanned. Unbound placeholders are left as
        they are, blanked, or reported, depending on the policy.

        Args:
            template (str): The template text
            bindings (Optional[Bindings]): Mapping of placeholder label to replacement value

        Returns:
            str: The rendered text

        Raises:
            InvalidTemplate: If the template is malformed
            InvalidBindings: If a binding is not usable
            UnresolvedPlaceholder: If the policy is ``error`` and labels are unbound
        """
        tokens = parse(template)
        values = validate_bindings(bindings)

        unresolved = [label for label in _unique_labels(tokens) if label not in values]
        if unresolved and self.policy is UnresolvedPolicy.ERROR:
            raise UnresolvedPlaceholder(unresolved)

        parts: List[str] = []
        for token in tokens:
            if not token.is_placeholder:
                parts.append(token.text)
            elif token.label in values:
                parts.append(values[token.label])
            elif self.policy is UnresolvedPolicy.LEAVE:
                parts.append(token.text)

        logger.info(
            f"Rendered template with {len(values)} bindings, "
            f"{len(unresolved)} unresolved ({self.policy.value})"
        )
        return "".join(parts)

    def placeholders(self, template: str) -> List[str]:
        """Return the unique placeholder labels in order of first appearance."""
        return _unique_labels(parse(template))

    def missing(self, template: str, bindings: Optional[Bindings] = None) -> List[str]:
        """Return the placeholder labels that have no binding."""
        values = validate_bindings(bindings)
        return [label for label in self.placeholders(template) if label not in values]


def render(
    template: str,
    bindings: Optional[Bindings] = None,
    policy: Union[UnresolvedPolicy, str] = UnresolvedPolicy.LEAVE,
) -> str:
    """Render ``template`` with a one-off renderer; see ``TemplateRenderer.render``."""
    return TemplateRenderer(policy).render(template, bindings)


def placeholders(template: str) -> List[str]:
    """Return the unique placeholder labels in ``template``."""
    return _unique_labels(parse(template))


def missing(template: str, bindings: Optional[Bindings] = None) -> List[str]:
    """Return the labels in ``template`` that ``bindings`` leaves unbound."""
    return TemplateRenderer().missing(template, bindings)
