"""Validation utilities for user input."""
import json
from typing import Any, Dict, Tuple


class ValidationError(Exception):
    """Exception raised for validation errors."""
    pass


class Validator:
    """Validation utilities for user input."""

    @staticmethod
    def not_empty(value: str, message: str = "Input cannot be empty") -> str:
        """Validate that input is not empty."""
        if not value or value.strip() == "":
            raise ValidationError(message)
        return value.strip()

    @staticmethod
    def is_binding_label(value: str, message: str = "Label must not contain '[' or ']'") -> str:
        """Validate that input can name a placeholder."""
        value = Validator.not_empty(value, "Label cannot be empty")
        if "[" in value or "]" in value:
            raise ValidationError(message)
        return value

    @staticmethod
    def is_binding_pair(value: str, message: str = "Expected LABEL=VALUE") -> Tuple[str, str]:
        """
        Validate a LABEL=VALUE pair and split it.

        The label is stripped; the value is kept exactly, so it may be empty
        or contain further '=' characters.
        """
        if "=" not in value:
            raise ValidationError(f"{message}, got {value!r}")
        label, text = value.split("=", 1)
        return Validator.is_binding_label(label), text

    @staticmethod
    def is_json_object(value: str, message: str = "Bindings file must contain a JSON object") -> Dict[str, Any]:
        """Validate that input is a JSON object and return it."""
        try:
            data = json.loads(value)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid JSON: {e}")
        if not isinstance(data, dict):
            raise ValidationError(message)
        return data
