"""Exception hierarchy for schema and rendering defects.

Every schema error is a construction-time defect: the same schema always
fails or always succeeds, whatever value is rendered. They are raised as
early as the schema allows (field construction, variant construction,
registration) and are never recoverable by retry.
"""

from typing import Any


class VariantStrError(Exception):
    """Base class for all variantstr errors."""


class SchemaError(VariantStrError):
    """Raised when a union or variant schema is structurally invalid."""


class MalformedTemplateError(SchemaError):
    """Raised when a template contains an unterminated or empty-name brace."""

    def __init__(self, template: str, position: int, message: str | None = None) -> None:
        self.template = template
        self.position = position
        self.message = message or "Malformed placeholder"
        super().__init__(f"{self.message} at position {position} in template {template!r}")


class PlaceholderFieldMismatchError(SchemaError):
    """Raised when a placeholder cannot be bound to a field of its variant."""

    def __init__(self, variant: str, placeholder: str, message: str) -> None:
        self.variant = variant
        self.placeholder = placeholder
        super().__init__(f"Variant '{variant}': placeholder {placeholder} {message}")


class UnsupportedFieldKindError(SchemaError):
    """Raised when a field is neither primitive nor a nested union."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        super().__init__(f"Unsupported field kind: {kind!r}")


class VariantParseError(VariantStrError, ValueError):
    """Raised when text does not match any parseable variant of a union."""

    def __init__(self, union: str, text: str) -> None:
        self.union = union
        self.text = text
        super().__init__(f"Invalid {union} variant: {text}")
