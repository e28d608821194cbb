"""Variant renderer.

Renders a variant value to its display string, raw template and argument
list. All three come from one resolve and one scan of the template, so
substituting ``arguments`` into ``template`` always reproduces ``display``.
"""

import logging
from collections.abc import Sequence
from typing import Any

from variantstr.errors import PlaceholderFieldMismatchError
from variantstr.models.placeholder import Placeholder, PlaceholderForm, RenderedValue
from variantstr.models.renderable import PrimitiveValue, Renderable
from variantstr.models.schema import FieldKind, FieldSchema, VariantSchema
from variantstr.templates.resolver import resolve
from variantstr.templates.scanner import scan, substitute

logger = logging.getLogger(__name__)


def bind(variant: VariantSchema, placeholders: Sequence[Placeholder]) -> list[int]:
    """Bind each placeholder to the index of the field it reads.

    Positional placeholders consume positional fields in declaration order
    through a single cursor. Named placeholders look up the field with the
    exact same name. Fields no placeholder refers to are left out.

    Args:
        variant: Variant schema
        placeholders: Placeholders scanned from the variant's template

    Returns:
        Field index per placeholder, in placeholder order

    Raises:
        PlaceholderFieldMismatchError: If a placeholder has no field
    """
    positional = [i for i, f in enumerate(variant.fields) if not f.is_named]
    cursor = 0
    indices: list[int] = []

    for placeholder in placeholders:
        if placeholder.form == PlaceholderForm.POSITIONAL:
            if cursor >= len(positional):
                raise PlaceholderFieldMismatchError(
                    variant.label,
                    placeholder.text,
                    f"at position {placeholder.source_index} has no positional "
                    f"field ({len(positional)} declared)",
                )
            indices.append(positional[cursor])
            cursor += 1
        else:
            index = variant.field_index(placeholder.identifier or "")
            if index is None:
                raise PlaceholderFieldMismatchError(
                    variant.label,
                    placeholder.text,
                    "does not name a field",
                )
            indices.append(index)

    return indices


def validate_variant(variant: VariantSchema) -> tuple[Placeholder, ...]:
    """Check a variant's template against its fields before any value exists.

    Args:
        variant: Variant schema

    Returns:
        The scanned placeholders

    Raises:
        MalformedTemplateError: If the template cannot be scanned
        PlaceholderFieldMismatchError: If a placeholder has no field
    """
    placeholders = scan(resolve(variant))
    bind(variant, placeholders)
    return placeholders


def stringify(field: FieldSchema, value: Any) -> str:
    """Convert one field value to text.

    Nested unions render through their own ``display``; primitives use their
    natural text form.

    Args:
        field: Schema of the field holding the value
        value: Runtime value

    Returns:
        Text form of the value

    Raises:
        TypeError: If a nested-union field holds a non-renderable value
    """
    if isinstance(value, Renderable):
        return value.display()
    if field.kind == FieldKind.NESTED_UNION:
        raise TypeError(
            f"Field {field.name or '<positional>'} expects a renderable "
            f"value, got {type(value).__name__}"
        )
    return PrimitiveValue(value).display()


def _arguments(
    variant: VariantSchema,
    placeholders: Sequence[Placeholder],
    field_values: Sequence[Any],
) -> list[str]:
    if len(field_values) != len(variant.fields):
        raise ValueError(
            f"Variant '{variant.label}' has {len(variant.fields)} fields, "
            f"got {len(field_values)} values"
        )

    return [
        stringify(variant.fields[index], field_values[index])
        for index in bind(variant, placeholders)
    ]


def render(variant: VariantSchema, field_values: Sequence[Any]) -> RenderedValue:
    """Render a variant value.

    Args:
        variant: Schema of the active variant
        field_values: One value per field, in declaration order

    Returns:
        RenderedValue with display, template and arguments

    Raises:
        MalformedTemplateError: If the template cannot be scanned
        PlaceholderFieldMismatchError: If a placeholder has no field
        ValueError: If the value count differs from the field count
    """
    template = resolve(variant)
    placeholders = scan(template)
    arguments = _arguments(variant, placeholders, field_values)
    display = substitute(template, placeholders, arguments)

    logger.debug("Rendered %s: %r", variant.label, display)
    return RenderedValue(display=display, template=template, arguments=arguments)


def display_only(variant: VariantSchema, field_values: Sequence[Any]) -> str:
    """Return only the display string of ``render``."""
    return render(variant, field_values).display


def template_only(variant: VariantSchema) -> str:
    """Return the raw template; field values are never evaluated."""
    return resolve(variant)
