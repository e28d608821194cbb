"""variantstr - display strings for tagged-union values.

Each variant of a tagged-union type carries a template with positional
(``{}``) and named (``{identifier}``) placeholders, or gets a default one
derived from its label. Every value exposes three consistent operations:
- display: the template with each placeholder substituted
- template: the raw template, independent of field values
- arguments: the substituted strings, in template order

Nested tagged-union fields render recursively through the same operations.
"""

__version__ = "0.1.0"
__author__ = "variantstr Contributors"

from variantstr.errors import (
    MalformedTemplateError,
    PlaceholderFieldMismatchError,
    SchemaError,
    UnsupportedFieldKindError,
    VariantParseError,
    VariantStrError,
)
from variantstr.models import (
    FieldKind,
    FieldSchema,
    PrimitiveValue,
    Renderable,
    RenderedValue,
    VariantSchema,
)
from variantstr.models.renderable import arguments, display, template
from variantstr.registry import SchemaRegistry, get_registry
from variantstr.union import TaggedValue, UnionSchema

__all__ = [
    "FieldKind",
    "FieldSchema",
    "VariantSchema",
    "UnionSchema",
    "TaggedValue",
    "Renderable",
    "PrimitiveValue",
    "RenderedValue",
    "SchemaRegistry",
    "get_registry",
    "display",
    "template",
    "arguments",
    "VariantStrError",
    "SchemaError",
    "MalformedTemplateError",
    "PlaceholderFieldMismatchError",
    "UnsupportedFieldKindError",
    "VariantParseError",
]
