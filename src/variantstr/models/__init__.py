"""variantstr data models.

This module exports the immutable entities the rendering core works on:
- FieldKind, FieldSchema: Fields of a variant
- VariantShape, VariantSchema: One case of a tagged-union type
- Placeholder, PlaceholderForm: Parsed substitution points
- RenderedValue: Display, template and arguments of one render call
- Renderable, PrimitiveValue: Uniform rendering capability
"""

from variantstr.models.placeholder import Placeholder, PlaceholderForm, RenderedValue
from variantstr.models.renderable import PrimitiveValue, Renderable
from variantstr.models.schema import FieldKind, FieldSchema, VariantSchema, VariantShape

__all__ = [
    "FieldKind",
    "FieldSchema",
    "VariantShape",
    "VariantSchema",
    "Placeholder",
    "PlaceholderForm",
    "RenderedValue",
    "Renderable",
    "PrimitiveValue",
]
