"""Tagged-union schemas and the values built from them.

A UnionSchema is the host-side view of one tagged-union type: its ordered
variants, each already validated against its template. TaggedValue is one
concrete value of such a type and implements the Renderable interface, so
it can itself be a field of another union.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from variantstr.errors import SchemaError, VariantParseError
from variantstr.models.placeholder import RenderedValue
from variantstr.models.renderable import PrimitiveValue, Renderable
from variantstr.models.schema import FieldKind, VariantSchema, VariantShape
from variantstr.templates.renderer import render, template_only, validate_variant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UnionSchema:
    """A tagged-union type made of ordered variants.

    Every variant template is scanned and checked against its fields when
    the union is constructed, so a successfully built union never fails to
    render.

    Attributes:
        name: Type name (e.g. "Color")
        variants: Variants in declaration order
    """

    name: str
    variants: tuple[VariantSchema, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate labels and templates."""
        object.__setattr__(self, "variants", tuple(self.variants))

        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise SchemaError(f"Invalid union name: {self.name!r}")

        labels = [v.label for v in self.variants]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise SchemaError(f"Union '{self.name}' has duplicate variants: {duplicates}")

        for variant in self.variants:
            try:
                validate_variant(variant)
            except SchemaError as e:
                logger.error("Invalid variant %s.%s: %s", self.name, variant.label, e)
                raise

    def variant_names(self) -> list[str]:
        """Get the declared labels of this union's variants."""
        return [v.label for v in self.variants]

    def get_variant(self, label: str) -> VariantSchema:
        """Look up a variant by label.

        Raises:
            SchemaError: If the union has no such variant
        """
        for variant in self.variants:
            if variant.label == label:
                return variant
        raise SchemaError(
            f"Union '{self.name}' has no variant '{label}'. "
            f"Available: {self.variant_names()}"
        )

    def nested_types(self) -> set[str]:
        """Names of the unions referenced by nested-union fields."""
        return {
            f.type_name
            for v in self.variants
            for f in v.fields
            if f.kind == FieldKind.NESTED_UNION and f.type_name is not None
        }

    def make(self, label: str, *args: Any, **kwargs: Any) -> "TaggedValue":
        """Build a value of one variant.

        Positional variants take positional arguments, named variants take
        keyword arguments in any order.

        Args:
            label: Variant label
            *args: Field values for a positional variant
            **kwargs: Field values for a named variant

        Returns:
            TaggedValue for the variant

        Raises:
            SchemaError: If the arguments do not fit the variant's fields
        """
        variant = self.get_variant(label)
        shape = variant.shape

        if shape == VariantShape.NAMED:
            if args:
                raise SchemaError(f"Variant '{label}' takes keyword fields only")
            missing = [f.name for f in variant.fields if f.name not in kwargs]
            unknown = sorted(set(kwargs) - {f.name for f in variant.fields})
            if missing or unknown:
                raise SchemaError(
                    f"Variant '{label}' fields mismatch "
                    f"(missing: {missing}, unknown: {unknown})"
                )
            raw = [kwargs[f.name] for f in variant.fields if f.name is not None]
        else:
            if kwargs:
                raise SchemaError(f"Variant '{label}' takes positional fields only")
            if len(args) != len(variant.fields):
                raise SchemaError(
                    f"Variant '{label}' takes {len(variant.fields)} fields, "
                    f"got {len(args)}"
                )
            raw = list(args)

        values: list[Renderable] = []
        for schema_field, value in zip(variant.fields, raw, strict=True):
            if schema_field.kind == FieldKind.NESTED_UNION:
                if not isinstance(value, Renderable):
                    raise SchemaError(
                        f"Variant '{label}' expects a union value, "
                        f"got {type(value).__name__}"
                    )
                if (
                    schema_field.type_name is not None
                    and isinstance(value, TaggedValue)
                    and value.union.name != schema_field.type_name
                ):
                    raise SchemaError(
                        f"Variant '{label}' expects {schema_field.type_name}, "
                        f"got {value.union.name}"
                    )
                values.append(value)
            else:
                values.append(value if isinstance(value, Renderable) else PrimitiveValue(value))

        return TaggedValue(union=self, variant=variant, values=tuple(values))

    def parse(self, text: str) -> "TaggedValue":
        """Parse display text back into a field-less variant.

        Only variants without fields can be recovered from text; their
        display is fixed by the schema.

        Args:
            text: Display string

        Returns:
            The matching TaggedValue

        Raises:
            VariantParseError: If no field-less variant displays as ``text``
        """
        for variant in self.variants:
            if variant.fields:
                continue
            value = TaggedValue(union=self, variant=variant, values=())
            if value.display() == text:
                return value
        raise VariantParseError(self.name, text)


@dataclass(frozen=True)
class TaggedValue:
    """A concrete value of a tagged-union type.

    Attributes:
        union: Union the value belongs to
        variant: Active variant
        values: One renderable per field, in declaration order
    """

    union: UnionSchema = field(repr=False)
    variant: VariantSchema
    values: tuple[Renderable, ...] = field(default_factory=tuple)

    @property
    def label(self) -> str:
        """Label of the active variant."""
        return self.variant.label

    def rendered(self) -> RenderedValue:
        """Render display, template and arguments together."""
        return render(self.variant, self.values)

    def display(self) -> str:
        return self.rendered().display

    def template(self) -> str:
        return template_only(self.variant)

    def arguments(self) -> list[str]:
        return self.rendered().arguments

    def __str__(self) -> str:
        return self.display()
