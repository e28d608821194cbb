"""Schema entities describing a tagged-union type.

This module contains the already-parsed structure the rendering core works on:
- FieldKind: How a field's value is stringified
- FieldSchema: One field of a variant
- VariantShape: Closed set of variant layouts (unit, positional, named)
- VariantSchema: One case of a tagged-union type
"""

from dataclasses import dataclass, field
from enum import Enum

from variantstr.errors import SchemaError, UnsupportedFieldKindError


class FieldKind(Enum):
    """How a field's runtime value is turned into text."""

    PRIMITIVE = "primitive"  # natural textual conversion
    NESTED_UNION = "union"  # recursive render of the nested value

    @classmethod
    def parse(cls, value: str) -> "FieldKind":
        """Parse a field kind from its schema-file spelling.

        Args:
            value: "primitive", "union" or "nested_union"

        Returns:
            Matching FieldKind

        Raises:
            UnsupportedFieldKindError: If the spelling is not recognised
        """
        normalized = str(value).strip().lower()
        if normalized == "nested_union":
            normalized = cls.NESTED_UNION.value
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise UnsupportedFieldKindError(value)


class VariantShape(Enum):
    """Layout of a variant's fields."""

    UNIT = "unit"
    POSITIONAL = "positional"
    NAMED = "named"


@dataclass(frozen=True)
class FieldSchema:
    """One field of a variant.

    Attributes:
        name: Field name for struct-like fields, None for tuple-like fields
        kind: Whether the value is primitive or a nested tagged union
        type_name: Name of the nested union type (NESTED_UNION fields only)
    """

    name: str | None = None
    kind: FieldKind = FieldKind.PRIMITIVE
    type_name: str | None = None

    def __post_init__(self) -> None:
        """Reject kinds the renderer cannot stringify."""
        if not isinstance(self.kind, FieldKind):
            raise UnsupportedFieldKindError(self.kind)
        if self.name is not None and not (
            isinstance(self.name, str) and self.name.isidentifier()
        ):
            raise SchemaError(f"Invalid field name: {self.name!r}")
        if self.type_name is not None and not isinstance(self.type_name, str):
            raise SchemaError(f"Invalid nested type name: {self.type_name!r}")
        if self.type_name is not None and self.kind is not FieldKind.NESTED_UNION:
            raise SchemaError(
                f"Field {self.name or '<positional>'} declares type "
                f"'{self.type_name}' but is not a nested union"
            )

    @property
    def is_named(self) -> bool:
        """Return True for struct-like fields."""
        return self.name is not None


@dataclass(frozen=True)
class VariantSchema:
    """One case of a tagged-union type.

    The order of ``fields`` is the declaration order and is the canonical
    order used to bind positional placeholders.

    Attributes:
        label: Declared variant name (e.g. "SlateGray")
        fields: Ordered field schemas, empty for a unit variant
        explicit_template: Template override, None when the default applies
        named: Declared with struct-like braces even when ``fields`` is empty
    """

    label: str
    fields: tuple[FieldSchema, ...] = field(default_factory=tuple)
    explicit_template: str | None = None
    named: bool = False

    def __post_init__(self) -> None:
        """Normalize fields to a tuple and check layout consistency."""
        object.__setattr__(self, "fields", tuple(self.fields))

        if not isinstance(self.label, str) or not self.label.isidentifier():
            raise SchemaError(f"Invalid variant label: {self.label!r}")

        named_count = sum(1 for f in self.fields if f.is_named)
        if 0 < named_count < len(self.fields):
            raise SchemaError(
                f"Variant '{self.label}' mixes named and positional fields"
            )
        if self.named and named_count < len(self.fields):
            raise SchemaError(
                f"Variant '{self.label}' is declared named but has unnamed fields"
            )

        names = [f.name for f in self.fields if f.name is not None]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise SchemaError(
                f"Variant '{self.label}' has duplicate fields: {duplicates}"
            )

        if named_count:
            object.__setattr__(self, "named", True)

    @property
    def shape(self) -> VariantShape:
        """Classify the variant layout."""
        if self.named:
            return VariantShape.NAMED
        if self.fields:
            return VariantShape.POSITIONAL
        return VariantShape.UNIT

    def field_index(self, name: str) -> int | None:
        """Return the declaration index of a named field, or None."""
        for index, f in enumerate(self.fields):
            if f.name == name:
                return index
        return None
