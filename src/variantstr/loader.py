"""YAML schema files and value data.

Schema files are the schema-construction step: they declare tagged-union
types, their variants, fields and template overrides. Value data (YAML or
JSON) describes one concrete value and is turned into a TaggedValue.

Schema file format:
    unions:
      Color:
        variants:
          - label: Red
            template: Burgundy
          - label: Green
      Object:
        variants:
          - label: Complex
            template: "Color: {}. Shape: {}."
            fields: [Color, Shape]

A field entry is either a mapping (``name``, ``kind``, ``type``) or a
string: ``primitive`` for a primitive field, anything else names a nested
union type.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from variantstr.errors import SchemaError
from variantstr.models.schema import FieldKind, FieldSchema, VariantSchema
from variantstr.registry import SchemaRegistry
from variantstr.union import TaggedValue, UnionSchema

logger = logging.getLogger(__name__)


# =============================================================================
# Schema Loading
# =============================================================================


def _load_field(entry: Any, context: str) -> FieldSchema:
    if isinstance(entry, str):
        if entry.strip().lower() == FieldKind.PRIMITIVE.value:
            return FieldSchema()
        return FieldSchema(kind=FieldKind.NESTED_UNION, type_name=entry)

    if not isinstance(entry, dict):
        raise SchemaError(f"{context}: field must be a mapping or string, got {entry!r}")

    kind = FieldKind.parse(entry.get("kind", FieldKind.PRIMITIVE.value))
    type_name = entry.get("type")
    if kind == FieldKind.NESTED_UNION and not type_name:
        raise SchemaError(f"{context}: union field requires a 'type'")

    return FieldSchema(name=entry.get("name"), kind=kind, type_name=type_name)


def _load_variant(entry: Any, union_name: str) -> VariantSchema:
    if isinstance(entry, str):
        return VariantSchema(label=entry)

    if not isinstance(entry, dict) or "label" not in entry:
        raise SchemaError(f"Union '{union_name}': variant requires a 'label'")

    label = entry["label"]
    template = entry.get("template")
    if template is not None and not isinstance(template, str):
        raise SchemaError(f"{union_name}.{label}: template must be a string")

    fields_data = entry.get("fields") or []
    if not isinstance(fields_data, list):
        raise SchemaError(f"{union_name}.{label}: fields must be a list")

    fields = [_load_field(field_entry, f"{union_name}.{label}") for field_entry in fields_data]

    return VariantSchema(
        label=label,
        fields=tuple(fields),
        explicit_template=template,
        named=bool(entry.get("named", False)),
    )


def load_schema_from_dict(data: dict[str, Any]) -> list[UnionSchema]:
    """Build union schemas from parsed schema-file data.

    Args:
        data: Mapping with a top-level ``unions`` key

    Returns:
        Union schemas in file order

    Raises:
        SchemaError: If the data does not describe valid unions
    """
    unions_data = data.get("unions")
    if not isinstance(unions_data, dict):
        raise SchemaError("Schema must contain a 'unions' mapping")

    unions: list[UnionSchema] = []
    for name, union_data in unions_data.items():
        if union_data is None:
            union_data = {}
        if not isinstance(union_data, dict):
            raise SchemaError(f"Union '{name}' must be a mapping with a 'variants' list")
        variants_data = union_data.get("variants") or []
        if not isinstance(variants_data, list):
            raise SchemaError(f"Union '{name}': variants must be a list")
        variants = [_load_variant(entry, name) for entry in variants_data]
        unions.append(UnionSchema(name=name, variants=tuple(variants)))

    return unions


def load_schema_file(path: Path) -> list[UnionSchema]:
    """Load union schemas from a YAML file.

    Args:
        path: Schema file path

    Returns:
        Union schemas in file order

    Raises:
        FileNotFoundError: If the file does not exist
        SchemaError: If the file is not a valid schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SchemaError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SchemaError(f"Schema file must contain a mapping: {path}")

    unions = load_schema_from_dict(data)
    logger.debug("Loaded %d unions from %s", len(unions), path)
    return unions


def load_schema_files(
    paths: list[Path],
    registry: SchemaRegistry | None = None,
    strict: bool = True,
) -> SchemaRegistry:
    """Load schema files into a registry and validate the type graph.

    Args:
        paths: Schema files, loaded in order
        registry: Registry to fill (a new one if None)
        strict: Reject nested types no schema file declares

    Returns:
        The filled registry
    """
    registry = registry if registry is not None else SchemaRegistry()

    unions: list[UnionSchema] = []
    for path in paths:
        unions.extend(load_schema_file(path))

    registry.register_all(unions, strict=strict)
    logger.debug("Registered %d unions from %d schema files", len(unions), len(paths))
    return registry


# =============================================================================
# Value Data
# =============================================================================


def parse_value_data(text: str) -> Any:
    """Parse a YAML or JSON value expression.

    Raises:
        ValueError: If the text is not valid YAML
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid value data: {e}") from e


def build_value(union: UnionSchema, data: Any, registry: SchemaRegistry) -> TaggedValue:
    """Build a TaggedValue from value data.

    Value data forms:
        "Green"                                  unit variant
        {"Circle": [2]}                          positional variant
        {"Unique": {"label": "x", "id": 3}}      named variant
        {"Complex": ["Green", {"Circle": [2]}]}  nested unions

    Args:
        union: Union the value belongs to
        data: Parsed value data
        registry: Registry used to resolve nested union types

    Returns:
        TaggedValue

    Raises:
        ValueError: If the data does not have one of the forms above
        SchemaError: If the data does not fit the variant's fields
    """
    if isinstance(data, str):
        return union.make(data)

    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(
            f"{union.name} value must be a label or a single-key mapping, got {data!r}"
        )

    label, payload = next(iter(data.items()))
    variant = union.get_variant(label)

    if payload is None:
        return union.make(label)

    if isinstance(payload, dict):
        bad_keys = [name for name in payload if not isinstance(name, str)]
        if bad_keys:
            raise ValueError(
                f"{union.name}.{label} field names must be strings, got {bad_keys!r}"
            )
        kwargs = {
            name: _build_field(variant, variant.field_index(name), raw, registry)
            for name, raw in payload.items()
        }
        return union.make(label, **kwargs)

    if not isinstance(payload, list):
        payload = [payload]
    args = [
        _build_field(variant, index, raw, registry) for index, raw in enumerate(payload)
    ]
    return union.make(label, *args)


def _build_field(
    variant: VariantSchema,
    index: int | None,
    raw: Any,
    registry: SchemaRegistry,
) -> Any:
    # Unknown names and extra values fall through to make(), which reports them
    if index is None or index >= len(variant.fields):
        return raw
    schema_field = variant.fields[index]
    if schema_field.kind == FieldKind.NESTED_UNION and schema_field.type_name:
        return build_value(registry.get(schema_field.type_name), raw, registry)
    return raw
