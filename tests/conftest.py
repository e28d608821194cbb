"""Shared pytest fixtures for variantstr tests.

Fixtures are organized by category:
- Path fixtures: Schema files under tests/fixtures
- Schema fixtures: Hand-built unions, no schema files involved
- Registry fixtures: Registries loaded from the shared schema file
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from variantstr.loader import load_schema_files
from variantstr.models import FieldKind, FieldSchema, VariantSchema
from variantstr.registry import SchemaRegistry, reset_registry
from variantstr.union import UnionSchema

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def shapes_schema(fixtures_dir: Path) -> Path:
    """Return the path to the shared schema file."""
    return fixtures_dir / "schemas" / "shapes.yaml"


# =============================================================================
# Schema Fixtures
# =============================================================================


@pytest.fixture
def color() -> UnionSchema:
    """Color: Red (overridden as Burgundy), Green, SlateGray."""
    return UnionSchema(
        name="Color",
        variants=(
            VariantSchema(label="Red", explicit_template="Burgundy"),
            VariantSchema(label="Green"),
            VariantSchema(label="SlateGray"),
        ),
    )


@pytest.fixture
def shape() -> UnionSchema:
    """Shape: Circle with a radius."""
    return UnionSchema(
        name="Shape",
        variants=(
            VariantSchema(
                label="Circle",
                fields=(FieldSchema(),),
                explicit_template="Circle with radius: {}",
            ),
        ),
    )


@pytest.fixture
def obj() -> UnionSchema:
    """Object: Generic(text) and Complex(Color, Shape)."""
    return UnionSchema(
        name="Object",
        variants=(
            VariantSchema(
                label="Generic",
                fields=(FieldSchema(),),
                explicit_template="{}",
            ),
            VariantSchema(
                label="Complex",
                fields=(
                    FieldSchema(kind=FieldKind.NESTED_UNION, type_name="Color"),
                    FieldSchema(kind=FieldKind.NESTED_UNION, type_name="Shape"),
                ),
                explicit_template="Color: {}. Shape: {}.",
            ),
        ),
    )


@pytest.fixture
def unique_variant() -> VariantSchema:
    """Struct-like variant with label and id fields."""
    return VariantSchema(
        label="Unique",
        fields=(FieldSchema(name="label"), FieldSchema(name="id")),
        explicit_template="Unique - {label}_{id}",
    )


# =============================================================================
# Registry Fixtures
# =============================================================================


@pytest.fixture
def registry(shapes_schema: Path) -> SchemaRegistry:
    """Return a registry loaded from the shared schema file."""
    return load_schema_files([shapes_schema])


@pytest.fixture(autouse=True)
def _isolate_global_state() -> Iterator[None]:
    """Reset the global registry and CLI logging between tests."""
    yield
    reset_registry()
    logger = logging.getLogger("variantstr")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid configuration."""
    return {
        "schemas": {
            "paths": ["schema.yaml"],
        }
    }
