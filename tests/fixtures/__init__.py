"""Test fixtures for variantstr.

Schema files:
- schemas/shapes.yaml: Color, Shape, Object and Tag unions used across tests
- schemas/invalid_template.yaml: A template with more placeholders than fields
- schemas/cyclic.yaml: A union that contains itself
"""

from pathlib import Path

# Path to fixtures directory
FIXTURES_DIR = Path(__file__).parent

# Path to schema files
SCHEMAS_DIR = FIXTURES_DIR / "schemas"

SHAPES_SCHEMA = SCHEMAS_DIR / "shapes.yaml"
INVALID_TEMPLATE_SCHEMA = SCHEMAS_DIR / "invalid_template.yaml"
CYCLIC_SCHEMA = SCHEMAS_DIR / "cyclic.yaml"


def get_schema(name: str) -> Path:
    """Get path to a schema fixture.

    Args:
        name: Schema file stem (e.g. "shapes")

    Returns:
        Path to the schema file

    Raises:
        ValueError: If the schema doesn't exist
    """
    schema_path = SCHEMAS_DIR / f"{name}.yaml"
    if not schema_path.exists():
        raise ValueError(f"Schema fixture not found: {name}")
    return schema_path
