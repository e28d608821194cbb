"""variantstr configuration system.

Configuration is YAML-based with minimal CLI overrides (--config, --ci).
Schema paths may reference environment variables as ${VAR}.

Configuration file discovery (in priority order):
1. CLI --config argument
2. ./.variantstr/config.yaml
3. ./variantstr.yaml
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# =============================================================================
# Configuration Dataclasses
# =============================================================================


@dataclass
class SchemaConfig:
    """Schema file configuration.

    Attributes:
        paths: Schema files to load, relative to the working directory
        strict: Reject unknown nested types when loading
    """

    paths: list[str] = field(default_factory=list)
    strict: bool = True


@dataclass
class OutputConfig:
    """Output configuration.

    Attributes:
        format: How render results are printed (text, json)
    """

    format: str = "text"

    def __post_init__(self) -> None:
        """Validate output configuration."""
        valid_formats = {"text", "json"}
        if self.format not in valid_formats:
            raise ValueError(f"Invalid output format: {self.format}. Valid: {valid_formats}")


@dataclass
class VariantStrConfig:
    """Top-level variantstr configuration.

    Attributes:
        schemas: Schema files to load
        output: Output format
    """

    schemas: SchemaConfig = field(default_factory=SchemaConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Runtime overrides (set by CLI)
    _config_path: Path | None = field(default=None, repr=False)

    @property
    def config_path(self) -> Path | None:
        """Get the path to the config file that was loaded."""
        return self._config_path

    def schema_paths(self) -> list[Path]:
        """Resolve schema paths against the config file's directory."""
        base = self._config_path.parent if self._config_path else Path.cwd()
        if self._config_path and base.name == ".variantstr":
            base = base.parent
        return [base / p for p in self.schemas.paths]


# =============================================================================
# Schema Path Expansion
# =============================================================================

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def expand_schema_path(path: str) -> str:
    """Expand ``${VAR}`` references in a configured schema path.

    Example: ${SCHEMA_DIR}/colors.yaml -> /srv/schemas/colors.yaml

    Raises:
        ValueError: If a referenced variable is not set
    """
    missing = [name for name in _ENV_VAR_RE.findall(path) if name not in os.environ]
    if missing:
        raise ValueError(f"Environment variable not set: {', '.join(missing)}")
    return _ENV_VAR_RE.sub(lambda m: os.environ[m.group(1)], path)


# =============================================================================
# Config Loading
# =============================================================================

# Searched in order, relative to the working directory
CONFIG_CANDIDATES = (Path(".variantstr") / "config.yaml", Path("variantstr.yaml"))


def find_config_file(start_path: Path | None = None) -> Path | None:
    """Return the first config candidate under ``start_path`` (default: cwd)."""
    base = (start_path or Path.cwd()).resolve()
    return next((base / c for c in CONFIG_CANDIDATES if (base / c).exists()), None)


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a mapping, got {type(value).__name__}")
    return value


def load_config_from_dict(data: dict[str, Any]) -> VariantStrConfig:
    """Build a configuration from parsed YAML data.

    Raises:
        ValueError: If a section or value has the wrong type or an
            environment variable in a schema path is not set
    """
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")

    schemas_data = _section(data, "schemas")
    paths = schemas_data.get("paths") or []
    if isinstance(paths, str):
        paths = [paths]
    if not isinstance(paths, list) or not all(isinstance(p, str) for p in paths):
        raise ValueError("schemas.paths must be a path or a list of paths")

    strict = schemas_data.get("strict", True)
    if not isinstance(strict, bool):
        raise ValueError(f"schemas.strict must be true or false, got {strict!r}")

    output_data = _section(data, "output")

    return VariantStrConfig(
        schemas=SchemaConfig(paths=[expand_schema_path(p) for p in paths], strict=strict),
        output=OutputConfig(format=output_data.get("format", "text")),
    )


def load_config(config_path: Path | None = None) -> VariantStrConfig:
    """Load the explicit config file, or the discovered one, or defaults.

    Raises:
        FileNotFoundError: If config_path is given but doesn't exist
        ValueError: If the file content is not a valid configuration
    """
    if config_path is not None and not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    found_path = config_path or find_config_file()
    if found_path is None:
        return VariantStrConfig()

    with open(found_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    config = load_config_from_dict(data)
    config._config_path = found_path
    return config


def create_default_config() -> str:
    """Create default configuration YAML content.

    Returns:
        YAML string with default configuration and comments
    """
    return '''# variantstr configuration

# Schema files declaring tagged-union types and their templates
schemas:
  paths:
    - ".variantstr/schema.yaml"
  strict: true   # reject nested types that no schema file declares

# Render output
output:
  format: "text"   # text, json
'''


def create_example_schema() -> str:
    """Create an example schema YAML file."""
    return '''# Tagged-union types rendered by variantstr
unions:
  Color:
    variants:
      - label: Red
        template: "Burgundy"
      - Green
      - SlateGray
  Shape:
    variants:
      - label: Circle
        template: "Circle with radius: {}"
        fields: [primitive]
  Object:
    variants:
      - label: Generic
        template: "{}"
        fields: [primitive]
      - label: Complex
        template: "Color: {}. Shape: {}."
        fields: [Color, Shape]
'''
