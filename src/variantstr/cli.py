"""variantstr CLI interface.

Commands:
- check: Load schema files and validate every template against its fields
- variants: List a union's variants with their resolved templates
- render: Render a value given as YAML/JSON value data
- parse: Parse display text back to a field-less variant
- init: Initialize variantstr configuration

Global options:
- --config: Path to configuration file
- --verbose: Enable verbose output with timestamps
- --quiet: Suppress info messages
- --ci: Enable JSON log output
- --version: Show version and exit
"""

import json
from pathlib import Path
from typing import Annotated

import typer
import yaml

from variantstr import __version__
from variantstr.config import (
    VariantStrConfig,
    create_default_config,
    create_example_schema,
    load_config,
)
from variantstr.errors import VariantStrError
from variantstr.loader import build_value, load_schema_files, parse_value_data
from variantstr.registry import SchemaRegistry
from variantstr.templates import resolve
from variantstr.utils.logging import configure_from_cli, get_logger

app = typer.Typer(
    name="variantstr",
    help="Render display strings for tagged-union values from templates",
    add_completion=False,
    no_args_is_help=True,
)

# Global state
_config: VariantStrConfig | None = None
_logger = get_logger("cli")

SchemaOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--schema",
        "-s",
        help="Schema file (repeatable, defaults to the configured paths)",
        exists=True,
        dir_okay=False,
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"variantstr {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose output with timestamps"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress info messages (warnings and errors only)"),
    ] = False,
    ci: Annotated[
        bool,
        typer.Option("--ci", help="Enable CI mode with JSON log output"),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """variantstr - display strings for tagged-union values."""
    global _config

    configure_from_cli(verbose=verbose, quiet=quiet, ci=ci)

    try:
        _config = load_config(config_path=config)
        if _config.config_path:
            _logger.debug(f"Loaded config from: {_config.config_path}")
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as e:
        _logger.error(f"Failed to load config: {e}")
        raise typer.Exit(1)


def _load_registry(schemas: list[Path] | None) -> SchemaRegistry:
    """Load schema files from the CLI or the configuration."""
    config = _config or VariantStrConfig()
    paths = list(schemas) if schemas else config.schema_paths()

    if not paths:
        _logger.error("No schema files given (use --schema or configure schemas.paths)")
        raise typer.Exit(1)

    try:
        return load_schema_files(paths, strict=config.schemas.strict)
    except FileNotFoundError as e:
        _logger.error(str(e))
        raise typer.Exit(1)
    except VariantStrError as e:
        _logger.error(f"Invalid schema: {e}")
        raise typer.Exit(1)


def _use_json(json_output: bool) -> bool:
    return json_output or (_config is not None and _config.output.format == "json")


# =============================================================================
# check command
# =============================================================================


@app.command()
def check(
    schemas: Annotated[
        list[Path] | None,
        typer.Argument(help="Schema files to validate", exists=True, dir_okay=False),
    ] = None,
) -> None:
    """Validate schema files.

    Every template is scanned and matched against its variant's fields, and
    the nested type graph is checked for unknown and self-referential types.

    Exit codes:
        0: All schemas valid
        1: A schema is invalid
    """
    registry = _load_registry(schemas)
    unions = registry.list_unions()

    typer.echo(f"✅ {len(unions)} unions valid: {', '.join(unions)}")


# =============================================================================
# variants command
# =============================================================================


@app.command()
def variants(
    union: Annotated[str, typer.Argument(help="Union type name")],
    schemas: SchemaOption = None,
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List a union's variants and their resolved templates."""
    registry = _load_registry(schemas)
    try:
        union_schema = registry.get(union)
    except VariantStrError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    rows = [(v.label, resolve(v)) for v in union_schema.variants]

    if _use_json(json_output):
        typer.echo(json.dumps([{"label": label, "template": t} for label, t in rows], indent=2))
        return

    width = max((len(label) for label, _ in rows), default=0)
    for label, t in rows:
        typer.echo(f"{label.ljust(width)}  {t}")


# =============================================================================
# render command
# =============================================================================


@app.command()
def render(
    union: Annotated[str, typer.Argument(help="Union type name")],
    value: Annotated[
        str,
        typer.Argument(help="Value data, e.g. 'Green' or '{Circle: [2]}'"),
    ],
    schemas: SchemaOption = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output display, template and arguments as JSON"),
    ] = False,
) -> None:
    """Render a value of a union type."""
    registry = _load_registry(schemas)

    try:
        tagged = build_value(registry.get(union), parse_value_data(value), registry)
        result = tagged.rendered()
    except (VariantStrError, ValueError) as e:
        _logger.error(f"Cannot render value: {e}")
        raise typer.Exit(1)

    if _use_json(json_output):
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(result.display)


# =============================================================================
# parse command
# =============================================================================


@app.command()
def parse(
    union: Annotated[str, typer.Argument(help="Union type name")],
    text: Annotated[str, typer.Argument(help="Display text to parse")],
    schemas: SchemaOption = None,
) -> None:
    """Parse display text back to a field-less variant label."""
    registry = _load_registry(schemas)

    try:
        tagged = registry.get(union).parse(text)
    except VariantStrError as e:
        _logger.error(str(e))
        raise typer.Exit(1)

    typer.echo(tagged.label)


# =============================================================================
# init command
# =============================================================================


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite existing config"),
    ] = False,
) -> None:
    """Initialize variantstr configuration.

    Creates .variantstr/config.yaml and an example schema file.
    """
    config_dir = Path(".variantstr")
    config_dir.mkdir(exist_ok=True)

    config_file = config_dir / "config.yaml"
    if config_file.exists() and not force:
        _logger.error(f"Config already exists: {config_file}")
        _logger.info("Use --force to overwrite")
        raise typer.Exit(1)

    config_file.write_text(create_default_config())
    _logger.info(f"Created config: {config_file}")

    schema_file = config_dir / "schema.yaml"
    if not schema_file.exists():
        schema_file.write_text(create_example_schema())
        _logger.info(f"Created example schema: {schema_file}")

    typer.echo("\n✅ variantstr configuration initialized")
    typer.echo(f"   Config: {config_file}")
    typer.echo(f"   Schema: {schema_file}")


if __name__ == "__main__":
    app()
