"""Schema registry for tagged-union types.

The registry holds every known UnionSchema by name and checks the type graph
they form: nested-union fields must reference registered unions, and no
union may contain itself, directly or through other unions. Both checks run
at registration time so rendering never meets an unknown or cyclic type.
"""

import logging
from collections.abc import Iterable
from typing import Any

from variantstr.errors import SchemaError
from variantstr.union import UnionSchema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Registry of union schemas by name.

    Usage:
        registry = SchemaRegistry()
        registry.register_all(load_schema_file(Path("shapes.yaml")))
        color = registry.get("Color")
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._unions: dict[str, UnionSchema] = {}

    # =========================================================================
    # Registration
    # =========================================================================

    def register(self, union: UnionSchema, replace: bool = False) -> None:
        """Register a single union.

        Nested types may reference unions that are not registered yet; call
        ``validate`` once everything is loaded, or use ``register_all``.

        Args:
            union: Union schema to register
            replace: Allow replacing an existing union with the same name

        Raises:
            SchemaError: If the name is taken or the union closes a cycle
        """
        if union.name in self._unions and not replace:
            raise SchemaError(f"Union already registered: {union.name}")

        previous = self._unions.get(union.name)
        self._unions[union.name] = union
        try:
            self._check_cycles()
        except SchemaError:
            if previous is None:
                del self._unions[union.name]
            else:
                self._unions[union.name] = previous
            raise

        logger.debug("Registered union %s (%d variants)", union.name, len(union.variants))

    def register_all(self, unions: Iterable[UnionSchema], strict: bool = True) -> None:
        """Register several unions and validate the resulting graph.

        Either every union is registered or, on error, none is.

        Args:
            unions: Union schemas to register
            strict: Also reject nested types that are not registered

        Raises:
            SchemaError: If a name is taken, a reference is unknown, or the
                graph has a cycle
        """
        snapshot = dict(self._unions)
        try:
            for union in unions:
                self.register(union)
            if strict:
                self.validate()
        except SchemaError:
            self._unions = snapshot
            raise

    # =========================================================================
    # Retrieval
    # =========================================================================

    def get(self, name: str) -> UnionSchema:
        """Get a registered union.

        Raises:
            SchemaError: If no union has that name
        """
        if name not in self._unions:
            available = self.list_unions()
            raise SchemaError(f"Union '{name}' not registered. Available: {available}")
        return self._unions[name]

    def __contains__(self, name: object) -> bool:
        return name in self._unions

    def list_unions(self) -> list[str]:
        """Get registered union names in registration order."""
        return list(self._unions.keys())

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self) -> None:
        """Check that every nested reference resolves and the graph is acyclic.

        Raises:
            SchemaError: On an unknown nested type or a cycle
        """
        for union in self._unions.values():
            unknown = sorted(union.nested_types() - self._unions.keys())
            if unknown:
                raise SchemaError(
                    f"Union '{union.name}' references unknown types: {unknown}"
                )
        self._check_cycles()

    def _check_cycles(self) -> None:
        visiting: set[str] = set()
        done: set[str] = set()

        def visit(name: str, path: list[str]) -> None:
            if name in done or name not in self._unions:
                return
            if name in visiting:
                cycle = " -> ".join([*path[path.index(name):], name])
                raise SchemaError(f"Self-referential union types: {cycle}")
            visiting.add(name)
            for nested in sorted(self._unions[name].nested_types()):
                visit(nested, [*path, name])
            visiting.discard(name)
            done.add(name)

        for name in self._unions:
            visit(name, [])

    def get_metadata(self) -> dict[str, Any]:
        """Get registry metadata for logging and debugging."""
        return {
            "unions": {
                name: union.variant_names() for name, union in self._unions.items()
            },
        }


# Global registry instance
_registry: SchemaRegistry | None = None


def get_registry() -> SchemaRegistry:
    """Get the global schema registry instance."""
    global _registry
    if _registry is None:
        _registry = SchemaRegistry()
    return _registry


def reset_registry() -> None:
    """Reset the global registry (primarily for testing)."""
    global _registry
    _registry = None
