"""Renderable capability shared by primitive adapters and tagged values."""

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Renderable(Protocol):
    """Anything that exposes the three rendering operations."""

    def display(self) -> str: ...

    def template(self) -> str: ...

    def arguments(self) -> list[str]: ...


@dataclass(frozen=True)
class PrimitiveValue:
    """Adapter giving a plain Python value the Renderable interface.

    The text form is the value's natural ``str()`` conversion, which is
    locale independent for the builtin scalar types.
    """

    value: Any

    def display(self) -> str:
        return str(self.value)

    def template(self) -> str:
        return "{}"

    def arguments(self) -> list[str]:
        return [self.display()]

    def __str__(self) -> str:
        return self.display()


def display(value: Renderable) -> str:
    """Return the display string of any renderable value."""
    return value.display()


def template(value: Renderable) -> str:
    """Return the raw template of any renderable value."""
    return value.template()


def arguments(value: Renderable) -> list[str]:
    """Return the stringified arguments of any renderable value."""
    return value.arguments()
