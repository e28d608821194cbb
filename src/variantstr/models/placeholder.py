"""Placeholder and render result entities."""

from dataclasses import dataclass, field
from enum import Enum


class PlaceholderForm(Enum):
    """Kind of substitution point."""

    POSITIONAL = "positional"
    NAMED = "named"


@dataclass(frozen=True)
class Placeholder:
    """A substitution point found inside a template string.

    Attributes:
        form: Positional (``{}``) or named (``{identifier}``)
        source_index: Offset of the opening brace within the template
        identifier: Field name for named placeholders
    """

    form: PlaceholderForm
    source_index: int
    identifier: str | None = None

    @property
    def text(self) -> str:
        """Return the placeholder exactly as written in the template."""
        return "{" + (self.identifier or "") + "}"

    @property
    def end(self) -> int:
        """Offset just past the closing brace."""
        return self.source_index + len(self.text)


@dataclass(frozen=True)
class RenderedValue:
    """Result of rendering one variant value.

    Attributes:
        display: Template with every placeholder replaced
        template: Unmodified raw template
        arguments: Stringified value per placeholder, in template order
    """

    display: str
    template: str
    arguments: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, str | list[str]]:
        """Convert to dictionary for serialization."""
        return {
            "display": self.display,
            "template": self.template,
            "arguments": list(self.arguments),
        }
