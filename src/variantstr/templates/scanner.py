"""Placeholder scanning for ``{}`` and ``{identifier}`` templates.

The scanner knows nothing about variants: it turns a template string into
an ordered tuple of placeholders, or rejects it as malformed.
"""

import re
from collections.abc import Sequence
from functools import lru_cache

from variantstr.errors import MalformedTemplateError
from variantstr.models.placeholder import Placeholder, PlaceholderForm

_BRACE_RE = re.compile(r"[{}]")
_PLACEHOLDER_RE = re.compile(r"\{(?P<name>[^\W\d]\w*)?\}")


@lru_cache(maxsize=1024)
def scan(template: str) -> tuple[Placeholder, ...]:
    """Scan a template left to right for placeholders.

    Args:
        template: Template text

    Returns:
        Placeholders in occurrence order

    Raises:
        MalformedTemplateError: On an unterminated ``{``, a stray ``}``, or
            a brace pair that does not enclose an identifier
    """
    placeholders: list[Placeholder] = []
    pos = 0

    while True:
        brace = _BRACE_RE.search(template, pos)
        if brace is None:
            break

        start = brace.start()

        if brace.group() == "}":
            raise MalformedTemplateError(template, start, "Unmatched '}'")

        match = _PLACEHOLDER_RE.match(template, start)
        if match is None:
            if template.find("}", start) == -1:
                raise MalformedTemplateError(template, start, "Unterminated '{'")
            raise MalformedTemplateError(template, start, "Invalid placeholder name")

        name = match.group("name")
        if name is None:
            placeholders.append(Placeholder(PlaceholderForm.POSITIONAL, start))
        else:
            placeholders.append(Placeholder(PlaceholderForm.NAMED, start, name))
        pos = match.end()

    return tuple(placeholders)


def substitute(
    template: str,
    placeholders: Sequence[Placeholder],
    arguments: Sequence[str],
) -> str:
    """Replace each scanned placeholder with its argument, in order.

    Args:
        template: Template the placeholders were scanned from
        placeholders: Result of ``scan(template)``
        arguments: One string per placeholder

    Returns:
        Substituted text

    Raises:
        ValueError: If the argument count differs from the placeholder count
    """
    if len(placeholders) != len(arguments):
        raise ValueError(
            f"Expected {len(placeholders)} arguments, got {len(arguments)}"
        )

    pieces: list[str] = []
    cursor = 0
    for placeholder, argument in zip(placeholders, arguments, strict=True):
        pieces.append(template[cursor:placeholder.source_index])
        pieces.append(argument)
        cursor = placeholder.end
    pieces.append(template[cursor:])

    return "".join(pieces)
