"""Template resolution: explicit override or computed default."""

import logging
import re
from functools import lru_cache

from variantstr.models.schema import VariantSchema, VariantShape

logger = logging.getLogger(__name__)

# Lower/digit followed by upper ("SlateGray"), or an acronym followed by a
# capitalised word ("HTTPServer")
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def segment_words(label: str) -> str:
    """Split a variant label at internal uppercase boundaries.

    Args:
        label: Declared variant name

    Returns:
        Words joined by single spaces

    Examples:
        >>> segment_words("SlateGray")
        'Slate Gray'
        >>> segment_words("Green")
        'Green'
    """
    return " ".join(_WORD_BOUNDARY_RE.split(label))


@lru_cache(maxsize=1024)
def resolve(variant: VariantSchema) -> str:
    """Return the raw template for a variant.

    An explicit template is returned verbatim without checking it against
    the fields. Otherwise a default is derived from the variant shape; named
    fields are never included in a default template.

    Args:
        variant: Variant schema

    Returns:
        Template string
    """
    if variant.explicit_template is not None:
        return variant.explicit_template

    words = segment_words(variant.label)

    shape = variant.shape
    if shape == VariantShape.POSITIONAL:
        template = " ".join([words, *("{}" for _ in variant.fields)])
    elif shape in (VariantShape.UNIT, VariantShape.NAMED):
        template = words
    else:
        raise ValueError(f"Unknown variant shape: {shape}")

    logger.debug("Default template for %s: %r", variant.label, template)
    return template
