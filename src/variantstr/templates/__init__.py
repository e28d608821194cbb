"""variantstr template core.

Template resolution, placeholder scanning and rendering. Every function
here is pure and safe to call from any thread.
"""

from variantstr.templates.renderer import (
    bind,
    display_only,
    render,
    template_only,
    validate_variant,
)
from variantstr.templates.resolver import resolve, segment_words
from variantstr.templates.scanner import scan, substitute

__all__ = [
    "resolve",
    "segment_words",
    "scan",
    "substitute",
    "bind",
    "render",
    "display_only",
    "template_only",
    "validate_variant",
]
