"""Token scanning and annotation comment handling."""

from oklch_names.codec.scanner import OKLCH_PATTERN, scan, token_at, tokens_in_range
from oklch_names.codec.annotation import (
    AnnotationSpan,
    Placement,
    format_annotation,
    format_hover,
    locate,
)

__all__ = [
    "OKLCH_PATTERN",
    "scan",
    "token_at",
    "tokens_in_range",
    "AnnotationSpan",
    "Placement",
    "format_annotation",
    "format_hover",
    "locate",
]
