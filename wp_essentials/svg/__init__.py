"""SVG sanitization."""

from .sanitizer import Sanitizer, SvgSanitizer


__all__ = ["Sanitizer", "SvgSanitizer"]
