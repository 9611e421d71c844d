"""HTML rendering for module documentation."""

from .html import DEFAULT_STYLE, generate_html

__all__ = ["DEFAULT_STYLE", "generate_html"]
