"""Convert generated markdown into a styled, pretty-printed HTML document."""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Optional

try:
    from bs4 import BeautifulSoup  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4 lxml"
    ) from exc

try:
    import markdown  # type: ignore[import-not-found]
except ImportError as exc:
    raise SystemExit(
        "Missing dependency 'markdown'. Install with pip install markdown"
    ) from exc

from ..errors import RenderError

MARKDOWN_EXTENSIONS = ("extra", "toc")

DEFAULT_STYLE = """
td, tr, th, table {
  border: 1px solid black;
  border-collapse: collapse;
}
td, th {
  padding-left: 10px;
  padding-right: 10px;
  padding-top: 5px;
  padding-bottom: 5px;
}
th {
  background-color: #d6d5d2;
}
body {
  margin: 50px;
}
a {
  text-decoration: none;
}
"""

HTML_TEMPLATE = """<html>
<head>
<style>
{style}
</style>
</head>
<body>
{header}{body}
</body>
</html>
"""


def markdown_to_html(markdown_text: str) -> str:
    """Return the HTML fragment for ``markdown_text``."""

    return markdown.markdown(
        markdown_text, extensions=list(MARKDOWN_EXTENSIONS)
    )


def load_style(css_file: Optional[str]) -> str:
    """Return the stylesheet to embed, reading ``css_file`` when given."""

    if not css_file:
        return DEFAULT_STYLE
    try:
        return Path(css_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise RenderError(f"Unable to read CSS file {css_file}: {exc}") from exc


def generate_html(
    markdown_text: str,
    css_file: Optional[str] = None,
    header: Optional[str] = None,
) -> str:
    """Wrap ``markdown_text`` in a complete HTML document.

    A ``css_file`` replaces the default stylesheet verbatim. A ``header`` is
    rendered as a centred ``<h1>`` ahead of the converted markdown.
    """

    style = load_style(css_file)
    heading = ""
    if header:
        heading = f'<h1 style="text-align: center;">{escape(header)}</h1>\n'

    document = HTML_TEMPLATE.format(
        style=style,
        header=heading,
        body=markdown_to_html(markdown_text),
    )
    soup = BeautifulSoup(document, "lxml")
    return soup.prettify()
