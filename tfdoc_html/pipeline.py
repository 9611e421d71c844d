"""Sequential glue from module directory to delivered document."""

from __future__ import annotations

import sys

from .formats import generate_html
from .settings import Settings
from .terraform import generate_markdown_table
from .writers import s3_upload, write_to_file
from .writers.s3 import HTML_CONTENT_TYPE, MARKDOWN_CONTENT_TYPE


def generate_document(settings: Settings) -> str:
    """Render the module as markdown, then as HTML unless markdown only."""

    document = generate_markdown_table(
        settings.source_path,
        include_outputs=settings.include_outputs,
        terraform_docs_bin=settings.terraform_docs_bin,
        terraform_bin=settings.terraform_bin,
    )
    if settings.markdown_only:
        return document
    return generate_html(document, settings.css_file, settings.header)


def deliver(settings: Settings, document: str) -> None:
    """Send ``document`` to every sink the settings enable."""

    if settings.file:
        written = write_to_file(settings.file, document)
        print(f"✅ Documentation written: {written}", file=sys.stderr)

    if settings.s3_uri:
        content_type = (
            MARKDOWN_CONTENT_TYPE
            if settings.markdown_only
            else HTML_CONTENT_TYPE
        )
        s3_upload(settings.s3_uri, document, content_type=content_type)
        print(f"✅ Documentation uploaded: {settings.s3_uri}", file=sys.stderr)

    if not settings.no_stdout:
        print(document)


def run(settings: Settings) -> str:
    """Generate and deliver the document for ``settings``."""

    document = generate_document(settings)
    deliver(settings, document)
    return document


__all__ = ["deliver", "generate_document", "run"]
