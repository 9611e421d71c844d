"""Output sinks for generated documentation."""

from .local import write_to_file
from .s3 import S3Target, parse_uri, s3_upload

__all__ = ["S3Target", "parse_uri", "s3_upload", "write_to_file"]
