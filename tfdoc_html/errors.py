"""Exception types shared by the documentation pipeline."""

from __future__ import annotations


class TfdocError(Exception):
    """Base error; ``exit_code`` is the process status reported by the CLI."""

    exit_code = 1


class UsageError(TfdocError):
    """Raised when flags or positional arguments are missing or invalid."""


class ConfigError(UsageError):
    """Raised when runtime configuration cannot be loaded."""


class GenerationError(TfdocError):
    """Raised when the documentation body cannot be produced."""


class ModuleLoadError(GenerationError):
    """Raised when terraform-docs cannot describe the module."""


class RenderError(GenerationError):
    """Raised when markdown cannot be turned into an HTML document."""


class OutputError(TfdocError):
    """Raised when a rendered document cannot be delivered."""

    exit_code = 2


class InvalidS3UriError(OutputError):
    """Raised for URIs that do not look like ``s3://bucket/key``."""
