"""Generate HTML or markdown documentation for Terraform modules."""

__version__ = "0.1.0"
