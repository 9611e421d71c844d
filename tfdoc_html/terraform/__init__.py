"""Terraform module documentation backed by terraform-docs."""

from .loader import generate_markdown_table, read_output_values

__all__ = ["generate_markdown_table", "read_output_values"]
