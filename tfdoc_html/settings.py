"""Command-line flags resolved into an immutable settings object."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Dict, NoReturn, Optional, Sequence

from . import __version__
from .config_loader import load_config
from .errors import UsageError

DEFAULT_TERRAFORM_DOCS_BIN = "terraform-docs"
DEFAULT_TERRAFORM_BIN = "terraform"


@dataclass(slots=True, frozen=True)
class Settings:
    """Everything a single documentation run needs."""

    source_path: str
    include_outputs: bool = False
    markdown_only: bool = False
    s3_uri: Optional[str] = None
    css_file: Optional[str] = None
    no_stdout: bool = False
    file: Optional[str] = None
    header: Optional[str] = None
    terraform_docs_bin: str = DEFAULT_TERRAFORM_DOCS_BIN
    terraform_bin: str = DEFAULT_TERRAFORM_BIN


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports bad flags as ``UsageError`` instead of exiting 2."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    """Return the CLI argument parser."""

    parser = _ArgumentParser(
        prog="tfdoc-html",
        description=(
            "Generate Terraform Docs in HTML, optionally uploading to S3 or"
            " writing to a file."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        metavar="PATH",
        help="Directory containing your Terraform.",
    )
    parser.add_argument(
        "-o",
        "--outputs",
        action="store_true",
        default=None,
        help=(
            "Inject outputs from state file on the fly. This requires having"
            " access to the state file declared in your backend config."
        ),
    )
    parser.add_argument("-f", "--file", help="Write output to file.")
    parser.add_argument(
        "--no-stdout",
        action="store_true",
        default=None,
        help="Don't write to stdout.",
    )
    parser.add_argument(
        "-m",
        "--markdown",
        action="store_true",
        default=None,
        help="Output MarkDown instead of HTML.",
    )
    parser.add_argument(
        "-s",
        "--s3-uri",
        help="A full S3 URI that the generated output will be uploaded to.",
    )
    parser.add_argument(
        "-C",
        "--css-file",
        help="A file containing CSS that overrides the default styling.",
    )
    parser.add_argument(
        "-H", "--header", help="A string to add as a header to HTML docs."
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON file providing defaults for these options.",
    )
    parser.add_argument(
        "--terraform-docs-bin",
        help="terraform-docs executable (default: terraform-docs).",
    )
    parser.add_argument(
        "--terraform-bin",
        help="terraform executable used for --outputs (default: terraform).",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _pick(cli_value: Any, config: Dict[str, Any], key: str, default: Any) -> Any:
    if cli_value is not None:
        return cli_value
    value = config.get(key)
    return default if value is None else value


def resolve_settings(argv: Optional[Sequence[str]] = None) -> Settings:
    """Parse ``argv`` and merge it over the optional config file."""

    args = build_parser().parse_args(argv)
    if not args.path:
        raise UsageError("must provide [PATH] as first argument")

    config = load_config(args.config)

    return Settings(
        source_path=args.path,
        include_outputs=_pick(args.outputs, config, "include_outputs", False),
        markdown_only=_pick(args.markdown, config, "markdown_only", False),
        s3_uri=_pick(args.s3_uri, config, "s3_uri", None) or None,
        css_file=_pick(args.css_file, config, "css_file", None) or None,
        no_stdout=_pick(args.no_stdout, config, "no_stdout", False),
        file=_pick(args.file, config, "file", None) or None,
        header=_pick(args.header, config, "header", None) or None,
        terraform_docs_bin=_pick(
            args.terraform_docs_bin,
            config,
            "terraform_docs_bin",
            DEFAULT_TERRAFORM_DOCS_BIN,
        ),
        terraform_bin=_pick(
            args.terraform_bin, config, "terraform_bin", DEFAULT_TERRAFORM_BIN
        ),
    )
