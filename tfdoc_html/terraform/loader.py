"""Describe a Terraform module by running the terraform-docs CLI."""

from __future__ import annotations

import json
import subprocess
import tempfile
from pathlib import Path
from typing import List, Sequence

from ..errors import ModuleLoadError

OUTPUT_VALUES_NAME = "outputs.json"


def _run(command: Sequence[str], *, cwd: Path | None = None) -> str:
    """Run ``command`` and return stdout, raising ``ModuleLoadError``."""

    try:
        completed = subprocess.run(
            list(command),
            cwd=str(cwd) if cwd is not None else None,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise ModuleLoadError(f"Unable to run {command[0]}: {exc}") from exc

    if completed.returncode != 0:
        message = completed.stderr.strip() or completed.stdout.strip()
        raise ModuleLoadError(
            message or f"{command[0]} exited with {completed.returncode}"
        )
    return completed.stdout


def read_output_values(source: Path, terraform_bin: str) -> str:
    """Return ``terraform output -json`` for the module's current state."""

    payload = _run([terraform_bin, "output", "-json"], cwd=source)
    try:
        json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ModuleLoadError(
            f"terraform output returned invalid JSON: {exc}"
        ) from exc
    return payload


def generate_markdown_table(
    source_path: str | Path,
    *,
    include_outputs: bool = False,
    terraform_docs_bin: str = "terraform-docs",
    terraform_bin: str = "terraform",
) -> str:
    """Return the terraform-docs markdown table for ``source_path``.

    With ``include_outputs`` the current output values are read from the
    module's backend and injected into the table.
    """

    source = Path(source_path)
    if not source.is_dir():
        raise ModuleLoadError(f"Module directory not found: {source}")

    with tempfile.TemporaryDirectory(prefix="tfdoc-html-") as workdir:
        command: List[str] = [terraform_docs_bin, "markdown", "table"]
        if include_outputs:
            values_path = Path(workdir) / OUTPUT_VALUES_NAME
            values_path.write_text(
                read_output_values(source, terraform_bin), encoding="utf-8"
            )
            command += [
                "--output-values",
                "--output-values-from",
                str(values_path),
            ]
        command.append(str(source))
        return _run(command)
