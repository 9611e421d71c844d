"""Shared fixtures for the tfdoc-html test-suite."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Dict, List

import pytest

MARKDOWN_TABLE = """## Requirements

| Name | Version |
|------|---------|
| <a name="requirement_terraform"></a> [terraform](#requirement\\_terraform) | >= 1.3 |

## Providers

| Name | Version |
|------|---------|
| <a name="provider_aws"></a> [aws](#provider\\_aws) | >= 5.0 |

## Modules

No modules.

## Resources

| Name | Type |
|------|------|
| [aws_vpc.this](https://registry.terraform.io/providers/hashicorp/aws/latest/docs/resources/vpc) | resource |

## Inputs

| Name | Description | Type | Default | Required |
|------|-------------|------|---------|:--------:|
| <a name="input_cidr_block"></a> [cidr\\_block](#input\\_cidr\\_block) | CIDR range for the VPC. | `string` | n/a | yes |
| <a name="input_name"></a> [name](#input\\_name) | Nom du réseau. | `string` | `"café"` | no |

## Outputs

| Name | Description |
|------|-------------|
| <a name="output_vpc_id"></a> [vpc\\_id](#output\\_vpc\\_id) | ID of the VPC. |
"""


@pytest.fixture
def markdown_table() -> str:
    return MARKDOWN_TABLE


@pytest.fixture
def module_dir(tmp_path):
    source = tmp_path / "network"
    source.mkdir()
    (source / "main.tf").write_text('resource "aws_vpc" "this" {}\n')
    return source


class FakeRunner:
    """Stands in for ``subprocess.run`` and records every command."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.cwds: List[str | None] = []
        self.files: Dict[str, str] = {}
        self.responses: Dict[str, subprocess.CompletedProcess] = {}

    def respond(
        self,
        program: str,
        stdout: str = "",
        *,
        returncode: int = 0,
        stderr: str = "",
    ) -> None:
        self.responses[program] = subprocess.CompletedProcess(
            args=[program], returncode=returncode, stdout=stdout, stderr=stderr
        )

    def __call__(self, command, **kwargs):
        self.calls.append(list(command))
        self.cwds.append(kwargs.get("cwd"))
        for arg in command[1:]:
            if arg.endswith(".json") and os.path.isfile(arg):
                self.files[arg] = Path(arg).read_text(encoding="utf-8")
        program = command[0]
        if program not in self.responses:
            raise FileNotFoundError(2, "No such file or directory", program)
        return self.responses[program]


@pytest.fixture
def fake_run(monkeypatch, markdown_table) -> FakeRunner:
    runner = FakeRunner()
    runner.respond("terraform-docs", markdown_table)
    monkeypatch.setattr(
        "tfdoc_html.terraform.loader.subprocess.run", runner
    )
    return runner
