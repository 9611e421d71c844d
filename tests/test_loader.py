"""Tests for running terraform-docs against a module directory."""

import json
from pathlib import Path

import pytest

from tfdoc_html.errors import ModuleLoadError
from tfdoc_html.terraform import generate_markdown_table


def test_markdown_table_passed_through(fake_run, module_dir, markdown_table):
    document = generate_markdown_table(module_dir)

    assert document == markdown_table
    assert fake_run.calls == [
        ["terraform-docs", "markdown", "table", str(module_dir)]
    ]


def test_non_ascii_and_pipes_untouched(fake_run, module_dir):
    table = (
        '| <a name="input_sep"></a> [sep](#input\\_sep) | n/a '
        '| `string` | `"a\\|b"` | no |\n'
        '| <a name="input_name"></a> [name](#input\\_name) | n/a '
        '| `string` | `"café"` | no |\n'
    )
    fake_run.respond("terraform-docs", table)

    assert generate_markdown_table(module_dir) == table


def test_include_outputs_injects_terraform_output(fake_run, module_dir):
    outputs = json.dumps({"vpc_id": {"sensitive": False, "value": "vpc-123"}})
    fake_run.respond("terraform", outputs)

    generate_markdown_table(module_dir, include_outputs=True)

    assert fake_run.calls[0] == ["terraform", "output", "-json"]
    assert fake_run.cwds[0] == str(module_dir)
    assert fake_run.calls[1][:5] == [
        "terraform-docs",
        "markdown",
        "table",
        "--output-values",
        "--output-values-from",
    ]
    assert fake_run.calls[1][5].endswith("outputs.json")
    assert fake_run.calls[1][-1] == str(module_dir)
    assert fake_run.files[fake_run.calls[1][5]] == outputs
    assert not Path(fake_run.calls[1][5]).exists()


def test_custom_executables(fake_run, module_dir):
    fake_run.respond("/opt/tf-docs", "## Inputs\n")
    fake_run.respond("/opt/terraform", "{}")

    generate_markdown_table(
        module_dir,
        include_outputs=True,
        terraform_docs_bin="/opt/tf-docs",
        terraform_bin="/opt/terraform",
    )

    assert [call[0] for call in fake_run.calls] == [
        "/opt/terraform",
        "/opt/tf-docs",
    ]


def test_missing_directory_raises(fake_run, tmp_path):
    with pytest.raises(ModuleLoadError, match="not found"):
        generate_markdown_table(tmp_path / "missing")
    assert fake_run.calls == []


def test_tool_failure_surfaces_raw_message(fake_run, module_dir):
    fake_run.respond(
        "terraform-docs", returncode=1, stderr="Error: unable to parse main.tf\n"
    )
    with pytest.raises(ModuleLoadError, match="unable to parse main.tf"):
        generate_markdown_table(module_dir)


def test_terraform_output_failure_skips_terraform_docs(fake_run, module_dir):
    fake_run.respond("terraform", returncode=1, stderr="Backend not initialized")

    with pytest.raises(ModuleLoadError, match="Backend not initialized"):
        generate_markdown_table(module_dir, include_outputs=True)
    assert [call[0] for call in fake_run.calls] == ["terraform"]


def test_invalid_output_values_raise(fake_run, module_dir):
    fake_run.respond("terraform", "not json")

    with pytest.raises(ModuleLoadError, match="invalid JSON"):
        generate_markdown_table(module_dir, include_outputs=True)


def test_missing_executable_raises(fake_run, module_dir):
    with pytest.raises(ModuleLoadError, match="Unable to run"):
        generate_markdown_table(module_dir, terraform_docs_bin="not-installed")
