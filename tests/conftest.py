"""Pytest configuration and shared fixtures."""

import textwrap

import pytest
from click.testing import CliRunner

from selective_throttler.cli import cli
from selective_throttler.context import OUTPUT_ENV_VAR


@pytest.fixture(autouse=True)
def clear_output_env(monkeypatch):
    """Never let a developer's $SELECTIVE_THROTTLER_OUTPUT leak into tests."""
    monkeypatch.delenv(OUTPUT_ENV_VAR, raising=False)


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch):
    """Provide an empty project directory as the current working directory."""
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def write_file():
    """Helper to write a dedented source file, creating parent directories.

    Usage:
        write_file(root / "auth" / "auth_module.py", '''
            ThrottlerModule.for_root([{"name": "auth-login"}])
        ''')
    """

    def _write(path, body):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def invoke(cli_runner, tmp_path):
    """Helper to invoke the CLI with generated output under ``tmp_path/out``.

    Usage:
        result = invoke(["generate"])
        result = invoke(["check", "--format", "json"])
    """
    output_dir = tmp_path / "out"

    def _invoke(args):
        return cli_runner.invoke(cli, ["--output", str(output_dir), *args])

    _invoke.output_dir = output_dir
    return _invoke
