"""Generator context for passing resolved paths between commands."""

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional

import click

OUTPUT_ENV_VAR = "SELECTIVE_THROTTLER_OUTPUT"


@dataclass(frozen=True)
class GeneratorPaths:
    """Resolved scan root and artifact output directory."""

    root_dir: Path
    output_dir: Path


def default_output_dir() -> Path:
    """Locate ``_generated`` inside the installed package.

    Uses importlib.resources to work correctly both in development
    and after installation.
    """
    pkg = resources.files("selective_throttler")
    return Path(str(pkg)) / "_generated"


def resolve_paths(output_option: Optional[str] = None) -> GeneratorPaths:
    """Resolve the scan root and output directory.

    Output resolution order:
    1. --output CLI option
    2. $SELECTIVE_THROTTLER_OUTPUT environment variable
    3. ``_generated`` in the installed package

    The scan root is always the current working directory.
    """
    if output_option:
        output_dir = Path(output_option)
    elif os.environ.get(OUTPUT_ENV_VAR):
        output_dir = Path(os.environ[OUTPUT_ENV_VAR])
    else:
        output_dir = default_output_dir()

    return GeneratorPaths(root_dir=Path.cwd(), output_dir=output_dir)


class GeneratorContext:
    """Object stored on the click context by the CLI group."""

    def __init__(self):
        self.paths: Optional[GeneratorPaths] = None


pass_context = click.make_pass_decorator(GeneratorContext, ensure=True)
