"""Generate command - scan the tree and write the selective decorators."""

import os
import sys

import click

from ...codegen import emit
from ...context import pass_context, resolve_paths
from ...discovery import discover
from ...discovery.report import (
    format_file_analysis,
    format_generated,
    format_issues,
    format_multi_module,
    format_overview,
    format_read_errors,
    format_warnings,
)


def _echo_section(text, err=False):
    if text:
        click.echo(text, err=err)


@click.command()
@click.option(
    "--silent",
    is_flag=True,
    help="Hide informational output (warnings and issues are always shown)",
)
@pass_context
def generate(ctx, silent):
    """Scan the current directory and generate throttler decorators.

    Discovers throttler names from decorator call sites and
    ThrottlerModule registrations, reports missing, unused and
    cross-module names, then writes throttler_names.py, decorators.py and
    their .pyi stubs to the output directory.

    Examples:
        selective-throttler generate
        selective-throttler generate --silent
        selective-throttler --output build/throttlers generate
    """
    paths = ctx.paths or resolve_paths()

    if not silent:
        click.echo("🔍 Scanning for throttler decorators and module definitions...")

    scan, report = discover(paths.root_dir)

    if not silent:
        _echo_section(format_read_errors(scan.read_errors), err=True)
        _echo_section(format_file_analysis(report.records))
        _echo_section(format_overview(report))

    # Always shown, even in silent mode
    _echo_section(format_warnings(report), err=True)

    if not silent:
        _echo_section(format_multi_module(report))

    _echo_section(format_issues(report), err=True)

    try:
        written = emit(report.total_names, paths.output_dir)
    except OSError as e:
        click.echo(f"Error: Could not write generated files: {e}", err=True)
        sys.exit(1)

    if not silent:
        relative = [os.path.relpath(path, paths.root_dir) for path in written]
        click.echo(format_generated(relative, len(report.total_names)))
