"""Check command - report throttler usage without generating code."""

import sys

import click

from ...context import pass_context, resolve_paths
from ...discovery import discover
from ...discovery.extractors import BACKENDS, DEFAULT_BACKEND
from ...discovery.report import (
    format_json,
    format_read_errors,
    format_summary,
    format_text,
)


@click.command()
@click.option("--format", "output_format", type=click.Choice(["text", "json", "summary"]), default="text",
              help="Output format (default: text)")
@click.option("--backend", type=click.Choice(sorted(BACKENDS)), default=DEFAULT_BACKEND,
              help="Extraction backend (default: heuristic)")
@click.option("--quiet", "-q", is_flag=True,
              help="Text format: only show warnings and cross-module issues")
@pass_context
def check(ctx, output_format, backend, quiet):
    """Check throttler usage in the current directory.

    Prints the same analysis as generate but writes nothing. Exits with
    code 1 when cross-module issues are found.

    Examples:
        selective-throttler check                  # Full text report
        selective-throttler check --format json    # JSON output for CI
        selective-throttler check --quiet          # Warnings and issues only
        selective-throttler check --backend balanced
    """
    paths = ctx.paths or resolve_paths()
    scan, report = discover(paths.root_dir, backend=backend)

    if scan.read_errors:
        click.echo(format_read_errors(scan.read_errors), err=True)

    # Format output
    if output_format == "json":
        output = format_json(report)
    elif output_format == "summary":
        output = format_summary(report)
    else:  # text
        output = format_text(report, verbose=not quiet)

    click.echo(output)

    # Exit with error code if any cross-module issues found
    if report.has_issues:
        sys.exit(1)
    else:
        sys.exit(0)
