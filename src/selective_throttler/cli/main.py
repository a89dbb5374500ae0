"""Selective throttler CLI main entry point with global options."""

import click

from ..context import GeneratorContext, resolve_paths


@click.group()
@click.option(
    "--output",
    type=click.Path(file_okay=False),
    help="Directory for generated modules (overrides $SELECTIVE_THROTTLER_OUTPUT)",
)
@click.pass_context
def cli(ctx, output):
    """Selective throttler - build-time throttler discovery and codegen."""
    ctx.ensure_object(GeneratorContext)
    ctx.obj.paths = resolve_paths(output)


# Register commands at module level so tests can import cli with commands attached
from .commands.check import check
from .commands.generate import generate

cli.add_command(generate)
cli.add_command(check)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
