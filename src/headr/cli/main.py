"""headr CLI entry point."""

import sys

import click

from .. import __version__
from ..core.printer import print_heads
from ..core.streaming import flush_output
from ..models.config import DEFAULT_LINES, build_config
from ..models.errors import ConfigError, OutputError


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__, prog_name="headr")
@click.argument("files", nargs=-1, metavar="[FILES]...")
@click.option(
    "-n",
    "--lines",
    "lines",
    metavar="LINES",
    default=None,
    help=f"Number of lines to print [default: {DEFAULT_LINES}]",
)
@click.option(
    "-c",
    "--bytes",
    "bytes_",
    metavar="BYTES",
    default=None,
    help="Number of bytes to print (overrides --lines)",
)
def cli(files, lines, bytes_):
    """Print the first lines (or bytes) of each FILE.

    With no FILE, or when FILE is -, read standard input. When more than
    one FILE is given, each is preceded by a "==> FILE <==" header.

    Examples:
        headr data.txt              # First 10 lines
        headr -n 3 a.txt b.txt      # First 3 lines of each, with headers
        headr -c 5 data.txt         # First 5 bytes
        cat data.txt | headr -n 2   # From standard input
    """
    try:
        config = build_config(files, lines=lines, bytes_=bytes_)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    out = sys.stdout.buffer
    try:
        print_heads(config, out, sys.stderr)
        flush_output(out)
    except OutputError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
