"""Click entry point for the scaffoldgen command."""

import sys

import click

from scaffoldgen.flags import PROG_NAME, MissingParametersError, setup_parse_flags
from scaffoldgen.generate import generate_scaffold
from scaffoldgen.validate import validate_config


def run_cli(argv=None) -> int:
    """Parse, validate and generate; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        conf = setup_parse_flags(sys.stdout, argv)
    except MissingParametersError as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    except click.UsageError:
        # Usage and the diagnostic were already written by the parser.
        return 1

    errors = validate_config(conf)
    if errors:
        for error in errors:
            click.echo(str(error), err=True)
        return 1

    generate_scaffold(sys.stdout, conf)
    return 0


@click.command(PROG_NAME,
               context_settings={"ignore_unknown_options": True, "help_option_names": []})
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def main(args):
    """Generate a new project scaffold."""
    sys.exit(run_cli(list(args)))
