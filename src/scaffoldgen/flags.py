"""Command-line flag parsing for scaffoldgen.

The flags are declared on a Click command that is only ever used to build a
parsing context; its callback never runs. setup_parse_flags() turns the
parsed values into a Config and writes all usage text to a caller-supplied
sink so it can be captured in tests.
"""

import click

from scaffoldgen.config import Config


PROG_NAME = "scaffoldgen"


class MissingParametersError(click.UsageError):
    """Raised when scaffoldgen is run without any arguments."""


class HelpRequested(click.UsageError):
    """Raised when -h/--help is passed."""


def _request_help(ctx, param, value):
    if value:
        raise HelpRequested("flag: help requested", ctx=ctx)


@click.command(PROG_NAME, add_help_option=False,
               context_settings={"allow_extra_args": True})
@click.option("-n", "--name", default="", help="Project name")
@click.option("-d", "--directory", default="", help="Project location on disk")
@click.option("-r", "--repository", default="", help="Project remote repository URL")
@click.option("-s", "--static-assets", "has_static_assets", is_flag=True, default=False,
              help="Project will have static assets or not")
@click.option("-h", "-help", "--help", is_flag=True, is_eager=True, expose_value=False,
              callback=_request_help, help="Show usage.")
def flags_command(**kwargs):
    """Flag declarations for scaffoldgen."""


_VALUE_FLAGS = {opt for param in flags_command.params if not param.is_flag
                for opt in param.opts if len(opt) == 2}


def _split_inline_values(args):
    """Split -n=value into -n value; Click would otherwise keep the "="."""
    split = []
    for arg in args:
        flag, sep, value = arg.partition("=")
        if sep and flag in _VALUE_FLAGS:
            split.extend([flag, value])
        else:
            split.append(arg)
    return split


def _new_context():
    return click.Context(flags_command, info_name=PROG_NAME)


def write_usage(out, ctx=None) -> None:
    """Write the usage header and the option list to out."""
    ctx = ctx or _new_context()
    formatter = ctx.make_formatter()
    formatter.write(f"Usage of {PROG_NAME}:\n")
    flags_command.format_options(ctx, formatter)
    out.write(formatter.getvalue())


def setup_parse_flags(out, args) -> Config:
    """Parse args into a Config.

    Args:
        out: Text sink that receives usage text and parse diagnostics.
        args: Command-line arguments, without the program name.

    Returns:
        The parsed Config.

    Raises:
        MissingParametersError: If args is empty.
        HelpRequested: If -h, -help or --help was given.
        click.UsageError: If args contains an unknown or malformed flag.
    """
    if not args:
        write_usage(out)
        raise MissingParametersError(
            "a name, directory, and repository url must be provided"
        )

    try:
        ctx = flags_command.make_context(PROG_NAME, _split_inline_values(args))
    except HelpRequested as e:
        write_usage(out, e.ctx)
        raise
    except click.UsageError as e:
        out.write(f"{e.format_message()}\n")
        write_usage(out, e.ctx)
        raise

    return Config(**ctx.params)
