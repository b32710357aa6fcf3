import click

from .utils.logging import configure_logging

DEBUG_KEY = "DEBUG"


def debug_option() -> click.Option:
    return click.Option(
        ["--debug/--no-debug"],
        is_eager=True,
        expose_value=False,
        callback=_set_debug,
        help="Log git commands and executable probes.",
    )


def add_debug_option(command: click.Command) -> click.Command:
    """Give ``command`` a leading --debug/--no-debug option, once."""
    if not any(param.name == "debug" for param in command.params):
        command.params.insert(0, debug_option())
    return command


def _set_debug(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    root = ctx.find_root()
    root.ensure_object(dict)

    # `fwfetch --debug checkout ...` stays on even though checkout passes False
    if value or ctx is root:
        root.obj[DEBUG_KEY] = value
    debug = root.obj.setdefault(DEBUG_KEY, False)

    configure_logging(debug)
    return debug
