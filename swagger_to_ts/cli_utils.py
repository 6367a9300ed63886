"""
CLI utilities for command line reconstruction.

Used to stamp the generation comment at the top of each generated file.
"""

from pathlib import Path

import click

DEFAULT_COMMAND = "swagger_to_ts"


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, e.g. when used as a library
        return DEFAULT_COMMAND

    if not cli_args:
        return DEFAULT_COMMAND

    arguments = []
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value == "":
            continue

        # Paths are shown by file name only
        if isinstance(param.type, click.Path):
            formatted_value = Path(str(value)).name
        else:
            formatted_value = str(value)

        if isinstance(param, click.Argument):
            arguments.append(formatted_value)
        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            if param.is_flag:
                # `--force/--no-force` style options record False through their secondary flag
                if value:
                    options.append(param.opts[0])
                elif param.secondary_opts:
                    options.append(param.secondary_opts[0])
            else:
                options.extend([param.opts[0], formatted_value])

    return " ".join([DEFAULT_COMMAND, *arguments, *options])
