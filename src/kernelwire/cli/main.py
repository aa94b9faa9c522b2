# topmark:header:start
#
#   project      : KernelWire
#   file         : main.py
#   file_relpath : src/kernelwire/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KernelWire Click CLI.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: a `ClickConsole` for program output;
- ``config``: the effective `EncoderConfig` (defaults, or ``--config FILE``);
- ``log_level``: the level taken from ``KERNELWIRE_LOG_LEVEL``.
"""

from __future__ import annotations

from pathlib import Path

import click

from kernelwire.cli.commands.config import config_command
from kernelwire.cli.commands.kinds import kinds_command
from kernelwire.cli.commands.version import version_command
from kernelwire.cli.console import ClickConsole
from kernelwire.cli.errors import KernelWireConfigError
from kernelwire.config.loaders import load_encoder_config
from kernelwire.config.logging import get_logger, resolve_env_log_level, setup_logging
from kernelwire.core.errors import ConfigError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    config_path: Path | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, console, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        config_path (Path | None): Optional config file from ``--config``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Raises:
        KernelWireConfigError: If the config file cannot be loaded.
    """
    ctx.ensure_object(dict)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    try:
        ctx.obj["config"] = load_encoder_config(config_path)
    except ConfigError as exc:
        raise KernelWireConfigError(str(exc)) from exc
    ctx.obj["config_path"] = config_path


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="KernelWire: Jupyter kernel protocol wire encoder.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read encoder options from a pyproject.toml ([tool.kernelwire]) or kernelwire.toml.",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable ANSI colors in program output.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, no_color: bool) -> None:
    """Entry point for the KernelWire CLI."""
    init_common_state(ctx, config_path=config_path, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(kinds_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()
