"""Command-line interface for Eve."""

import logging
import sys
from pathlib import Path

import click

from .app import Eve
from .config import load_config
from .logging_setup import setup_logging
from .ui import UI, get_console, render_reply

logger = logging.getLogger(__name__)


def run_loop(eve: Eve, ui: UI):
    """Read and handle lines until ``bye`` or end of input."""
    ui.show_welcome()
    while True:
        line = ui.read_command()
        if line is None:
            ui.show_eof()
            ui.show_goodbye()
            return

        reply = eve.handle(line)
        ui.show(reply)
        if reply.exit:
            return


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False), help="Task file to use instead of the configured one")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx, config_path, data_file, verbose):
    """Eve - a personal task tracker you talk to.

    Run without a subcommand to start an interactive session.
    """
    config = load_config(Path(config_path) if config_path else None)
    if data_file:
        config.data_file = str(Path(data_file).expanduser())

    setup_logging("DEBUG" if verbose else config.log_level, config.log_file)
    logger.debug(f"Using data file {config.data_file}")

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["eve"] = Eve.from_config(config)

    if ctx.invoked_subcommand is None:
        ui = UI(get_console(use_color=config.use_color))
        run_loop(ctx.obj["eve"], ui)


@cli.command()
@click.argument("command", nargs=-1, required=True)
@click.pass_context
def run(ctx, command):
    """Handle a single COMMAND and exit.

    Examples:
      eve run todo read book
      eve run deadline return book /by 2019-12-02 1800
      eve run list
    """
    eve = ctx.obj["eve"]
    reply = eve.handle(" ".join(command))
    text = render_reply(reply)
    if text:
        click.echo(text)
    if reply.is_error:
        sys.exit(1)


def main():
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
