#!/usr/bin/env python3
"""
appctl CLI.

Command-line client for the application management API.
Built with Typer for dispatch and Rich for error output. Every command
registered in appctl.cli.commands becomes a subcommand named after its
CommandInfo.

Usage:
    python cli.py --help                          # Show help

    # Applications
    python cli.py app-list                        # List your apps
    python cli.py app-create blog python          # Create an app
    python cli.py app-remove blog                 # Remove an app
    python cli.py log blog                        # Show an app's logs

    # Team access
    python cli.py app-grant blog devs             # Grant a team access
    python cli.py app-revoke blog devs            # Revoke a team's access

    # Client info
    python cli.py target                          # Show the resolved target
    python cli.py version                         # Show version

Options:
    --target, -t      Override the service target URL
    --verbose, -v     Enable verbose output
    --debug, -d       Enable debug mode (detailed logging)
    --help            Show help message
"""

import sys
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from appctl.cli.client import APIClient, UrlBuilder
from appctl.cli.command import Command, ExecutionContext
from appctl.cli.commands import COMMANDS
from appctl.core.config import get_app_config, get_target, validate_project_root
from appctl.core.exceptions import ApplicationError
from appctl.core.logging import get_logger, log_with_source, setup_logging

app = typer.Typer(
    name="appctl",
    help="appctl - Manage applications, team access and logs on the remote service.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

err_console = Console(stderr=True, highlight=False)
logger = get_logger(__name__)


def make_client(target: str | None) -> APIClient:
    """Build the transport for one command invocation."""
    return APIClient(base_url=target)


def _fail(message: str, exit_code: int = 1) -> None:
    err_console.print(message, markup=False, soft_wrap=True)
    raise typer.Exit(exit_code)


def run_command(command: Command, args: list[str], target: str | None = None) -> None:
    """
    Validate arity, run a command against a fresh client and report failures.

    Exit codes:
        1 - the command raised an ApplicationError
        2 - fewer positional arguments than the command requires
    """
    info = command.info()
    if len(args) < info.min_args:
        _fail(f"Not enough arguments to call {info.name}.\n\nUsage: {info.usage}", exit_code=2)

    context = ExecutionContext.create(args, stdout=sys.stdout, stderr=sys.stderr)

    try:
        with make_client(target) as client:
            command.run(context, client)
    except ApplicationError as e:
        log_with_source(
            logger, "cli", "debug", "Command failed",
            command=info.name, code=e.code, error=e.message,
        )
        _fail(f"Error: {e.message}")

    log_with_source(logger, "cli", "debug", "Command finished", command=info.name)


def _register(command: Command) -> None:
    """Expose a command as a Typer subcommand taking variadic positional args."""
    info = command.info()
    metavar = info.usage.partition(" ")[2] or None

    def handler(
        ctx: typer.Context,
        args: Optional[list[str]] = typer.Argument(None, metavar=metavar, show_default=False),
    ) -> None:
        obj = ctx.obj or {}
        run_command(command, args or [], obj.get("target"))

    app.command(name=info.name, help=f"{info.desc}\n\nUsage: {info.usage}")(handler)


for _command in COMMANDS.values():
    _register(_command)


@app.command("target")
def show_target(ctx: typer.Context) -> None:
    """
    Display the service target URL commands will use.
    """
    obj = ctx.obj or {}
    try:
        typer.echo(UrlBuilder(get_target(obj.get("target"))).target)
    except ApplicationError as e:
        _fail(f"Error: {e.message}")


@app.command()
def version() -> None:
    """
    Display version information.
    """
    try:
        typer.echo(get_app_config().application.version)
    except Exception:
        typer.echo("unknown")


@app.callback()
def main(
    ctx: typer.Context,
    target: Optional[str] = typer.Option(
        None,
        "--target",
        "-t",
        help="Service target URL (overrides APPCTL_TARGET and application.yaml)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    appctl - Manage applications, team access and logs on the remote service.
    """
    validate_project_root()

    if debug:
        setup_logging(level="DEBUG", format_type="console")
        err_console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()

    structlog.contextvars.bind_contextvars(source="cli")
    ctx.obj = {"target": target}


if __name__ == "__main__":
    app()
