"""Root CLI group for dagctl with global flags and command registration."""

from __future__ import annotations

import click

from dagconfig import __version__
from dagconfig.commands import register_commands
from dagconfig.commands._context import AppContext
from dagconfig.config.settings import DagSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dagctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-i",
    "--ignore-case",
    is_flag=True,
    help="Fall back to case-insensitive key matching.",
)
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    ignore_case: bool,
    config_path: str | None,
) -> None:
    """dagctl — query a deployment's service graph configuration."""
    ctx.ensure_object(dict)
    settings = DagSettings.from_cli(
        config_path=config_path,
        tolerate_miscased_keys=True if ignore_case else None,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
