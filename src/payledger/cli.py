"""Root CLI group for payledger with global flags and command registration."""

from __future__ import annotations

import click

from payledger import __version__
from payledger.commands import register_commands
from payledger.commands._context import AppContext
from payledger.config.settings import PayledgerSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="payledger")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--roster", "roster_file", default=None, help="Override the roster file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    roster_file: str | None,
) -> None:
    """payledger — payroll ledger for fixed and hourly employees."""
    ctx.ensure_object(dict)
    settings = PayledgerSettings.from_cli(
        config_path=config_path,
        roster_file=roster_file,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
