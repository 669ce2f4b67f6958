"""Root CLI group for gigledger with global flags and command registration."""

from __future__ import annotations

import click

from gigledger import __version__
from gigledger.commands import register_commands
from gigledger.commands._context import AppContext
from gigledger.config.settings import LedgerSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gigledger")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with timing info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--in-memory", is_flag=True, help="Use a throwaway ledger (nothing is saved).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    in_memory: bool,
    config_path: str | None,
) -> None:
    """gigledger — performer booking ledger."""
    settings = LedgerSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        in_memory=in_memory,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
