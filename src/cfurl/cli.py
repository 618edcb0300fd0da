"""Root CLI group for cfurl with global flags and command registration."""

from __future__ import annotations

import click

from cfurl import __version__
from cfurl.commands import register_commands
from cfurl.commands._base import CfGroup
from cfurl.commands._context import AppContext
from cfurl.config.settings import CfurlSettings


@click.group(
    cls=CfGroup,
    invoke_without_command=True,
    examples="""\
  cfurl dns example.com
  cfurl security example.com -s waf
  cfurl workers my-worker
  cfurl --no-open r2 my-bucket
  cfurl commands""",
)
@click.version_option(version=__version__, prog_name="cfurl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (bare URL).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-open", is_flag=True, help="Print the URL without opening a browser.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_open: bool,
    config_path: str | None,
) -> None:
    """cfurl: quick access to Cloudflare dashboard pages."""
    settings = CfurlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_open=no_open,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
