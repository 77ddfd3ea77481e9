"""Root CLI group for wgraph with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click

from wgraph import __version__
from wgraph.commands import register_commands
from wgraph.commands._context import AppContext
from wgraph.config.settings import WGraphSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wgraph")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logs.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-g",
    "--graph",
    "graph_file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Graph snapshot file (default: [graph] path).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    graph_file: Path | None,
) -> None:
    """wgraph — weighted undirected graph toolkit."""
    settings = WGraphSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        graph_file=graph_file,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
