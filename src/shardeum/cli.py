"""
Shardeum CLI

Command-line client for Shardeum's JSON-RPC API.

Commands:
  keygen    - Create a wallet key
  whoami    - Show current wallet address
  balance   - Show SHM or ERC-20 balance
  send      - Send SHM
  info      - Show node and chain information
  block     - Show a block
  tx        - Show a transaction and its receipt
  rpc       - Call any JSON-RPC method
  network   - Validators, cycles and network parameters
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from . import __version__
from .rpc.client import NETWORKS, resolve_network
from .wallet.keys import load_env


# ============ Banner ============


def _print_banner() -> None:
    click.echo()
    click.echo(
        click.style("  ◆ ", fg="cyan")
        + click.style("S H A R D E U M", fg="bright_white", bold=True)
        + click.style(f"  v{__version__}", dim=True)
    )
    click.secho("  ─── JSON-RPC client ───", fg="cyan")
    click.echo()


# ============ Main CLI Group ============


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="shardeum")
@click.option(
    "--network",
    "network_name",
    type=click.Choice(sorted(NETWORKS), case_sensitive=False),
    envvar="SHARDEUM_NETWORK",
    default=None,
    help="Network preset (sets RPC URL and chain id)",
)
@click.option(
    "--rpc-url",
    envvar="SHARDEUM_RPC_URL",
    default=None,
    help="Node RPC URL (overrides --network)",
)
@click.option("--verbose", "-v", is_flag=True, help="Log RPC traffic to stderr")
@click.pass_context
def cli(ctx: click.Context, network_name: Optional[str], rpc_url: Optional[str], verbose: bool) -> None:
    """Shardeum JSON-RPC client."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    preset = resolve_network(network_name) if network_name else None
    ctx.obj = {
        "rpc_url": rpc_url or (preset.rpc_url if preset else None),
        "chain_id": preset.chain_id if preset else None,
    }

    if ctx.invoked_subcommand is None:
        _print_banner()
        click.echo(ctx.get_help())


# ============ Commands ============

from .commands.account import balance, keygen, whoami
from .commands.chain import block, info, rpc, tx
from .commands.network import network
from .commands.transfer import send

cli.add_command(keygen)
cli.add_command(whoami)
cli.add_command(balance)
cli.add_command(send)
cli.add_command(info)
cli.add_command(block)
cli.add_command(tx)
cli.add_command(rpc)
cli.add_command(network)


# ============ Entry Points ============


def main() -> None:
    """Shardeum CLI entry point."""
    # ~/.shardeum/.env supplies defaults for the envvar-backed options
    load_env()
    cli()


if __name__ == "__main__":
    main()
