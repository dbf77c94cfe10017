"""
Network commands - Shardeum-specific JSON-RPC extensions.
"""

from __future__ import annotations

from typing import Optional

import click

from ..errors import ShardeumError
from .common import echo_json, fail, get_api


@click.group()
def network() -> None:
    """Query Shardeum network state (validators, cycles, parameters)."""


@network.command()
@click.option("--page", type=int, default=None, help="Page number")
@click.option("--limit", type=int, default=None, help="Nodes per page")
@click.pass_context
def nodes(ctx: click.Context, page: Optional[int], limit: Optional[int]) -> None:
    """List active validator nodes (shardeum_getNodeList)."""
    try:
        echo_json(get_api(ctx).get_node_list(page=page, limit=limit))
    except ShardeumError as exc:
        fail(exc)


@network.command()
@click.pass_context
def account(ctx: click.Context) -> None:
    """Show the network account (shardeum_getNetworkAccount)."""
    try:
        echo_json(get_api(ctx).get_network_account())
    except ShardeumError as exc:
        fail(exc)


@network.command()
@click.argument("cycle_number", type=int, required=False)
@click.pass_context
def cycle(ctx: click.Context, cycle_number: Optional[int]) -> None:
    """Show cycle information (default: latest cycle)."""
    try:
        echo_json(get_api(ctx).get_cycle_info(cycle_number))
    except ShardeumError as exc:
        fail(exc)
