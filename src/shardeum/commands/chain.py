"""
Chain commands - read-only queries against the node.

- info:  client version, chain id, latest block and gas price
- block: a block by number, tag or hash
- tx:    a transaction and its receipt
- rpc:   call any JSON-RPC method
"""

from __future__ import annotations

import json
import sys

import click

from ..errors import ShardeumError
from ..units import format_shm
from ..utils import hex_to_int
from .common import echo_json, fail, get_api, label


def _describe_chain_id(chain_id: object) -> str:
    if not isinstance(chain_id, str) or not chain_id.startswith("0x"):
        return str(chain_id)
    try:
        return f"{hex_to_int(chain_id)} ({chain_id})"
    except (TypeError, ValueError):
        return chain_id


@click.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show node and chain information."""
    api = get_api(ctx)

    try:
        client = api.client_version()
        chain_id = api.chain_id()
        network = api.net_version()
        head = api.block_number()
        gas_price = api.gas_price()
    except ShardeumError as exc:
        fail(exc)

    click.echo(label("RPC:") + api.rpc_url)
    click.echo(label("Client:") + str(client))
    click.echo(label("Chain ID:") + _describe_chain_id(chain_id))
    click.echo(label("Network:") + str(network))
    click.echo(label("Block:") + str(head))
    click.echo(label("Gas price:") + f"{gas_price} wei ({format_shm(gas_price)} SHM)")


@click.command()
@click.argument("block_id", default="latest")
@click.option("--full", is_flag=True, help="Include full transaction objects")
@click.pass_context
def block(ctx: click.Context, block_id: str, full: bool) -> None:
    """Show a block by number, tag or hash (default: latest)."""
    api = get_api(ctx)

    try:
        # 32-byte hashes are 66 chars; shorter hex strings are block numbers
        if block_id.startswith("0x") and len(block_id) == 66:
            result = api.get_block_by_hash(block_id, full)
        else:
            result = api.get_block_by_number(block_id, full)
    except (ShardeumError, ValueError) as exc:
        fail(exc)

    if result is None:
        click.secho(f"Block not found: {block_id}", fg="yellow")
        sys.exit(1)
    echo_json(result)


@click.command()
@click.argument("tx_hash")
@click.pass_context
def tx(ctx: click.Context, tx_hash: str) -> None:
    """Show a transaction and its receipt."""
    api = get_api(ctx)

    try:
        transaction = api.get_transaction_by_hash(tx_hash)
        receipt = api.get_transaction_receipt(tx_hash) if transaction else None
    except ShardeumError as exc:
        fail(exc)

    if transaction is None:
        click.secho(f"Transaction not found: {tx_hash}", fg="yellow")
        sys.exit(1)
    echo_json({"transaction": transaction, "receipt": receipt})


@click.command()
@click.argument("method")
@click.argument("params_json", default="[]")
@click.pass_context
def rpc(ctx: click.Context, method: str, params_json: str) -> None:
    """Call any JSON-RPC METHOD with PARAMS_JSON (a JSON array)."""
    try:
        params = json.loads(params_json)
        if not isinstance(params, list):
            raise ValueError("Params must be a JSON array")
    except (json.JSONDecodeError, ValueError) as exc:
        click.secho(f"ERROR: Invalid params: {exc}", fg="red")
        sys.exit(1)

    try:
        result = get_api(ctx).request(method, params)
    except ShardeumError as exc:
        fail(exc)

    echo_json(result)
