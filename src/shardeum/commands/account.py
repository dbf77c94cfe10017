"""
Account commands - local key and balances.

- keygen:  create a wallet key in ~/.shardeum/.env
- whoami:  show the configured address
- balance: SHM (or ERC-20) balance for an address
"""

from __future__ import annotations

import sys
from decimal import Decimal
from typing import Optional

import click

from ..errors import ShardeumError, WalletNotFoundError
from ..rpc.contract import ERC20_ABI
from ..units import format_shm
from ..wallet import keys
from .common import fail, get_api, label


@click.command()
@click.option("--force", is_flag=True, help="Replace an existing key")
def keygen(force: bool) -> None:
    """Create a new wallet key and store it in ~/.shardeum/.env."""
    stored_key = keys.read_env_file(keys.SHARDEUM_ENV).get("PRIVATE_KEY")

    if stored_key and not force:
        click.secho(f"A wallet already exists: {keys.get_address(stored_key)}", fg="yellow")
        click.echo("Use --force to replace it.")
        sys.exit(1)

    private_key, address = keys.generate_account()
    env_path = keys.save_private_key(private_key, keys.SHARDEUM_ENV)

    click.secho("Wallet created.", fg="green")
    click.echo(f"Address: {address}")
    click.echo(f"Key file: {env_path}")


@click.command()
def whoami() -> None:
    """Show current wallet address."""
    try:
        address = keys.get_address(keys.load_private_key(keys.SHARDEUM_ENV))
    except WalletNotFoundError:
        click.echo("No wallet found.")
        click.echo("Run 'shardeum keygen' to create one.")
        sys.exit(2)
    click.echo(f"Address: {address}")


def _resolve_address(address: Optional[str]) -> str:
    if address:
        return address
    try:
        return keys.get_address(keys.load_private_key(keys.SHARDEUM_ENV))
    except WalletNotFoundError as exc:
        fail(exc)


@click.command()
@click.argument("address", required=False)
@click.option("--token", "token_address", default=None, help="ERC-20 token contract address")
@click.option("--block", default="latest", show_default=True, help="Block number or tag")
@click.pass_context
def balance(ctx: click.Context, address: Optional[str], token_address: Optional[str], block: str) -> None:
    """Show the balance of ADDRESS (default: your wallet)."""
    api = get_api(ctx)
    address = _resolve_address(address)

    try:
        if token_address:
            symbol = api.read_contract(token_address, ERC20_ABI, "symbol", block=block) or "???"
            decimals = api.read_contract(token_address, ERC20_ABI, "decimals", block=block)
            decimals = 18 if decimals is None else int(decimals)
            raw = api.read_contract(token_address, ERC20_ABI, "balanceOf", [address], block=block) or 0
            human = format(Decimal(raw).scaleb(-decimals).normalize(), "f")
            click.echo(label("Address:") + address)
            click.echo(label("Token:") + token_address)
            click.echo(label("Balance:") + click.style(f"{human} {symbol}", fg="green", bold=True))
            click.echo(label("Raw:") + str(raw))
            return

        wei = api.get_balance_wei(address, block)
    except (ShardeumError, ValueError) as exc:
        fail(exc)

    click.echo(label("Address:") + address)
    click.echo(label("Balance:") + click.style(f"{format_shm(wei)} SHM", fg="green", bold=True))
    click.echo(label("Wei:") + str(wei))
