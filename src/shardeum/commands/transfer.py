"""
Transfer - send SHM from the configured wallet.

Flow:
1. Load the wallet key (~/.shardeum/.env or PRIVATE_KEY)
2. Connect the wallet to get a signer
3. Quote the gas price, build and sign the transfer (after confirmation)
4. Submit it and optionally wait for the receipt
"""

from __future__ import annotations

import sys
from typing import Any, Optional

import click

from ..errors import ShardeumError, UserRejectedError
from ..units import format_shm
from ..utils import hex_to_int
from ..wallet.signer import Wallet, approve_all
from .common import fail, get_api, label


def _confirm_request(request: dict[str, Any]) -> bool:
    """Interactive approval for wallet requests.

    Account access is implied by running the command with your own key;
    transactions are shown and confirmed one by one.
    """
    if request["method"] != "eth_sendTransaction":
        return True

    tx = request["params"][0]
    gas = hex_to_int(tx["gas"])
    gas_price = hex_to_int(tx["gasPrice"])

    click.echo()
    click.echo(label("From:") + tx["from"])
    click.echo(label("To:") + tx["to"])
    click.echo(label("Amount:") + click.style(f"{format_shm(tx['value'])} SHM", bold=True))
    click.echo(label("Gas limit:") + str(gas))
    click.echo(label("Gas price:") + f"{gas_price} wei")
    click.echo(label("Max fee:") + f"{format_shm(gas * gas_price)} SHM")
    click.echo(label("Nonce:") + str(tx["nonce"]))
    click.echo(label("Chain ID:") + str(tx["chainId"]))
    click.echo()
    return click.confirm("Send this transaction?", default=False)


@click.command()
@click.option("--to", "recipient", required=True, help="Recipient address (0x...)")
@click.option("--amount", required=True, help="Amount in SHM (e.g. 0.001)")
@click.option("--gas-limit", default=None, type=int, help="Gas limit (default: 21000)")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.option("--wait", is_flag=True, help="Wait for the transaction receipt")
@click.pass_context
def send(
    ctx: click.Context,
    recipient: str,
    amount: str,
    gas_limit: Optional[int],
    yes: bool,
    wait: bool,
) -> None:
    """Send SHM from your wallet to another address."""
    try:
        wallet = Wallet.from_env(approve=approve_all if yes else _confirm_request)
    except ShardeumError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        click.echo("Run 'shardeum keygen' first.")
        sys.exit(exc.exit_code)

    api = get_api(ctx, wallet=wallet)

    try:
        signer = api.connect_wallet()
        click.echo("=== Send SHM ===")
        click.echo(label("Signer:") + signer.address)
        tx_hash = api.send_shm(recipient, amount, gas_limit=gas_limit)
    except UserRejectedError:
        click.secho("Transfer cancelled.", fg="yellow")
        sys.exit(UserRejectedError.exit_code)
    except (ShardeumError, ValueError) as exc:
        fail(exc)

    click.secho("Transaction submitted.", fg="green")
    click.echo(label("TX:") + tx_hash)

    if not wait:
        return

    click.echo("Waiting for receipt...")
    try:
        receipt = api.wait_for_receipt(tx_hash)
    except (ShardeumError, TimeoutError) as exc:
        fail(exc)

    if hex_to_int(receipt.get("status", "0x0")) == 1:
        click.secho("Transfer confirmed!", fg="green", bold=True)
        click.echo(label("Block:") + str(hex_to_int(receipt.get("blockNumber", "0x0"))))
    else:
        click.secho("Transfer failed (reverted)", fg="red")
        sys.exit(1)
