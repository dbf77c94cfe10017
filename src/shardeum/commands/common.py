"""Helpers shared by the CLI commands."""

from __future__ import annotations

import json
import sys
from typing import Any, NoReturn, Optional

import click

from ..api import ShardeumAPI
from ..errors import ShardeumError
from ..wallet.signer import Wallet


def get_api(ctx: click.Context, wallet: Optional[Wallet] = None) -> ShardeumAPI:
    """Build a client from the options given to the top-level group."""
    opts = ctx.find_root().obj or {}
    return ShardeumAPI(
        rpc_url=opts.get("rpc_url"),
        wallet=wallet,
        chain_id=opts.get("chain_id"),
    )


def fail(exc: Exception) -> NoReturn:
    """Print an error and exit with the code matching its kind."""
    click.secho(f"ERROR: {exc}", fg="red", err=True)
    sys.exit(exc.exit_code if isinstance(exc, ShardeumError) else 1)


def echo_json(value: Any) -> None:
    click.echo(json.dumps(value, indent=2, sort_keys=True))


def label(text: str) -> str:
    return click.style(f"  {text:<14}", dim=True)
