"""
ECDSA / secp256k1 key management.

Keys are stored in ~/.shardeum/.env as PRIVATE_KEY (hex format), next to
optional SHARDEUM_RPC_URL / SHARDEUM_CHAIN_ID overrides.

Dependencies: eth-account (no full web3.py needed)
"""

from __future__ import annotations

import os
import secrets
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values, load_dotenv
from eth_account import Account
from eth_account.signers.local import LocalAccount

from ..errors import WalletNotFoundError

# Default config directory
SHARDEUM_DIR = Path.home() / ".shardeum"
SHARDEUM_ENV = SHARDEUM_DIR / ".env"


def generate_account() -> tuple[str, str]:
    """
    Generate a new ECDSA/secp256k1 keypair.

    Returns:
        Tuple of (private_key_hex, address)
        - private_key_hex: 0x-prefixed hex private key (66 chars)
        - address: 0x-prefixed checksummed address (42 chars)
    """
    private_key = "0x" + secrets.token_hex(32)
    account = Account.from_key(private_key)
    return private_key, account.address


def save_private_key(private_key: str, env_path: Optional[Path] = None) -> Path:
    """
    Save private key to .env file, keeping any other entries.

    Returns:
        Path to the saved .env file
    """
    env_path = env_path or SHARDEUM_ENV
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing = read_env_file(env_path)
    existing["PRIVATE_KEY"] = private_key

    lines = [f"{k}={v}" for k, v in existing.items()]
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    # Set secure permissions on Unix
    if os.name != "nt":
        env_path.chmod(0o600)

    return env_path


def load_env(env_path: Optional[Path] = None) -> None:
    """Load ~/.shardeum/.env into the process environment if it exists."""
    env_path = env_path or SHARDEUM_ENV
    if env_path.exists():
        load_dotenv(env_path, override=False)


def read_env_file(env_path: Optional[Path] = None) -> dict[str, str]:
    """Entries of the .env file, without touching the process environment."""
    env_path = env_path or SHARDEUM_ENV
    if not env_path.exists():
        return {}
    return {k: v for k, v in dotenv_values(env_path).items() if v is not None}


def load_private_key(env_path: Optional[Path] = None) -> str:
    """
    Load private key from the environment, falling back to the .env file.

    Returns:
        0x-prefixed hex private key

    Raises:
        WalletNotFoundError: If no PRIVATE_KEY is configured
    """
    env_path = env_path or SHARDEUM_ENV
    private_key = os.environ.get("PRIVATE_KEY") or read_env_file(env_path).get("PRIVATE_KEY")
    if not private_key:
        raise WalletNotFoundError(
            f"PRIVATE_KEY not found. Run 'shardeum keygen' or set "
            f"PRIVATE_KEY in {env_path}"
        )

    if not private_key.startswith("0x"):
        private_key = "0x" + private_key

    return private_key


def get_account(private_key: Optional[str] = None) -> LocalAccount:
    """
    Get an eth-account LocalAccount from a private key.

    If private_key is None, loads it from the environment.
    """
    if private_key is None:
        private_key = load_private_key()
    return Account.from_key(private_key)


def get_address(private_key: Optional[str] = None) -> str:
    return get_account(private_key).address
