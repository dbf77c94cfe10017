__all__ = [
    # Client
    "ShardeumAPI",
    "TransferRecord",
    # Errors
    "ShardeumError",
    "WalletNotFoundError",
    "WalletNotConnectedError",
    "UserRejectedError",
    "RpcError",
    "TransportError",
    # Wallet
    "Wallet",
    "Signer",
    "generate_account",
    "load_private_key",
    "save_private_key",
    # Units
    "WEI_PER_SHM",
    "to_wei",
    "from_wei",
    "format_shm",
    # Networks
    "NETWORKS",
    "Network",
    "resolve_network",
]

__version__ = "0.1.0"

from .api import ShardeumAPI, TransferRecord
from .errors import (
    RpcError,
    ShardeumError,
    TransportError,
    UserRejectedError,
    WalletNotConnectedError,
    WalletNotFoundError,
)
from .rpc.client import NETWORKS, Network, resolve_network
from .units import WEI_PER_SHM, format_shm, from_wei, to_wei
from .wallet import Signer, Wallet, generate_account, load_private_key, save_private_key
