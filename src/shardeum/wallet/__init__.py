"""
Wallet - keys, account access and transaction signing.
"""

from .keys import (
    SHARDEUM_DIR,
    SHARDEUM_ENV,
    generate_account,
    get_account,
    get_address,
    load_env,
    load_private_key,
    read_env_file,
    save_private_key,
)
from .signer import Signer, Wallet, approve_all
