"""
Commands - CLI command implementations.

Each module groups related top-level commands:
- account:  keygen, whoami, balance
- transfer: send SHM from the configured wallet
- chain:    info, block, tx, rpc
- network:  Shardeum network extensions (nodes, account, cycle)
"""
