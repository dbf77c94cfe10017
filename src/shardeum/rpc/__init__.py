"""
RPC - Wire layer for talking to Shardeum nodes.

Provides the JSON-RPC envelope and transport, ABI-encoded contract reads,
and transaction building for plain value transfers.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
