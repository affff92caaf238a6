"""Solana RPC access."""
