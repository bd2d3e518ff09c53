"""Hosted database infrastructure package."""

from .supabase_rpc_client import SupabaseRpcClient

__all__ = [
    "SupabaseRpcClient",
]
