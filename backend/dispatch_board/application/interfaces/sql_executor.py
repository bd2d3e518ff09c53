"""Abstract interface (port) for running raw SQL batches on the database."""

from abc import ABC, abstractmethod


class SqlExecutor(ABC):
    """Port implemented by the database RPC adapter."""

    @abstractmethod
    async def exec_sql(self, sql: str) -> None:
        """Execute ``sql`` as a single batch.

        Raises:
            RpcError: If the database rejects the call.
            NetworkError: If the database could not be reached.
        """
        ...
