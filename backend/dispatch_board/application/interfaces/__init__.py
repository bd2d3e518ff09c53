from .http_client import HttpClient
from .sql_executor import SqlExecutor

__all__ = [
    "HttpClient",
    "SqlExecutor",
]
