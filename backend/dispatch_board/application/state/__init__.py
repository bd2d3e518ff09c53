from .store import Listener, Store
from .dispatch_store import DispatchState, DispatchStore
from .ui_store import NO_SHIFT, UiState, UiStore

__all__ = [
    "Listener",
    "Store",
    "DispatchState",
    "DispatchStore",
    "NO_SHIFT",
    "UiState",
    "UiStore",
]
