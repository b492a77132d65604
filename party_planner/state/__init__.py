from .store import AppStateStore, Slot, StateSnapshot

__all__ = [
    "AppStateStore",
    "Slot",
    "StateSnapshot",
]
