from .kv_entry import KVEntry

__all__ = [
    "KVEntry",
]
