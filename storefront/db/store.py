"""Key/value persistence for client-side state (cart, local catalogs, offers).

Values are plain JSON-compatible structures. Callers never share references
with the store: what goes in is copied, what comes out is a fresh copy.
"""
import copy
from typing import Any, Dict, Optional, Protocol

from storefront.config import STORE_BACKEND


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()


class MongoStore:
    """One document per key: {"_id": key, "value": ...}."""

    def __init__(self, collection):
        self.coll = collection

    def get(self, key: str, default: Any = None) -> Any:
        doc = self.coll.find_one({"_id": key})
        if not doc:
            return default
        return doc.get("value", default)

    def set(self, key: str, value: Any) -> None:
        self.coll.replace_one({"_id": key}, {"_id": key, "value": value}, upsert=True)

    def delete(self, key: str) -> None:
        self.coll.delete_one({"_id": key})

    def clear(self) -> None:
        self.coll.delete_many({})


def build_store(backend: str = STORE_BACKEND) -> KeyValueStore:
    if backend == "mongo":
        from storefront.db.mongo import get_state_collection
        return MongoStore(get_state_collection())
    if backend == "memory":
        return MemoryStore()
    raise ValueError(f"Unknown store backend '{backend}'")
