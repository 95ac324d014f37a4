from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from application.ports.key_value_store_port import KeyValueStorePort


class InMemoryKeyValueStore(KeyValueStorePort):
    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(dict(initial or {}))

    async def get(self, key: str) -> Optional[Any]:
        # Hand out copies so callers never alias the stored value.
        return copy.deepcopy(self._data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    async def close(self) -> None:
        return None
