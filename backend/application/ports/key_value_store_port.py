from __future__ import annotations

from typing import Any, Optional, Protocol


class KeyValueStorePort(Protocol):
    """JSON-compatible values stored under string keys."""

    async def get(self, key: str) -> Optional[Any]:
        ...

    async def set(self, key: str, value: Any) -> None:
        ...

    async def close(self) -> None:
        ...
