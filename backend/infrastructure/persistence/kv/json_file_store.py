from __future__ import annotations

import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from application.ports.key_value_store_port import KeyValueStorePort

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStorePort):
    """Key-value store backed by a single JSON object on disk.

    Writes go to a sibling temp file that is then renamed over the target, so
    a crash mid-write never leaves a truncated document behind.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    def _read_sync(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as exc:
            logger.warning("unreadable key-value file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("key-value file %s does not hold a JSON object", self._path)
            return {}
        return data

    def _write_sync(self, data: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(tmp, self._path)

    async def get(self, key: str) -> Optional[Any]:
        data = await asyncio.to_thread(self._read_sync)
        return data.get(key)

    async def set(self, key: str, value: Any) -> None:
        async with self._lock:

            def _update() -> None:
                data = self._read_sync()
                data[key] = value
                self._write_sync(data)

            await asyncio.to_thread(_update)
        logger.debug("saved key=%s to %s", key, self._path)

    async def close(self) -> None:
        return None
