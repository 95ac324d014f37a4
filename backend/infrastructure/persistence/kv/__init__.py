from __future__ import annotations

from infrastructure.persistence.kv.json_file_store import JsonFileKeyValueStore
from infrastructure.persistence.kv.memory_store import InMemoryKeyValueStore

__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore"]
