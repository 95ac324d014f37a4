from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from application.ports.key_value_store_port import KeyValueStorePort
from domain.movies import WatchedEntry, WatchedSummary

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "watched"


class WatchedListStore:
    """The user's watched list, owned by one session.

    ``load()`` reads the persisted list once at start; every mutation writes
    the whole list back under ``storage_key``. Ids are expected to be unique
    but that is not enforced here: ``remove`` drops every entry with the id.
    """

    def __init__(self, kv: KeyValueStorePort, *, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self._storage_key = storage_key
        self._entries: List[WatchedEntry] = []
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def entries(self) -> Tuple[WatchedEntry, ...]:
        return tuple(self._entries)

    async def load(self) -> List[WatchedEntry]:
        raw = await self._kv.get(self._storage_key)
        entries: List[WatchedEntry] = []
        if raw is None:
            pass
        elif not isinstance(raw, list):
            logger.warning("ignoring watched list of type %s under key=%s", type(raw).__name__, self._storage_key)
        else:
            for item in raw:
                if not isinstance(item, dict):
                    logger.warning("skipping malformed watched entry: %r", item)
                    continue
                try:
                    entries.append(WatchedEntry.from_dict(item))
                except ValueError as exc:
                    logger.warning("skipping malformed watched entry: %s", exc)

        self._entries = entries
        self._loaded = True
        logger.debug("loaded %d watched entries", len(entries))
        return list(entries)

    def find(self, imdb_id: Optional[str]) -> Optional[WatchedEntry]:
        if not imdb_id:
            return None
        for entry in self._entries:
            if entry.imdb_id == imdb_id:
                return entry
        return None

    async def add(self, entry: WatchedEntry) -> WatchedEntry:
        entries = [*self._entries, entry]
        await self._save(entries)
        self._entries = entries
        return entry

    async def remove(self, imdb_id: str) -> bool:
        kept = [e for e in self._entries if e.imdb_id != imdb_id]
        if len(kept) == len(self._entries):
            return False
        await self._save(kept)
        self._entries = kept
        return True

    def summary(self) -> WatchedSummary:
        return WatchedSummary.from_entries(self._entries)

    async def _save(self, entries: List[WatchedEntry]) -> None:
        # The in-memory list only changes once this write has gone through.
        await self._kv.set(self._storage_key, [e.to_dict() for e in entries])
