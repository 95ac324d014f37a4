from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class FetchPhase(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class ReactiveFetch:
    """Shared plumbing for input-driven fetch controllers.

    A controller re-runs its effect whenever its input changes. Each run that
    touches the network is an asyncio task, and that task doubles as the
    run's cancellation token: starting a new run cancels the previous task,
    and a run only writes state while it is still ``self._task``.
    """

    def __init__(self) -> None:
        self.phase = FetchPhase.IDLE
        self.is_loading = False
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[Listener] = []
        self._started = False

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every state change; returns an unsubscribe."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("state listener failed")

    def _cancel_pending(self) -> None:
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()

    def _is_current(self) -> bool:
        return self._task is not None and asyncio.current_task() is self._task

    @property
    def in_flight(self) -> bool:
        return self._task is not None and not self._task.done()

    async def wait_settled(self) -> None:
        """Wait until no run is in flight, following any run that supersedes it."""
        while True:
            task = self._task
            if task is None or task.done():
                return
            # asyncio.wait never raises the task's cancellation into the caller.
            await asyncio.wait({task})

    def close(self) -> None:
        """Teardown: cancel the in-flight run and drop all listeners."""
        self._cancel_pending()
        self._listeners.clear()
