"""Active dataset session shared across the training views.

The session id is produced by the dataset clean/save step and identifies the
prepared dataset on the backend. Training views only ever read it, through
the ``get`` accessor they are handed.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from helpers.logging_config import get_logger
from helpers.settings import (
    clear_active_session,
    load_active_session,
    save_active_session,
)


logger = get_logger(__name__)


class SessionProvider:
    """Holds the active session id and notifies subscribers when it changes.

    ``persist=False`` keeps the value in memory only, which is what tests and
    embedded panels use.
    """

    def __init__(self, session_id: Optional[str] = None, *, persist: bool = True):
        self._persist = persist
        if session_id is None and persist:
            session_id = load_active_session()
        self._session_id = (session_id or "").strip()
        self._listeners: List[Callable[[str], None]] = []

    def get(self) -> str:
        return self._session_id

    def set(self, session_id: str) -> None:
        value = (session_id or "").strip()
        if value == self._session_id:
            return
        self._session_id = value
        if self._persist:
            if value:
                save_active_session(value)
            else:
                clear_active_session()
        logger.info("Active session %s", value or "cleared")
        self._notify()

    def clear(self) -> None:
        self.set("")

    def subscribe(self, callback: Callable[[str], None]) -> None:
        self._listeners.append(callback)

    def _notify(self) -> None:
        for cb in list(self._listeners):
            try:
                cb(self._session_id)
            except Exception:
                logger.exception("Session listener failed")
