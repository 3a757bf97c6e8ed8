"""In-memory registry of search sessions served over HTTP."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Callable
from uuid import uuid4

from motor_metrics.domain.errors import NotFoundError
from motor_metrics.use_cases.search_controller import SearchController

logger = logging.getLogger(__name__)


class SessionRegistry:
    """
    Holds one SearchController per session id.

    Each controller is owned by exactly one session. When ``max_sessions``
    is reached the least recently used session is dropped and its in-flight
    search cancelled.

    Not thread-safe: use it only from the event loop serving the requests.
    """

    def __init__(
        self,
        controller_factory: Callable[[], SearchController],
        max_sessions: int = 1000,
    ) -> None:
        self._controller_factory = controller_factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, SearchController] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> tuple[str, SearchController]:
        session_id = uuid4().hex
        controller = self._controller_factory()
        self._sessions[session_id] = controller

        while len(self._sessions) > self._max_sessions:
            evicted_id, evicted = self._sessions.popitem(last=False)
            evicted.cancel()
            logger.info("Evicted search session", extra={"session_id": evicted_id})

        return session_id, controller

    def get(self, session_id: str) -> SearchController:
        """
        Raises:
            NotFoundError: If the session does not exist
        """
        controller = self._sessions.get(session_id)
        if controller is None:
            raise NotFoundError(resource="SearchSession", identifier=session_id)

        self._sessions.move_to_end(session_id)
        return controller

    def remove(self, session_id: str) -> None:
        """
        Raises:
            NotFoundError: If the session does not exist
        """
        controller = self._sessions.pop(session_id, None)
        if controller is None:
            raise NotFoundError(resource="SearchSession", identifier=session_id)

        controller.cancel()
