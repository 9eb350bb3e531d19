"""WebSocket connection manager: streams job progress events to clients."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import WebSocket

from brandmark.pipeline.events import Event, event_bus

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Tracks sockets, each optionally scoped to a single job."""

    def __init__(self) -> None:
        # (socket, job_id filter); None receives every job
        self._connections: list[tuple[WebSocket, Optional[str]]] = []

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, ws: WebSocket, job_id: Optional[str] = None) -> None:
        await ws.accept()
        self._connections.append((ws, job_id))
        logger.info(
            "WebSocket connected for %s (%d total)",
            job_id or "all jobs",
            len(self._connections),
        )

    def disconnect(self, ws: WebSocket) -> None:
        self._connections = [c for c in self._connections if c[0] is not ws]
        logger.info("WebSocket disconnected (%d remaining)", len(self._connections))

    async def handle_event(self, event: Event) -> None:
        """EventBus subscriber: forwards each event to the sockets watching its job."""
        message = event.to_json()
        dead: list[WebSocket] = []
        for ws, job_id in list(self._connections):
            if job_id is not None and job_id != event.job_id:
                continue
            try:
                await ws.send_text(message)
            except Exception:
                dead.append(ws)
        for ws in dead:
            self.disconnect(ws)


# Singleton
ws_manager = ConnectionManager()


async def setup_ws_events() -> None:
    """Subscribe the WebSocket manager to the EventBus."""
    await event_bus.subscribe(ws_manager.handle_event)
