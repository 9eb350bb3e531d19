"""FastAPI application factory."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.staticfiles import StaticFiles

from brandmark.config import OUTPUTS_DIR
from brandmark.web.routes import router
from brandmark.web.websocket import ws_manager


def create_app() -> FastAPI:
    app = FastAPI(title="Brandmark Logo Engine")

    app.include_router(router)

    @app.websocket("/ws")
    async def websocket_endpoint(ws: WebSocket, job_id: Optional[str] = None):
        await ws_manager.connect(ws, job_id)
        try:
            while True:
                await ws.receive_text()  # Keep connection alive
        except WebSocketDisconnect:
            ws_manager.disconnect(ws)

    # Stored logo assets
    app.mount("/outputs", StaticFiles(directory=str(OUTPUTS_DIR)), name="outputs")

    return app
