"""
Live analysis over WebSocket.

Clients send the raw contents of a URL input field on every keystroke and
receive an analysis once typing pauses.
"""

import logging

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from api.debounce import Debouncer
from api.routes.analysis import to_response
from config import Settings, get_settings
from engine import URLInspector

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Live Analysis"])


@router.websocket("/ws/analyze")
async def live_analysis(
    websocket: WebSocket,
    settings: Settings = Depends(get_settings),
):
    """
    WebSocket endpoint for type-ahead URL analysis.

    Usage:
        ws://localhost:8000/api/v1/ws/analyze

    Each text frame replaces the current input. After `debounce_ms` without
    a new frame the server replies:
        {"type": "analysis", "data": {...AnalysisResult...}}

    An empty frame clears the input and cancels any pending analysis.
    """
    await websocket.accept()
    inspector = URLInspector.from_settings(settings)

    async def publish(text: str) -> None:
        result = inspector.analyze(text)
        await websocket.send_json(
            {"type": "analysis", "data": to_response(result).model_dump(mode="json")}
        )

    debouncer = Debouncer(settings.debounce_ms, publish)

    await websocket.send_json(
        {
            "type": "connected",
            "data": {"debounce_ms": settings.debounce_ms},
        }
    )

    try:
        while True:
            text = await websocket.receive_text()
            if text.strip():
                debouncer.submit(text)
            else:
                debouncer.cancel()
    except WebSocketDisconnect:
        logger.info("Live analysis client disconnected")
    finally:
        debouncer.cancel()
