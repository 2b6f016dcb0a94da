from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
from collections import deque
from pathlib import Path
from typing import Deque, List, Optional, Set

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from lift import Elevator, LiftConfig, LiftError, OutOfRange

logger = logging.getLogger(__name__)


class FloorRequestBody(BaseModel):
    floor: int


class QueuedRequest(BaseModel):
    floor: int
    position: int


class LiftManager:
    """Owns the car and advances it on a timer for HTTP and websocket clients.

    Requests are buffered and applied one per tick, the same way the console
    drains its input feed.
    """

    def __init__(self, elevator: Elevator, tick_interval: float = 1.0) -> None:
        self.elevator = elevator
        self.tick_interval = tick_interval
        self.current_time: int = 0
        self.last_error: Optional[LiftError] = None
        self.requests: Deque[int] = deque()
        self.clients: Set[WebSocket] = set()
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @classmethod
    def from_config(cls, config: LiftConfig) -> "LiftManager":
        return cls(config.build_elevator(), tick_interval=config.tick_interval_s)

    async def start(self) -> None:
        if self._task is None:
            logger.info("Ticking every %ss", self.tick_interval)
            self._task = asyncio.create_task(self._tick_forever())

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._task
            self._task = None
        for client in list(self.clients):
            await self.unregister(client)

    def submit(self, floor: int) -> QueuedRequest:
        self.requests.append(floor)
        return QueuedRequest(floor=floor, position=len(self.requests))

    def step(self) -> None:
        self.last_error = None
        if self.requests:
            floor = self.requests.popleft()
            try:
                self.elevator.move_to(floor)
            except OutOfRange as exc:
                logger.info("Rejected request: %s", exc)
                self.last_error = exc
        self.elevator.tick()
        self.current_time += 1

    async def advance(self) -> None:
        """Apply one tick and push the new state to every listener."""
        async with self._lock:
            self.step()
            message = json.dumps(self.current_state())
        await self.publish(message)

    async def _tick_forever(self) -> None:
        while True:
            await self.advance()
            await asyncio.sleep(self.tick_interval)

    async def publish(self, message: str) -> None:
        gone: List[WebSocket] = []
        for client in list(self.clients):
            try:
                await client.send_text(message)
            except (WebSocketDisconnect, RuntimeError):
                gone.append(client)
        for client in gone:
            logger.info("Dropping disconnected listener")
            await self.unregister(client)

    async def register(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.clients.add(websocket)
        await websocket.send_text(json.dumps(self.current_state()))

    async def unregister(self, websocket: WebSocket) -> None:
        self.clients.discard(websocket)
        with contextlib.suppress(WebSocketDisconnect, RuntimeError):
            await websocket.close()

    def current_state(self) -> dict:
        floors = self.elevator.floors
        return {
            "time": self.current_time,
            "floors": list(floors),
            "car": self.elevator.snapshot().to_dict(),
            "pending_requests": list(self.requests),
            "last_error": str(self.last_error) if self.last_error else None,
        }


def load_config() -> LiftConfig:
    path = os.environ.get("LIFT_CONFIG")
    if not path:
        return LiftConfig()
    return LiftConfig.from_dict(json.loads(Path(path).read_text()))


def create_app(manager: LiftManager) -> FastAPI:
    app = FastAPI(title="Lift Console API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    async def on_startup() -> None:
        await manager.start()

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await manager.stop()

    @app.get("/state")
    async def get_state() -> dict:
        return manager.current_state()

    @app.post("/floors", status_code=202)
    async def request_floor(request: FloorRequestBody) -> QueuedRequest:
        return manager.submit(request.floor)

    @app.websocket("/ws/stream")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        await manager.register(websocket)
        try:
            while True:
                await websocket.receive_text()
        except WebSocketDisconnect:
            pass
        finally:
            await manager.unregister(websocket)

    return app


manager = LiftManager.from_config(load_config())
app = create_app(manager)


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run("service.app:app", host="0.0.0.0", port=8000, reload=False)
