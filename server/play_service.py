"""WebSocket room service for the Schafkopf table."""

from __future__ import annotations

import argparse
import json
import logging
import uuid
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import uvicorn
from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from schafkopf.errors import InvalidPlay, SeatingError, TableError
from schafkopf.events import HandDealt
from schafkopf.game import GameSession
from schafkopf.service import TableService, TableView
from schafkopf.store import SessionStore

from . import protocol
from .config import load_settings
from .logging_utils import setup_logging

logger = logging.getLogger(__name__)

# (recipient player id or None for the whole room, payload)
Outgoing = Tuple[Optional[str], dict]


class ConnectionManager:
    def __init__(self) -> None:
        self.active_connections: Dict[str, Dict[str, WebSocket]] = {}

    async def connect(self, websocket: WebSocket, room_id: str, player_id: str) -> None:
        await websocket.accept()
        self.active_connections.setdefault(room_id, {})[player_id] = websocket

    def disconnect(self, room_id: str, player_id: str) -> bool:
        """Drop the connection; return True when the room has no one left."""
        room = self.active_connections.get(room_id)
        if room is None:
            return True
        room.pop(player_id, None)
        if not room:
            del self.active_connections[room_id]
            return True
        return False

    async def send_personal_message(self, message: dict, room_id: str, player_id: str) -> None:
        websocket = self.active_connections.get(room_id, {}).get(player_id)
        if websocket is not None:
            await websocket.send_json(message)

    async def broadcast(self, message: dict, room_id: str) -> None:
        logger.debug("Broadcasting %s to room %s", message.get("type"), room_id)
        for websocket in list(self.active_connections.get(room_id, {}).values()):
            await websocket.send_json(message)

    async def deliver(self, outgoing: List[Outgoing], room_id: str) -> None:
        for recipient, message in outgoing:
            if recipient is None:
                await self.broadcast(message, room_id)
            else:
                await self.send_personal_message(message, room_id, recipient)


def dispatch(session: GameSession, player_id: str, message: protocol.ClientMessage) -> List[Outgoing]:
    """Apply one client message to the session and collect the replies.

    Rejections go back to the sender only; everything else is broadcast,
    except dealt hands which go to their own seat.
    """
    if isinstance(message, protocol.TakeSeat):
        try:
            session.take_seat(player_id, message.seatIndex, message.name)
        except SeatingError as exc:
            return [(player_id, protocol.rejection("seatFailed", exc.code, str(exc)))]
        return [(None, protocol.room_state(session))]

    if isinstance(message, protocol.LeaveSeat):
        try:
            events = session.leave_seat(player_id)
        except SeatingError as exc:
            return [(player_id, protocol.rejection("seatFailed", exc.code, str(exc)))]
        outgoing: List[Outgoing] = [(None, protocol.encode_event(e, session)) for e in events]
        outgoing.append((None, protocol.room_state(session)))
        return outgoing

    if isinstance(message, protocol.StartGame):
        try:
            events = session.request_deal()
        except TableError as exc:
            return [(player_id, protocol.rejection("startFailed", exc.code, str(exc)))]
        outgoing = []
        for event in events:
            payload = protocol.encode_event(event, session)
            if isinstance(event, HandDealt):
                seated = session.player_at(event.seat)
                if seated is not None:
                    outgoing.append((seated.player_id, payload))
            else:
                outgoing.append((None, payload))
        return outgoing

    if isinstance(message, protocol.PlayCard):
        try:
            events = session.play_for(player_id, message.cardId)
        except InvalidPlay as exc:
            logger.debug("Room %s: rejected play from %s: %s", session.room_id, player_id, exc)
            return [(player_id, protocol.rejection("playFailed", exc.code, str(exc)))]
        return [(None, protocol.encode_event(e, session)) for e in events]

    raise TypeError(f"Unhandled message {message!r}")


settings = load_settings()
store = SessionStore(seed=settings.shuffle_seed)
manager = ConnectionManager()

app = FastAPI(title="Schafkopf Table Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def ensure_session(room_id: str) -> GameSession:
    session = store.get(room_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Room not found")
    return session


@app.get("/rooms")
def list_rooms() -> Dict[str, List[str]]:
    return {"rooms": store.rooms()}


@app.get("/rooms/{room_id}")
async def room_view(room_id: str) -> TableView:
    ensure_session(room_id)
    with store.locked(room_id) as session:
        return TableService(session).get_table_view()


@app.get("/rooms/{room_id}/players/{player_id}")
async def player_view(room_id: str, player_id: str) -> TableView:
    ensure_session(room_id)
    with store.locked(room_id) as session:
        seat = session.seat_of(player_id)
        if seat is None:
            raise HTTPException(status_code=404, detail="Player not seated")
        return TableService(session).get_table_view(perspective=seat)


@app.websocket("/ws/{room_id}")
async def room_socket(websocket: WebSocket, room_id: str) -> None:
    player_id = uuid.uuid4().hex
    await manager.connect(websocket, room_id, player_id)
    await websocket.send_json({"type": "welcome", "playerId": player_id, "roomId": room_id})
    with store.locked(room_id) as session:
        state = protocol.room_state(session)
    await manager.broadcast(state, room_id)

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                message = protocol.parse_client_message(json.loads(raw))
            except (json.JSONDecodeError, protocol.ProtocolError) as exc:
                await websocket.send_json(protocol.rejection("error", "bad_message", str(exc)))
                continue
            with store.locked(room_id) as session:
                outgoing = dispatch(session, player_id, message)
            await manager.deliver(outgoing, room_id)
    except WebSocketDisconnect:
        logger.debug("Room %s: %s disconnected", room_id, player_id)
    finally:
        await handle_disconnect(room_id, player_id)


async def handle_disconnect(room_id: str, player_id: str) -> None:
    room_empty = manager.disconnect(room_id, player_id)
    outgoing: List[Outgoing] = []
    with store.locked(room_id) as session:
        if session.seat_of(player_id) is not None:
            outgoing.extend(dispatch(session, player_id, protocol.LeaveSeat(type="leaveSeat")))
    if room_empty:
        store.evict(room_id)
        return
    await manager.deliver(outgoing, room_id)


if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Schafkopf table service")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    args = parser.parse_args()

    setup_logging(args.log_level)
    logger.info("Server listening on %s:%d", args.host, args.port)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
