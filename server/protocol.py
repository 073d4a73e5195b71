"""JSON message shapes exchanged over the room WebSocket."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field, ValidationError

from schafkopf.cards import serialize_card
from schafkopf.events import (
    CardPlayed,
    GameStarted,
    HandAborted,
    HandDealt,
    HandEnded,
    TableEvent,
    TrickWon,
    TurnChanged,
)
from schafkopf.game import GameSession


class ProtocolError(ValueError):
    """Raised when a client message cannot be understood."""


class TakeSeat(BaseModel):
    type: Literal["takeSeat"]
    seatIndex: int = Field(..., description="Seat 0-3 to occupy.")
    name: str = Field("Spieler", max_length=40)


class LeaveSeat(BaseModel):
    type: Literal["leaveSeat"]


class StartGame(BaseModel):
    type: Literal["startGame"]


class PlayCard(BaseModel):
    type: Literal["playCard"]
    cardId: str


ClientMessage = Union[TakeSeat, LeaveSeat, StartGame, PlayCard]

MESSAGE_MODELS: Dict[str, type[BaseModel]] = {
    "takeSeat": TakeSeat,
    "leaveSeat": LeaveSeat,
    "startGame": StartGame,
    "playCard": PlayCard,
}


def parse_client_message(payload: Any) -> ClientMessage:
    if not isinstance(payload, dict):
        raise ProtocolError("Message must be a JSON object.")
    model = MESSAGE_MODELS.get(payload.get("type"))
    if model is None:
        raise ProtocolError(f"Unknown message type: {payload.get('type')!r}")
    try:
        return model(**payload)
    except ValidationError as exc:
        raise ProtocolError(str(exc)) from exc


def room_state(session: GameSession) -> Dict[str, Any]:
    return {
        "type": "roomState",
        "players": [{"name": p.name, "seatIndex": p.seat} for p in session.players()],
    }


def rejection(kind: str, code: str, message: str) -> Dict[str, Any]:
    return {"type": kind, "reason": code, "message": message}


def encode_event(event: TableEvent, session: GameSession) -> Dict[str, Any]:
    """Translate an engine event into its wire payload."""
    if isinstance(event, HandDealt):
        return {"type": "deal", "seatIndex": event.seat, "hand": [serialize_card(c) for c in event.cards]}
    if isinstance(event, GameStarted):
        players = [session.player_at(seat) for seat in event.seats]
        return {
            "type": "gameStarted",
            "players": [{"name": p.name, "seatIndex": p.seat} for p in players if p is not None],
        }
    if isinstance(event, CardPlayed):
        return {"type": "cardPlayed", "seatIndex": event.seat, "card": serialize_card(event.card)}
    if isinstance(event, TrickWon):
        trick: List[Dict[str, Any]] = [
            {"seatIndex": seat, "card": serialize_card(card)} for seat, card in event.plays
        ]
        return {"type": "trickWon", "winnerSeat": event.seat, "trick": trick}
    if isinstance(event, TurnChanged):
        player = session.player_at(event.seat)
        return {
            "type": "turn",
            "seatIndex": event.seat,
            "playerId": player.player_id if player is not None else None,
        }
    if isinstance(event, HandEnded):
        return {"type": "handEnded"}
    if isinstance(event, HandAborted):
        return {"type": "handAborted", "seatIndex": event.seat}
    raise TypeError(f"Unsupported event {event!r}")
