"""
Blaseball live feed client.

Decodes socket.io event frames into typed snapshots and keeps an in-memory
index of teams, subleagues, divisions and leagues.
"""
from blaseball.envelope import UpdateKind, decode, encode
from blaseball.errors import (
    FeedError,
    ParseError,
    RecoverableError,
    TransportClosed,
    TransportError,
    UnrecognizedFrame,
)
from blaseball.models import (
    Division,
    Game,
    League,
    LiveGameSnapshot,
    ReferenceSnapshot,
    SubLeague,
    Team,
)
from blaseball.store import EntityStore
from blaseball.unmarshal import Update, parse_frame, unmarshal

__all__ = [
    "UpdateKind", "decode", "encode",
    "FeedError", "RecoverableError", "UnrecognizedFrame", "ParseError",
    "TransportClosed", "TransportError",
    "Team", "SubLeague", "Division", "League", "ReferenceSnapshot",
    "Game", "LiveGameSnapshot",
    "EntityStore", "Update", "unmarshal", "parse_frame",
]
