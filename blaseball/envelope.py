"""
Socket.IO event envelope: strips the ``42["eventName",...]`` wrapper.

A pushed update arrives as one text frame:

    42["leagueDataUpdate",{...}]
    42["gameDataUpdate",{...}]

``4`` is the Engine.IO message packet, ``2`` the Socket.IO event type, and the
rest is a JSON array of event name + payload. The payload is carved out by
prefix/suffix stripping rather than parsing the whole array, so the JSON body
is decoded once, by the unmarshaler, into the right record type.
"""
from enum import Enum

from blaseball.errors import UnrecognizedFrame

EVENT_PREFIX = "42["


class UpdateKind(Enum):
    LEAGUE_DATA = "leagueDataUpdate"
    GAME_DATA = "gameDataUpdate"

    @property
    def prefix(self) -> str:
        """Quoted event name plus the comma that separates it from the payload."""
        return f'"{self.value}",'


# Order matters only for readability; the prefixes are disjoint.
_KINDS = (UpdateKind.LEAGUE_DATA, UpdateKind.GAME_DATA)


def _strip_prefix(text: str, prefix: str) -> tuple[str, bool]:
    stripped = text.removeprefix(prefix)
    return stripped, len(stripped) == len(text) - len(prefix)


def decode(raw: str | bytes) -> tuple[UpdateKind, str]:
    """Classify a raw frame and return ``(kind, json_body)``.

    Raises UnrecognizedFrame when the frame is binary, is not an event
    message, or names an event this client does not know.
    """
    if not isinstance(raw, str):
        # only text frames carry events; binary messages are unsupported
        raise UnrecognizedFrame(f"unsupported binary frame ({len(raw)} bytes)")

    text, matched = _strip_prefix(raw, EVENT_PREFIX)
    if not matched:
        raise UnrecognizedFrame(f"not an event message: {text[:40]!r}")

    for kind in _KINDS:
        body, matched = _strip_prefix(text, kind.prefix)
        if matched:
            # exactly one closing bracket of the outer array
            return kind, body.removesuffix("]")

    raise UnrecognizedFrame(f"unknown event: {text[:40]!r}")


def encode(kind: UpdateKind, body: str) -> str:
    """Wrap a JSON body in the event envelope for ``kind``."""
    return f"{EVENT_PREFIX}{kind.prefix}{body}]"
