"""
Payload unmarshaler: turns a classified JSON body into a typed update.
"""
from dataclasses import dataclass
from typing import Union

from pydantic import ValidationError

from blaseball.envelope import UpdateKind, decode
from blaseball.errors import ParseError
from blaseball.models import LiveGameSnapshot, ReferenceSnapshot

Snapshot = Union[ReferenceSnapshot, LiveGameSnapshot]

_RECORD_TYPES = {
    UpdateKind.LEAGUE_DATA: ReferenceSnapshot,
    UpdateKind.GAME_DATA: LiveGameSnapshot,
}


@dataclass(frozen=True)
class Update:
    """Tagged result: ``kind`` says which snapshot type ``snapshot`` is."""
    kind: UpdateKind
    snapshot: Snapshot


def _describe(e: ValidationError) -> str:
    first = e.errors()[0]
    loc = ".".join(str(part) for part in first["loc"]) or "$"
    more = f" (+{e.error_count() - 1} more)" if e.error_count() > 1 else ""
    return f"{loc}: {first['msg']}{more}"


def unmarshal(kind: UpdateKind, body: str) -> Update:
    """Decode ``body`` as the record type for ``kind``.

    All or nothing: any JSON or schema error raises ParseError and no part
    of the message is returned.
    """
    record_type = _RECORD_TYPES[kind]
    try:
        snapshot = record_type.model_validate_json(body)
    except ValidationError as e:
        raise ParseError(f"{kind.value}: {_describe(e)}", e) from e
    except (ValueError, RecursionError) as e:
        # oversized numbers, pathological nesting
        raise ParseError(f"{kind.value}: undecodable payload: {e}", e) from e
    return Update(kind, snapshot)


def parse_frame(raw: str | bytes) -> Update:
    """Envelope decode + unmarshal in one step."""
    kind, body = decode(raw)
    return unmarshal(kind, body)
