import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from blaseball.envelope import UpdateKind, decode, encode
from blaseball.errors import ParseError, UnrecognizedFrame
from blaseball.models import LiveGameSnapshot, ReferenceSnapshot, Team
from blaseball.unmarshal import parse_frame, unmarshal
from conftest import make_frame


def test_league_frame_decodes_to_reference_snapshot(league_frame) -> None:
    update = parse_frame(league_frame)
    assert update.kind is UpdateKind.LEAGUE_DATA
    snap = update.snapshot
    assert isinstance(snap, ReferenceSnapshot)
    assert [t.id for t in snap.teams] == ["T1", "T2"]

    horses = snap.teams[0]
    assert horses.full_name == "Mild High Horses"
    assert horses.lineup == ("p1", "p2", "p3")
    assert horses.permanent_attributes == ("FIREPROOF",)
    assert horses.championships == 2
    assert snap.divisions[0].teams == ("T1", "T2")
    assert snap.subleagues[0].divisions == ("D1",)
    assert snap.leagues[0].subleagues == ("SL1",)
    assert snap.leagues[0].tiebreakers == "TB1"


def test_missing_fields_take_zero_values(league_frame) -> None:
    fridays = parse_frame(league_frame).snapshot.teams[1]
    assert fridays.slogan == ""
    assert fridays.season_attributes == ()
    assert fridays.shame_runs == 0


def test_absent_collections_are_empty() -> None:
    snap = unmarshal(UpdateKind.LEAGUE_DATA, '{"teams":[{"_id":"T9"}]}').snapshot
    assert len(snap.teams) == 1
    assert snap.subleagues == ()
    assert snap.divisions == ()
    assert snap.leagues == ()


def test_null_values_are_zero() -> None:
    snap = unmarshal(UpdateKind.LEAGUE_DATA,
                     '{"teams":[{"_id":"T9","lineup":null,"fullName":null}],"leagues":null}').snapshot
    assert snap.teams[0].lineup == ()
    assert snap.teams[0].full_name == ""
    assert snap.leagues == ()


def test_game_frame_decodes_to_live_game_snapshot(game_frame) -> None:
    update = parse_frame(game_frame)
    assert update.kind is UpdateKind.GAME_DATA
    snap = update.snapshot
    assert isinstance(snap, LiveGameSnapshot)

    assert snap.sim.day == 42
    assert snap.sim.next_phase_time == datetime(2020, 8, 10, 15, 0, tzinfo=timezone.utc)
    assert snap.sim.next_election_end is None
    assert snap.season.season_number == 3
    assert snap.standings.record("T1") == (30, 12)
    assert snap.standings.record("nobody") == (0, 0)

    game = snap.schedule[0]
    assert game.id == "G1"
    assert game.away_score == 3
    assert game.bases_occupied == (0, 2)
    assert game.away_odds == pytest.approx(0.55)
    assert game.game_start is True

    tomorrow = snap.tomorrow_schedule[0]
    assert tomorrow.home_odds == 1.0


def test_opaque_fields_are_kept_as_decoded_json(game_frame, game_data) -> None:
    snap = parse_frame(game_frame).snapshot
    assert snap.schedule[0].outcomes == game_data["schedule"][0]["outcomes"]
    assert snap.postseason.playoffs == game_data["postseason"]["playoffs"]
    assert snap.tomorrow_schedule[0].outcomes is None


def test_malformed_json_is_parse_error() -> None:
    with pytest.raises(ParseError) as exc:
        parse_frame(make_frame("leagueDataUpdate", '{"teams": [}'))
    cause = exc.value.cause
    assert isinstance(cause, ValidationError)
    assert cause.errors()[0]["type"] == "json_invalid"


def test_type_mismatch_is_parse_error_with_path() -> None:
    with pytest.raises(ParseError) as exc:
        unmarshal(UpdateKind.LEAGUE_DATA, '{"teams":[{"_id":"T1","championships":"two"}]}')
    cause = exc.value.cause
    assert isinstance(cause, ValidationError)
    assert cause.errors()[0]["loc"] == ("teams", 0, "championships")
    assert "teams.0.championships" in str(exc.value)


def test_deeply_nested_payload_is_parse_error() -> None:
    depth = 100_000
    body = '{"schedule":[{"_id":"G1","outcomes":' + "[" * depth + "]" * depth + "}]}"
    with pytest.raises(ParseError):
        unmarshal(UpdateKind.GAME_DATA, body)


def test_oversized_integer_decodes_or_is_parse_error() -> None:
    body = '{"teams":[{"_id":"T1","championships":1' + "0" * 5000 + "}]}"
    try:
        snap = unmarshal(UpdateKind.LEAGUE_DATA, body).snapshot
    except ParseError:
        return
    assert snap.teams[0].id == "T1"


@pytest.mark.parametrize("body", [
    "[]",
    '"text"',
    '{"teams": {"_id": "T1"}}',
    '{"teams": [{"lineup": "p1"}]}',
    '{"teams": [{"shameRuns": true}]}',
    '{"teams": [{"shameRuns": 1.5}]}',
])
def test_schema_violations_are_parse_errors(body) -> None:
    with pytest.raises(ParseError):
        unmarshal(UpdateKind.LEAGUE_DATA, body)


def test_bad_timestamp_is_parse_error() -> None:
    with pytest.raises(ParseError):
        unmarshal(UpdateKind.GAME_DATA, '{"sim": {"nextPhaseTime": "soon"}}')


def test_unknown_keys_are_ignored() -> None:
    snap = unmarshal(UpdateKind.LEAGUE_DATA, '{"teams":[{"_id":"T1","tarotCard":7}],"stadiums":[]}').snapshot
    assert snap.teams[0].id == "T1"


def test_bad_envelope_propagates_unrecognized() -> None:
    with pytest.raises(UnrecognizedFrame):
        parse_frame('42["peanutUpdate",{}]')


def test_reference_snapshot_round_trips_through_frame(league_frame) -> None:
    original = parse_frame(league_frame).snapshot
    frame = encode(UpdateKind.LEAGUE_DATA, json.dumps(original.to_wire()))
    assert parse_frame(frame).snapshot == original


def test_live_game_snapshot_round_trips_through_frame(game_frame) -> None:
    original = parse_frame(game_frame).snapshot
    kind, body = decode(encode(UpdateKind.GAME_DATA, json.dumps(original.to_wire())))
    assert unmarshal(kind, body).snapshot == original


def test_to_wire_uses_wire_keys() -> None:
    data = Team(id="T1", full_name="Mild High Horses", lineup=("p1",)).to_wire()
    assert data["_id"] == "T1"
    assert data["fullName"] == "Mild High Horses"
    assert data["lineup"] == ["p1"]
