from __future__ import annotations

import copy
import json
from typing import Any

import pytest


LEAGUE_DATA: dict[str, Any] = {
    "teams": [
        {
            "_id": "T1",
            "fullName": "Mild High Horses",
            "location": "Mild High",
            "nickname": "Horses",
            "shorthand": "MHH",
            "mainColor": "#593037",
            "secondaryColor": "#7b4f56",
            "emoji": "0x1F40E",
            "slogan": "Ride On.",
            "lineup": ["p1", "p2", "p3"],
            "rotation": ["p4", "p5"],
            "bullpen": ["p6"],
            "bench": ["p7"],
            "seasonAttributes": [],
            "permanentAttributes": ["FIREPROOF"],
            "shameRuns": 0,
            "totalShames": 3,
            "totalShamings": 1,
            "seasonShames": 1,
            "seasonShamings": 0,
            "championships": 2,
        },
        {
            "_id": "T2",
            "fullName": "Hawai'i Fridays",
            "location": "Hawai'i",
            "nickname": "Fridays",
            "lineup": ["p8"],
            "rotation": ["p9"],
            "bullpen": [],
            "bench": [],
        },
    ],
    "subleagues": [
        {"_id": "SL1", "name": "Good League", "divisions": ["D1"]},
    ],
    "divisions": [
        {"_id": "D1", "name": "Lawful Good", "teams": ["T1", "T2"]},
    ],
    "leagues": [
        {"_id": "L1", "name": "Internet League Blaseball", "subleagues": ["SL1"],
         "tiebreakers": "TB1"},
    ],
}


GAME_DATA: dict[str, Any] = {
    "sim": {
        "_id": "thisidisstaticyo",
        "__v": 0,
        "day": 42,
        "season": 3,
        "phase": 2,
        "league": "L1",
        "nextPhaseTime": "2020-08-10T15:00:00.000Z",
        "eraTitle": "Discipline",
        "openedBook": False,
    },
    "season": {"_id": "S3", "seasonNumber": 3, "league": "L1"},
    "standings": {"_id": "ST3", "wins": {"T1": 30, "T2": 12}, "losses": {"T1": 12, "T2": 30}},
    "schedule": [
        {
            "_id": "G1",
            "awayTeam": "T1",
            "awayTeamName": "Mild High Horses",
            "awayTeamNickname": "Horses",
            "homeTeam": "T2",
            "homeTeamName": "Hawai'i Fridays",
            "homeTeamNickname": "Fridays",
            "awayPitcher": "p4",
            "homeBatter": "p8",
            "awayScore": 3,
            "homeScore": 1,
            "awayOdds": 0.55,
            "homeOdds": 0.45,
            "inning": 4,
            "topOfInning": False,
            "atBatBalls": 2,
            "atBatStrikes": 1,
            "halfInningOuts": 1,
            "basesOccupied": [0, 2],
            "baseRunners": ["p8", "p9"],
            "gameStart": True,
            "gameComplete": False,
            "outcomes": ["The Horses hit a home run", {"type": "incineration"}],
        },
    ],
    "tomorrowSchedule": [
        {"_id": "G2", "awayTeam": "T2", "homeTeam": "T1", "homeOdds": 1},
    ],
    "postseason": {"playoffs": {"rounds": [["T1", "T2"]], "winner": None}},
}


def make_frame(event: str, payload: Any) -> str:
    body = payload if isinstance(payload, str) else json.dumps(payload)
    return f'42["{event}",{body}]'


@pytest.fixture
def league_data() -> dict[str, Any]:
    return copy.deepcopy(LEAGUE_DATA)


@pytest.fixture
def game_data() -> dict[str, Any]:
    return copy.deepcopy(GAME_DATA)


@pytest.fixture
def league_frame(league_data) -> str:
    return make_frame("leagueDataUpdate", league_data)


@pytest.fixture
def game_frame(game_data) -> str:
    return make_frame("gameDataUpdate", game_data)
