"""
Wire records pushed by the Blaseball socket.

These are pure data containers with no logic beyond validation. Every
record is a frozen pydantic model whose fields carry their JSON key as an
alias; ordered sequences are tuples so a record handed out by the entity
store cannot be changed behind the store's back.

Decoding follows zero-value semantics: a missing or ``null`` key yields
``""``, ``0``, ``0.0``, ``False``, an empty sequence, or ``None`` for
timestamps and nested records. Scalars are strict, so a key that is present
with the wrong JSON type fails validation.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _null_is_zero(cls, data: Any) -> Any:
        # null means "unset": drop it so the field default applies
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)


# ═══════════════════════════════════════════════════════════════════════
#  Reference data: leagueDataUpdate
# ═══════════════════════════════════════════════════════════════════════

class Team(WireModel):
    """One team. Roster entries are player ids, kept as opaque strings."""
    id: StrictStr = Field(default="", alias="_id")
    full_name: StrictStr = Field(default="", alias="fullName")
    location: StrictStr = Field(default="", alias="location")
    nickname: StrictStr = Field(default="", alias="nickname")
    shorthand: StrictStr = Field(default="", alias="shorthand")
    main_color: StrictStr = Field(default="", alias="mainColor")
    secondary_color: StrictStr = Field(default="", alias="secondaryColor")
    emoji: StrictStr = Field(default="", alias="emoji")
    slogan: StrictStr = Field(default="", alias="slogan")

    lineup: tuple[StrictStr, ...] = Field(default=(), alias="lineup")
    rotation: tuple[StrictStr, ...] = Field(default=(), alias="rotation")
    bullpen: tuple[StrictStr, ...] = Field(default=(), alias="bullpen")
    bench: tuple[StrictStr, ...] = Field(default=(), alias="bench")
    season_attributes: tuple[StrictStr, ...] = Field(default=(), alias="seasonAttributes")
    permanent_attributes: tuple[StrictStr, ...] = Field(default=(), alias="permanentAttributes")

    shame_runs: StrictInt = Field(default=0, alias="shameRuns")
    total_shames: StrictInt = Field(default=0, alias="totalShames")
    total_shamings: StrictInt = Field(default=0, alias="totalShamings")
    season_shames: StrictInt = Field(default=0, alias="seasonShames")
    season_shamings: StrictInt = Field(default=0, alias="seasonShamings")
    championships: StrictInt = Field(default=0, alias="championships")


class Division(WireModel):
    id: StrictStr = Field(default="", alias="_id")
    name: StrictStr = Field(default="", alias="name")
    teams: tuple[StrictStr, ...] = Field(default=(), alias="teams")


class SubLeague(WireModel):
    id: StrictStr = Field(default="", alias="_id")
    name: StrictStr = Field(default="", alias="name")
    divisions: tuple[StrictStr, ...] = Field(default=(), alias="divisions")


class League(WireModel):
    id: StrictStr = Field(default="", alias="_id")
    name: StrictStr = Field(default="", alias="name")
    subleagues: tuple[StrictStr, ...] = Field(default=(), alias="subleagues")
    tiebreakers: StrictStr = Field(default="", alias="tiebreakers")


class ReferenceSnapshot(WireModel):
    """A batch of reference entities. Any of the four lists may be empty."""
    teams: tuple[Team, ...] = Field(default=(), alias="teams")
    subleagues: tuple[SubLeague, ...] = Field(default=(), alias="subleagues")
    divisions: tuple[Division, ...] = Field(default=(), alias="divisions")
    leagues: tuple[League, ...] = Field(default=(), alias="leagues")


# ═══════════════════════════════════════════════════════════════════════
#  Live game data: gameDataUpdate
# ═══════════════════════════════════════════════════════════════════════

class Sim(WireModel):
    """Simulation clock."""
    id: StrictStr = Field(default="", alias="_id")
    version: StrictInt = Field(default=0, alias="__v")
    league: StrictStr = Field(default="", alias="league")
    season: StrictInt = Field(default=0, alias="season")
    season_id: StrictStr = Field(default="", alias="seasonId")
    day: StrictInt = Field(default=0, alias="day")
    phase: StrictInt = Field(default=0, alias="phase")
    play_off_round: StrictInt = Field(default=0, alias="playOffRound")
    playoffs: StrictStr = Field(default="", alias="playoffs")
    rules: StrictStr = Field(default="", alias="rules")
    terminology: StrictStr = Field(default="", alias="terminology")
    next_election_end: Optional[datetime] = Field(default=None, alias="nextElectionEnd")
    next_phase_time: Optional[datetime] = Field(default=None, alias="nextPhaseTime")
    next_season_start: Optional[datetime] = Field(default=None, alias="nextSeasonStart")
    era_color: StrictStr = Field(default="", alias="eraColor")
    era_title: StrictStr = Field(default="", alias="eraTitle")
    sub_era_color: StrictStr = Field(default="", alias="subEraColor")
    sub_era_title: StrictStr = Field(default="", alias="subEraTitle")
    opened_book: StrictBool = Field(default=False, alias="openedBook")
    unlocked_peanuts: StrictBool = Field(default=False, alias="unlockedPeanuts")
    do_the_thing: StrictBool = Field(default=False, alias="doTheThing")
    twgo: StrictStr = Field(default="", alias="twgo")
    labour_one: StrictInt = Field(default=0, alias="labourOne")


class Season(WireModel):
    id: StrictStr = Field(default="", alias="_id")
    version: StrictInt = Field(default=0, alias="__v")
    league: StrictStr = Field(default="", alias="league")
    season_number: StrictInt = Field(default=0, alias="seasonNumber")
    rules: StrictStr = Field(default="", alias="rules")
    schedule: StrictStr = Field(default="", alias="schedule")
    standings: StrictStr = Field(default="", alias="standings")
    stats: StrictStr = Field(default="", alias="stats")
    terminology: StrictStr = Field(default="", alias="terminology")


class Standings(WireModel):
    """Win/loss counts keyed by team id."""
    id: StrictStr = Field(default="", alias="_id")
    version: StrictInt = Field(default=0, alias="__v")
    wins: dict[str, StrictInt] = Field(default_factory=dict, alias="wins")
    losses: dict[str, StrictInt] = Field(default_factory=dict, alias="losses")

    def record(self, team_id: str) -> tuple[int, int]:
        return self.wins.get(team_id, 0), self.losses.get(team_id, 0)


class Game(WireModel):
    """One matchup, live (``schedule``) or upcoming (``tomorrowSchedule``)."""
    id: StrictStr = Field(default="", alias="_id")
    season: StrictInt = Field(default=0, alias="season")
    day: StrictInt = Field(default=0, alias="day")
    phase: StrictInt = Field(default=0, alias="phase")
    rules: StrictStr = Field(default="", alias="rules")
    terminology: StrictStr = Field(default="", alias="terminology")
    statsheet: StrictStr = Field(default="", alias="statsheet")
    last_update: StrictStr = Field(default="", alias="lastUpdate")
    weather: StrictInt = Field(default=0, alias="weather")
    series_index: StrictInt = Field(default=0, alias="seriesIndex")
    series_length: StrictInt = Field(default=0, alias="seriesLength")

    away_team: StrictStr = Field(default="", alias="awayTeam")
    away_team_name: StrictStr = Field(default="", alias="awayTeamName")
    away_team_nickname: StrictStr = Field(default="", alias="awayTeamNickname")
    away_team_color: StrictStr = Field(default="", alias="awayTeamColor")
    away_team_emoji: StrictStr = Field(default="", alias="awayTeamEmoji")
    away_pitcher: StrictStr = Field(default="", alias="awayPitcher")
    away_pitcher_name: StrictStr = Field(default="", alias="awayPitcherName")
    away_batter: StrictStr = Field(default="", alias="awayBatter")
    away_batter_name: StrictStr = Field(default="", alias="awayBatterName")
    away_odds: StrictFloat = Field(default=0.0, alias="awayOdds")
    away_strikes: StrictInt = Field(default=0, alias="awayStrikes")
    away_score: StrictInt = Field(default=0, alias="awayScore")
    away_team_batter_count: StrictInt = Field(default=0, alias="awayTeamBatterCount")

    home_team: StrictStr = Field(default="", alias="homeTeam")
    home_team_name: StrictStr = Field(default="", alias="homeTeamName")
    home_team_nickname: StrictStr = Field(default="", alias="homeTeamNickname")
    home_team_color: StrictStr = Field(default="", alias="homeTeamColor")
    home_team_emoji: StrictStr = Field(default="", alias="homeTeamEmoji")
    home_pitcher: StrictStr = Field(default="", alias="homePitcher")
    home_pitcher_name: StrictStr = Field(default="", alias="homePitcherName")
    home_batter: StrictStr = Field(default="", alias="homeBatter")
    home_batter_name: StrictStr = Field(default="", alias="homeBatterName")
    home_odds: StrictFloat = Field(default=0.0, alias="homeOdds")
    home_strikes: StrictInt = Field(default=0, alias="homeStrikes")
    home_score: StrictInt = Field(default=0, alias="homeScore")
    home_team_batter_count: StrictInt = Field(default=0, alias="homeTeamBatterCount")

    inning: StrictInt = Field(default=0, alias="inning")
    top_of_inning: StrictBool = Field(default=False, alias="topOfInning")
    at_bat_balls: StrictInt = Field(default=0, alias="atBatBalls")
    at_bat_strikes: StrictInt = Field(default=0, alias="atBatStrikes")
    half_inning_outs: StrictInt = Field(default=0, alias="halfInningOuts")
    half_inning_score: StrictInt = Field(default=0, alias="halfInningScore")
    bases_occupied: tuple[StrictInt, ...] = Field(default=(), alias="basesOccupied")
    base_runners: tuple[StrictStr, ...] = Field(default=(), alias="baseRunners")
    baserunner_count: StrictInt = Field(default=0, alias="baserunnerCount")

    is_postseason: StrictBool = Field(default=False, alias="isPostseason")
    game_start: StrictBool = Field(default=False, alias="gameStart")
    game_complete: StrictBool = Field(default=False, alias="gameComplete")
    finalized: StrictBool = Field(default=False, alias="finalized")
    shame: StrictBool = Field(default=False, alias="shame")

    # Upstream never documented this; kept as the decoded JSON value.
    outcomes: Any = Field(default=None, alias="outcomes")


class PostSeason(WireModel):
    # Opaque bracket structure, kept as the decoded JSON value.
    playoffs: Any = Field(default=None, alias="playoffs")


class LiveGameSnapshot(WireModel):
    """Clock, season, standings and the day's games. Not retained by the store."""
    sim: Optional[Sim] = Field(default=None, alias="sim")
    season: Optional[Season] = Field(default=None, alias="season")
    standings: Optional[Standings] = Field(default=None, alias="standings")
    schedule: tuple[Game, ...] = Field(default=(), alias="schedule")
    tomorrow_schedule: tuple[Game, ...] = Field(default=(), alias="tomorrowSchedule")
    postseason: Optional[PostSeason] = Field(default=None, alias="postseason")
