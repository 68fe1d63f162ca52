"""
Entity store: keyed index of teams, subleagues, divisions and leagues.

One writer (the update loop) and any number of readers. Every access holds
the injected lock for the length of a merge or a copy, never longer.
"""
import logging
import threading
from contextlib import AbstractContextManager
from typing import Optional

from blaseball.models import Division, League, ReferenceSnapshot, SubLeague, Team

log = logging.getLogger("blaseball.store")


class EntityStore:
    def __init__(self, lock: Optional[AbstractContextManager] = None) -> None:
        self._lock = lock if lock is not None else threading.Lock()
        self._teams: dict[str, Team] = {}
        self._subleagues: dict[str, SubLeague] = {}
        self._divisions: dict[str, Division] = {}
        self._leagues: dict[str, League] = {}

    def merge(self, snapshot: ReferenceSnapshot) -> None:
        """Replace-by-key every record of the snapshot into its collection.

        A record whose key is already stored replaces the old one whole.
        Kinds the snapshot leaves empty are not touched.
        """
        with self._lock:
            for team in snapshot.teams:
                self._teams[team.id] = team
            for subleague in snapshot.subleagues:
                self._subleagues[subleague.id] = subleague
            for division in snapshot.divisions:
                self._divisions[division.id] = division
            for league in snapshot.leagues:
                self._leagues[league.id] = league
        log.debug(
            "merged teams=%d subleagues=%d divisions=%d leagues=%d",
            len(snapshot.teams), len(snapshot.subleagues),
            len(snapshot.divisions), len(snapshot.leagues),
        )

    # ── Lookup by key ────────────────────────────────────────────────

    def team(self, team_id: str) -> Optional[Team]:
        with self._lock:
            return self._teams.get(team_id)

    def subleague(self, subleague_id: str) -> Optional[SubLeague]:
        with self._lock:
            return self._subleagues.get(subleague_id)

    def division(self, division_id: str) -> Optional[Division]:
        with self._lock:
            return self._divisions.get(division_id)

    def league(self, league_id: str) -> Optional[League]:
        with self._lock:
            return self._leagues.get(league_id)

    # ── Full listings (copies) ───────────────────────────────────────

    def teams(self) -> list[Team]:
        with self._lock:
            return list(self._teams.values())

    def subleagues(self) -> list[SubLeague]:
        with self._lock:
            return list(self._subleagues.values())

    def divisions(self) -> list[Division]:
        with self._lock:
            return list(self._divisions.values())

    def leagues(self) -> list[League]:
        with self._lock:
            return list(self._leagues.values())

    def counts(self) -> dict[str, int]:
        with self._lock:
            return {
                "teams": len(self._teams),
                "subleagues": len(self._subleagues),
                "divisions": len(self._divisions),
                "leagues": len(self._leagues),
            }
