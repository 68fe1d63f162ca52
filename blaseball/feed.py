"""
Update loop: pulls frames off the transport, decodes them, merges league
data into the entity store and hands live game data to observers.

Runs until the transport closes (clean stop) or fails (error re-raised).
Bad frames are logged and skipped; they never touch the store.
"""
import inspect
import logging
from enum import Enum
from typing import Callable, Optional

from blaseball.envelope import UpdateKind
from blaseball.errors import ParseError, TransportClosed, TransportError, UnrecognizedFrame
from blaseball.health import HealthMonitor
from blaseball.models import LiveGameSnapshot, ReferenceSnapshot
from blaseball.store import EntityStore
from blaseball.unmarshal import Update, parse_frame

log = logging.getLogger("blaseball.feed")

GameDataObserver = Callable[[LiveGameSnapshot], object]


class LoopState(Enum):
    RUNNING = "running"
    CLOSED = "closed"


class UpdateLoop:
    """Single consumer of the transport. The only writer of the entity store."""

    def __init__(
        self,
        transport,
        store: EntityStore,
        observer: Optional[GameDataObserver] = None,
        health: Optional[HealthMonitor] = None,
    ) -> None:
        self._transport = transport
        self._store = store
        self._health = health or HealthMonitor()
        self._observers: list[GameDataObserver] = []
        self._state = LoopState.RUNNING
        if observer is not None:
            self._observers.append(observer)

    @property
    def state(self) -> LoopState:
        return self._state

    def on_game_data(self, callback: GameDataObserver) -> None:
        """Register an observer for live game snapshots (sync or async)."""
        self._observers.append(callback)

    async def run(self) -> None:
        if self._state is LoopState.CLOSED:
            raise RuntimeError("update loop is closed")

        log.info("update loop starting")
        try:
            while True:
                try:
                    raw = await self._transport.next_frame()
                except TransportClosed as e:
                    log.info("transport closed, stopping: %s", e)
                    return
                except TransportError as e:
                    log.error("transport failed: %s", e)
                    raise

                self._health.record_frame()
                try:
                    update = parse_frame(raw)
                except UnrecognizedFrame as e:
                    self._health.record_error("unrecognized")
                    log.warning("skipping frame: %s", e)
                    continue
                except ParseError as e:
                    self._health.record_error("parse")
                    log.warning("dropping update: %s (sample=%r)", e, raw[:200])
                    continue

                await self._dispatch(update)
        finally:
            self._state = LoopState.CLOSED
            log.info("update loop closed")

    async def _dispatch(self, update: Update) -> None:
        self._health.record_update(update.kind.value)

        if update.kind is UpdateKind.LEAGUE_DATA:
            self._apply_league_data(update.snapshot)
        elif update.kind is UpdateKind.GAME_DATA:
            await self._notify(update.snapshot)

    def _apply_league_data(self, snapshot: ReferenceSnapshot) -> None:
        self._store.merge(snapshot)
        counts = self._store.counts()
        self._health.set_store_counts(counts)
        log.info(
            "LeagueData | +teams=%d +subleagues=%d +divisions=%d +leagues=%d | store=%s",
            len(snapshot.teams), len(snapshot.subleagues),
            len(snapshot.divisions), len(snapshot.leagues), counts,
        )

    async def _notify(self, snapshot: LiveGameSnapshot) -> None:
        log.info("GameData | day=%s games=%d tomorrow=%d",
                 snapshot.sim.day if snapshot.sim else "?",
                 len(snapshot.schedule), len(snapshot.tomorrow_schedule))
        for callback in self._observers:
            try:
                result = callback(snapshot)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                log.exception("game data observer %r failed", callback)
