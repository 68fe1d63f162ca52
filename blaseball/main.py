#!/usr/bin/env python3
"""
Blaseball live feed: main entry point.

Connects to the Blaseball socket with a browser session cookie, keeps the
team/league index current and logs every live game update.

Usage:
    python -m blaseball.main '<cookie>'
    BLASEBALL_COOKIE='<cookie>' python -m blaseball.main
"""
import argparse
import asyncio
import logging
import logging.handlers
import signal
import sys

from blaseball.config import BLASEBALL_COOKIE, BLASEBALL_WS_URL, LOG_DIR, LOG_LEVEL
from blaseball.errors import TransportError
from blaseball.feed import UpdateLoop
from blaseball.health import HealthMonitor
from blaseball.models import LiveGameSnapshot
from blaseball.store import EntityStore
from blaseball.transport import BlaseballSocket

log = logging.getLogger("blaseball.main")


def setup_logging(level: str = LOG_LEVEL):
    """Log to stdout and to a size-capped feed.log under LOG_DIR."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)-18s] %(levelname)-5s  %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            # a feed left running for days must not fill the disk
            logging.handlers.RotatingFileHandler(
                LOG_DIR / "feed.log", maxBytes=50 * 1024 * 1024,
                backupCount=5, encoding="utf-8",
            ),
        ],
        force=True,
    )
    # Frame-level chatter from the socket library drowns the game view
    logging.getLogger("websockets").setLevel(logging.WARNING)


def log_game_data(snapshot: LiveGameSnapshot) -> None:
    """Console view of a live game snapshot, one line per game."""
    for game in snapshot.schedule:
        if game.game_complete:
            state = "FINAL"
        elif not game.game_start:
            state = "PREGAME"
        else:
            half = "top" if game.top_of_inning else "bot"
            state = (f"{half} {game.inning + 1} | "
                     f"{game.at_bat_balls}-{game.at_bat_strikes} "
                     f"outs={game.half_inning_outs} bases={list(game.bases_occupied)}")
        log.info("  %s %s %d @ %d %s %s | %s",
                 game.away_team_emoji, game.away_team_nickname, game.away_score,
                 game.home_score, game.home_team_nickname, game.home_team_emoji,
                 state)


async def run_feed(cookie: str, url: str = BLASEBALL_WS_URL) -> int:
    """Connect and run until the socket closes. Returns the exit status."""
    store = EntityStore()
    health = HealthMonitor()

    try:
        transport = await BlaseballSocket.connect(cookie, url)
    except TransportError as e:
        log.error("could not connect: %s", e)
        return 1
    health.set_ws_state("connected")

    feed = UpdateLoop(transport, store, observer=log_game_data, health=health)

    # Shutdown = close the socket; the blocked read ends the loop cleanly
    loop = asyncio.get_running_loop()
    closing: set[asyncio.Task] = set()

    def request_shutdown(sig: signal.Signals) -> None:
        log.info("%s received, closing feed", sig.name)
        task = asyncio.create_task(transport.close(), name="shutdown")
        closing.add(task)
        task.add_done_callback(closing.discard)

    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, request_shutdown, sig)

    heartbeat = asyncio.create_task(health.run(), name="health")
    feed_task = asyncio.create_task(feed.run(), name="update_loop")
    try:
        await feed_task
    except TransportError:
        return 1
    finally:
        heartbeat.cancel()
        await asyncio.gather(*closing, return_exceptions=True)
        await transport.close()
        health.set_ws_state("disconnected")
        health.write_report()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.remove_signal_handler(sig)

    log.info("feed stopped | store=%s", store.counts())
    return 0


def main():
    parser = argparse.ArgumentParser(description="Blaseball live feed client")
    parser.add_argument("cookie", nargs="?", default=BLASEBALL_COOKIE,
                        help="session Cookie header value (default: $BLASEBALL_COOKIE)")
    parser.add_argument("--url", default=BLASEBALL_WS_URL,
                        help="socket.io websocket URL")
    parser.add_argument("--log-level", default=LOG_LEVEL,
                        help="root log level (default: $LOG_LEVEL or INFO)")
    args = parser.parse_args()

    if not args.cookie:
        parser.error("a session cookie is required (argument or BLASEBALL_COOKIE)")

    setup_logging(args.log_level)
    sys.exit(asyncio.run(run_feed(args.cookie, args.url)))


if __name__ == "__main__":
    main()
