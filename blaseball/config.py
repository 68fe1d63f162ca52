"""
Feed configuration: loaded from .env, never hardcoded.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# ── Session ──────────────────────────────────────────────────────────
# Raw Cookie header value of a logged-in browser session
BLASEBALL_COOKIE = os.getenv("BLASEBALL_COOKIE", "")

# ── Endpoints ────────────────────────────────────────────────────────
BLASEBALL_WS_URL = os.getenv(
    "BLASEBALL_WS_URL",
    "wss://blaseball.com/socket.io/?EIO=3&transport=websocket",
)

# ── Websocket ────────────────────────────────────────────────────────
WS_CLOSE_TIMEOUT_S = 5.0
WS_MAX_SIZE = 2**23                # 8 MB, league snapshots carry every team
DEFAULT_PING_INTERVAL_S = 25.0     # until the Engine.IO open packet says otherwise

# ── Health ───────────────────────────────────────────────────────────
DATA_DIR = Path(os.getenv("DATA_DIR", "data"))
HEALTH_FILE = DATA_DIR / "health.json"
HEARTBEAT_INTERVAL_S = int(os.getenv("HEARTBEAT_INTERVAL_S", "10"))
STALE_FEED_S = int(os.getenv("STALE_FEED_S", "120"))

# ── Logging ──────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
