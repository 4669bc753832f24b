"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional, Tuple
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


def _int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default


def _csv(name: str) -> Tuple[str, ...]:
    return tuple(v.strip() for v in os.getenv(name, '').split(',') if v.strip())


class Settings:
    """
    Probe engine settings.

    Every value can be overridden through the environment or config/.env.
    The probe windows bound a full run at
    ceil(servers / CONCURRENCY_LIMIT) * (PING_TIMEOUT_S + UDP_TIMEOUT_MS)
    in the worst case, so raising the timeouts slows down offline-heavy runs.
    """

    # ── ICMP ───────────────────────────────────────────────────────────────
    PING_TIMEOUT_S: int = _int('PING_TIMEOUT_S', 2)
    PING_COUNT:     int = _int('PING_COUNT', 2)

    # ── UDP (Steam A2S query) ──────────────────────────────────────────────
    UDP_TIMEOUT_MS:   int = _int('UDP_TIMEOUT_MS', 2000)
    STEAM_QUERY_PORT: int = _int('STEAM_QUERY_PORT', 27015)

    # ── Concurrency ────────────────────────────────────────────────────────
    CONCURRENCY_LIMIT: int = _int('CONCURRENCY_LIMIT', 8)

    # ── Roster / known infrastructure ──────────────────────────────────────
    # Empty means the built-in CS2 roster and Valve prefixes from config.servers
    SERVERS_FILE:   Optional[str]   = os.getenv('SERVERS_FILE') or None
    KNOWN_PREFIXES: Tuple[str, ...] = _csv('KNOWN_PREFIXES')

    # ── Geolocation ────────────────────────────────────────────────────────
    GEO_LOOKUP_URL: str = os.getenv('GEO_LOOKUP_URL', 'http://ip-api.com/json/')
    GEO_TIMEOUT_S:  int = _int('GEO_TIMEOUT_S', 5)

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = DATA_DIR / 'logs'

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if cls.PING_TIMEOUT_S <= 0 or cls.PING_COUNT <= 0:
            raise ValueError("PING_TIMEOUT_S and PING_COUNT must be positive")
        if cls.UDP_TIMEOUT_MS <= 0:
            raise ValueError("UDP_TIMEOUT_MS must be positive")
        if not 0 < cls.STEAM_QUERY_PORT < 65536:
            raise ValueError(f"STEAM_QUERY_PORT out of range: {cls.STEAM_QUERY_PORT}")
        if cls.CONCURRENCY_LIMIT < 1:
            raise ValueError("CONCURRENCY_LIMIT must be at least 1")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
