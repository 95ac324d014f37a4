import os

from dotenv import load_dotenv

# Service-side settings: HTTP/runtime switches and app behaviour.
# Infrastructure env/path settings live under `backend/infrastructure/config/`.
load_dotenv(override=True)


def _get_env_int(key: str, default: int) -> int:
    """Read an integer env var, falling back to ``default`` when unset."""
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer, got {raw}") from exc


def _get_env_bool(key: str, default: bool) -> bool:
    """Read a boolean env var; accepts true/false/1/0/yes/no/on."""
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    return raw.lower() in {"1", "true", "y", "yes", "on"}


# ===== FastAPI / Uvicorn =====

SERVER_HOST = os.getenv("SERVER_HOST", "127.0.0.1")
SERVER_PORT = _get_env_int("SERVER_PORT", 8000)
SERVER_RELOAD = _get_env_bool("SERVER_RELOAD", False)
SERVER_LOG_LEVEL = os.getenv("SERVER_LOG_LEVEL", "info")

# The movie session lives in process memory, so the server runs one worker.
UVICORN_CONFIG = {
    "host": SERVER_HOST,
    "port": SERVER_PORT,
    "reload": SERVER_RELOAD,
    "log_level": SERVER_LOG_LEVEL,
    "workers": 1,
}

# ===== Logging =====

LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper()

# ===== Movie search =====

APP_TITLE = os.getenv("APP_TITLE", "usePopcorn").strip() or "usePopcorn"

_raw_min_query_length = _get_env_int("SEARCH_MIN_QUERY_LENGTH", 3)
if _raw_min_query_length < 1:
    raise ValueError("SEARCH_MIN_QUERY_LENGTH must be a positive integer")
SEARCH_MIN_QUERY_LENGTH = _raw_min_query_length
