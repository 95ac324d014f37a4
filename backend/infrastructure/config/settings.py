import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load `.env` once for the infrastructure layer. The project root `.env` is the
# primary development config and must win over stale shell exports.
load_dotenv(override=True)


def _get_env_int(key: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be an integer, got {raw}") from exc


def _get_env_float(key: str, default: Optional[float]) -> Optional[float]:
    raw = os.getenv(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Environment variable {key} must be a float, got {raw}") from exc


# ===== Paths =====
#
# Runtime artifacts (the watched list file) live under `<repo>/files/`,
# never under `<repo>/backend/`.

INFRASTRUCTURE_DIR = Path(__file__).resolve().parent.parent  # backend/infrastructure/
_BACKEND_DIR = INFRASTRUCTURE_DIR.parent  # backend/

# Prefer the repo root in the source layout; fall back to cwd for installed
# packages / containers.
if _BACKEND_DIR.name == "backend":
    PROJECT_ROOT = _BACKEND_DIR.parent
else:
    PROJECT_ROOT = Path.cwd()

RUNTIME_ROOT = Path(os.getenv("RUNTIME_ROOT", PROJECT_ROOT / "files")).expanduser()


# ===== OMDb catalog =====

OMDB_BASE_URL = os.getenv("OMDB_BASE_URL", "https://www.omdbapi.com/").strip()
OMDB_API_KEY = os.getenv("OMDB_API_KEY", "").strip()
# Unset means no client-side timeout: a hung request stays loading until a
# newer input supersedes it.
OMDB_TIMEOUT_S = _get_env_float("OMDB_TIMEOUT_S", None)


# ===== Watched list persistence =====

WATCHED_STORE_PATH = Path(
    os.getenv("WATCHED_STORE_PATH", RUNTIME_ROOT / "watched.json")
).expanduser()
WATCHED_STORAGE_KEY = os.getenv("WATCHED_STORAGE_KEY", "watched").strip() or "watched"
