# src/nlp_primitives/preprocessing/utils/load_config.py

"""Load string-list JSON configs from a <data/> directory, cached by file mtime.

Used by the clitic registry (english_clitics.json) and tests needing an
isolated data dir.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS: tuple[str, ...] = ("DATA_DIR", "NLP_PRIMITIVES_DATA_DIR")
_PACKAGED_DATA_DIR = Path(__file__).resolve().parents[2] / "data"  # src/nlp_primitives/data


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when neither the env override nor the packaged 'data' dir exists."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON is not a list of strings."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str], tuple[str, ...]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# ─────────────────────────────────────────────────────────────────────────────
# Data dir resolution
# ─────────────────────────────────────────────────────────────────────────────

def _data_dir() -> Path:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    if not _PACKAGED_DATA_DIR.is_dir():
        raise DataDirNotFound(f"No 'data' directory found at {_PACKAGED_DATA_DIR}")
    return _PACKAGED_DATA_DIR


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map `file` to <data>/<file>.json and refuse anything outside the data dir."""
    data_dir = (base_dir or _data_dir()).resolve()

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read_string_list(path: Path, encoding: str) -> tuple[str, ...]:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"Cannot decode {path} as {encoding}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigTypeError(f"{path.name}: expected list, got {type(data).__name__}")
    bad = [x for x in data if not isinstance(x, str)]
    if bad:
        preview = ", ".join(type(x).__name__ for x in bad[:3])
        raise ConfigTypeError(
            f"{path.name}: list must contain only strings (first bad types: {preview})"
        )
    return tuple(data)


# ─────────────────────────────────────────────────────────────────────────────
# Public loader
# ─────────────────────────────────────────────────────────────────────────────

def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
) -> tuple[str, ...]:
    """Load <data>/<file>.json as a tuple of strings in file order, cached by mtime.

    Resolution order for the data dir: explicit `base_dir` > DATA_DIR /
    NLP_PRIMITIVES_DATA_DIR > packaged `nlp_primitives/data`.
    """
    path = _resolve_path(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, encoding)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    result = _read_string_list(path, encoding)
    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s", path.name)
    return result
