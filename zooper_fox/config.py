import logging
import os
from functools import lru_cache

logger = logging.getLogger(__name__)

CAPTURE_LOG_LEVEL_ENV_VAR = "ZOOPER_FOX_CAPTURE_LOG_LEVEL"
DEFAULT_CAPTURE_LOG_LEVEL = logging.DEBUG


@lru_cache(maxsize=1)
def get_capture_log_level() -> int:
    """
    Log level for exceptions captured by `try_`/`try_async`, read from
    ZOOPER_FOX_CAPTURE_LOG_LEVEL as a level name (e.g. "WARNING") or number.
    Cached, clear both this and `resolve_capture_log_level` after changing the env.
    """
    raw = os.environ.get(CAPTURE_LOG_LEVEL_ENV_VAR)
    if raw is None or raw.strip() == "":
        return DEFAULT_CAPTURE_LOG_LEVEL
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level in {CAPTURE_LOG_LEVEL_ENV_VAR}: {raw!r}")
    return level


@lru_cache(maxsize=1)
def resolve_capture_log_level() -> int:
    """
    Like `get_capture_log_level`, but never raises: an invalid setting is
    reported once with a warning and the default level is used instead.
    """
    try:
        return get_capture_log_level()
    except ValueError as e:
        logger.warning(
            f"{e}, using {logging.getLevelName(DEFAULT_CAPTURE_LOG_LEVEL)} instead"
        )
        return DEFAULT_CAPTURE_LOG_LEVEL
