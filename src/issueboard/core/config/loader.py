"""
Configuration loading from the environment.

Reads the remote endpoint, public key and display options once per
process. Frontend-style VITE_ names are accepted as a fallback so the
same .env file can serve both.
"""

import logging
import os

from pydantic import ValidationError

from issueboard.core.reports.exceptions import ConfigError

from .models import BoardConfig, RemoteConfig

logger = logging.getLogger(__name__)

URL_VARS = ("SUPABASE_URL", "VITE_SUPABASE_URL")
KEY_VARS = ("SUPABASE_ANON_KEY", "VITE_SUPABASE_ANON_KEY")
TABLE_VAR = "ISSUEBOARD_TABLE"
LOCALE_VAR = "ISSUEBOARD_LOCALE"

# Loaded once per process; there is no runtime reconfiguration
_config_cache: BoardConfig | None = None


def _first_env(names: tuple[str, ...]) -> str | None:
    """Return the first non-empty value among the given variable names."""
    for name in names:
        if value := os.environ.get(name, "").strip():
            return value
    return None


def load_config(use_cache: bool = True) -> BoardConfig:
    """
    Build the board configuration from environment variables.

    Supported env vars:
        SUPABASE_URL / VITE_SUPABASE_URL - remote project URL (required)
        SUPABASE_ANON_KEY / VITE_SUPABASE_ANON_KEY - public key (required)
        ISSUEBOARD_TABLE - table name (default: bug_reports)
        ISSUEBOARD_LOCALE - zh-TW or en (default: zh-TW)

    Args:
        use_cache: Return the cached config if one was already loaded

    Returns:
        Validated BoardConfig

    Raises:
        ConfigError: If a required variable is missing or a value is invalid
    """
    global _config_cache

    if use_cache and _config_cache is not None:
        return _config_cache

    url = _first_env(URL_VARS)
    key = _first_env(KEY_VARS)
    missing = [names[0] for names, value in ((URL_VARS, url), (KEY_VARS, key)) if not value]
    if missing:
        raise ConfigError(
            f"Missing required environment variable(s): {', '.join(missing)}",
            missing=missing,
        )

    remote: dict[str, str] = {"url": url or "", "key": key or ""}
    if table := os.environ.get(TABLE_VAR):
        remote["table"] = table

    settings: dict[str, object] = {}
    if locale := os.environ.get(LOCALE_VAR):
        settings["locale"] = locale

    try:
        config = BoardConfig(remote=RemoteConfig(**remote), **settings)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(loc) for loc in first.get("loc", ()))
        raise ConfigError(f"Invalid configuration: {field}: {first.get('msg')}") from e

    logger.debug("Loaded config for %s (table=%s)", config.remote.url, config.remote.table)
    _config_cache = config
    return config


def clear_cache() -> None:
    """Forget the cached configuration (used by tests)."""
    global _config_cache
    _config_cache = None
