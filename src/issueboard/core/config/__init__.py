"""
Configuration models and loading.

Pydantic models for the remote connection and display settings,
loaded once from the (layered) process environment.
"""

from .models import SUPPORTED_LOCALES, BoardConfig, RemoteConfig  # isort: skip
from .env import load_layered_env
from .loader import clear_cache, load_config

__all__ = [
    # Models
    "BoardConfig",
    "RemoteConfig",
    "SUPPORTED_LOCALES",
    # Loader functions
    "clear_cache",
    "load_config",
    "load_layered_env",
]
