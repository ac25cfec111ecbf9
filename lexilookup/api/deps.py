"""
Shared dependencies for routes.
"""

from typing import Optional

from lexilookup.db.connection import get_db_config
from lexilookup.engine import EngineHandle, initialize
from lexilookup.services.theme import get_icon_config, get_theme, resolve_icon_path

_engine: Optional[EngineHandle] = None


def init_engine() -> EngineHandle:
    """Initialize the engine from environment configuration."""
    global _engine
    config = get_db_config()
    icon_path = resolve_icon_path(get_theme(), get_icon_config())
    _engine = initialize(config["db_path"], icon_path)
    return _engine


def get_engine() -> EngineHandle:
    if _engine is None:
        return init_engine()
    return _engine
