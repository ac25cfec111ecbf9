"""
Lexical lookup engine.

Plain function contract used by the host:

    handle = initialize("Dictionary.db", icon_path)
    records = query(handle, "run")
    copy(records[0].payload.definition)

``initialize`` and ``query`` never raise. A failed initialization yields a
disabled handle, and every query against it returns the fixed "not
initialized" record.
"""

import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, List, Optional, Union

from lexilookup.db.connection import connect, count_rows, verify_schema
from lexilookup.services import formatter
from lexilookup.services.clipboard import CopySink, copy_to_clipboard
from lexilookup.services.dictionary import DictionaryService
from lexilookup.services.formatter import ResultRecord
from lexilookup.services.theme import IconConfig, Theme, resolve_icon_path

logger = logging.getLogger(__name__)

VERSION = "1.0"


@dataclass(frozen=True)
class EngineHandle:
    db_path: str
    enabled: bool
    meaning_count: int = 0
    icon_path: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class ContextMenuItem:
    title: str
    glyph: str
    action: Callable[[], bool]


def initialize(
    db_path: Union[str, Path], icon_path: Optional[str] = None
) -> EngineHandle:
    """
    Open the store once, check the required tables and log how many
    meanings it holds. Any failure returns a disabled handle.
    """
    logger.info("Initializing")
    logger.info("Database path - %s", db_path)
    try:
        with connect(db_path) as conn:
            logger.info("Database connection successful")
            verify_schema(conn)
            count = count_rows(conn, "meanings")
            logger.info("Database contains %d meanings", count)
    except Exception as e:
        logger.error("Initialization failed - %s", e)
        return EngineHandle(str(db_path), False, icon_path=icon_path, error=str(e))

    logger.info("Initialization completed successfully")
    return EngineHandle(str(db_path), True, count, icon_path)


def query(handle: EngineHandle, text: Optional[str]) -> List[ResultRecord]:
    """Look up ``text`` and return records ready for display."""
    if not handle.enabled:
        return [formatter.not_initialized(handle.icon_path)]

    if text is None or not text.strip():
        return [formatter.prompt(handle.icon_path)]

    logger.info("Searching for word '%s'", text)
    try:
        lookup = DictionaryService(handle.db_path).lookup(text)
    except Exception as e:
        logger.error("Query failed - %s", e)
        return [formatter.query_failed(str(e), handle.icon_path)]

    results = formatter.format_lookup(lookup, text, handle.icon_path)
    logger.info("Query returned %d results", len(results))
    return results


def copy(definition: Optional[str], sink: Optional[CopySink] = None) -> bool:
    """Copy a definition; False when it is empty or the copy fails."""
    return copy_to_clipboard(definition, sink)


def load_context_menu(
    record: Optional[ResultRecord], sink: Optional[CopySink] = None
) -> List[ContextMenuItem]:
    """Actions for a selected record; status records have none."""
    if record is None or record.payload is None:
        return []

    definition = record.payload.definition
    return [
        ContextMenuItem(
            title="Copy Definition",
            glyph="\uE8C8",
            action=lambda: copy(definition, sink),
        )
    ]


def update_theme(handle: EngineHandle, theme: Theme, icons: IconConfig) -> EngineHandle:
    """Return a handle whose records use the icon for ``theme``."""
    return replace(handle, icon_path=resolve_icon_path(theme, icons))


def status_text(handle: EngineHandle) -> str:
    status = "Connected" if handle.enabled else "Not Connected"
    return f"{formatter.PLUGIN_NAME} v{VERSION}\nDatabase Status: {status}"
