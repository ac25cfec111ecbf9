import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from lexilookup.db.connection import connect

logger = logging.getLogger(__name__)

SYNONYM_LIMIT = 5
SUGGESTION_LIMIT = 5


@dataclass(frozen=True)
class MeaningRow:
    """One sense of a headword as stored in the meanings table."""

    word: str
    definition: str
    example: str
    speech_part: str


@dataclass(frozen=True)
class SuggestionRow:
    """A prefix hit from the full-text index (no example or part of speech)."""

    word: str
    definition: str


@dataclass(frozen=True)
class Entry:
    """A matched row together with the synonyms of its headword."""

    row: Union[MeaningRow, SuggestionRow]
    synonyms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Lookup:
    """
    Outcome of the two-phase resolution.

    ``exact`` tells which phase produced ``entries``; an empty ``entries``
    means neither phase matched.
    """

    exact: bool
    entries: List[Entry] = field(default_factory=list)


class DictionaryService:
    """Service for exact lookups, prefix suggestions and synonyms."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = db_path

    def find_exact(self, conn: sqlite3.Connection, term: str) -> List[MeaningRow]:
        """Get every meaning row stored for exactly this word."""
        rows = conn.execute(
            """
            SELECT m.word, m.definition, m.example, m.speech_part
            FROM meanings m
            WHERE m.word = ?
            """,
            (term,),
        ).fetchall()
        return [
            MeaningRow(
                word=row["word"],
                definition=row["definition"] or "",
                example=row["example"] or "",
                speech_part=row["speech_part"] or "",
            )
            for row in rows
        ]

    def find_suggestions(
        self, conn: sqlite3.Connection, term: str
    ) -> List[SuggestionRow]:
        """
        Search the full-text index for words starting with ``term``.

        Rows come back by ascending FTS5 rank (best match first); equal
        ranks keep the index's own order.
        """
        rows = conn.execute(
            """
            SELECT word, definition
            FROM meanings_fts
            WHERE word MATCH ?
            ORDER BY rank
            LIMIT ?
            """,
            (f"{term}*", SUGGESTION_LIMIT),
        ).fetchall()
        return [
            SuggestionRow(word=row["word"], definition=row["definition"] or "")
            for row in rows
        ]

    def get_synonyms(self, conn: sqlite3.Connection, word: str) -> List[str]:
        """Get up to five synonyms for a stored headword."""
        rows = conn.execute(
            "SELECT synonym FROM synonyms WHERE word = ? LIMIT ?",
            (word, SYNONYM_LIMIT),
        ).fetchall()
        return [row["synonym"] for row in rows]

    def _enrich(self, conn: sqlite3.Connection, rows) -> List[Entry]:
        return [Entry(row, tuple(self.get_synonyms(conn, row.word))) for row in rows]

    def lookup(self, text: str) -> Lookup:
        """
        Resolve a query: exact match first, prefix suggestions only when
        there is no exact row. Database errors propagate to the caller.
        """
        term = text.lower()
        with connect(self.db_path) as conn:
            exact_rows = self.find_exact(conn, term)
            if exact_rows:
                return Lookup(True, self._enrich(conn, exact_rows))

            suggestions = self.find_suggestions(conn, term.strip())
            return Lookup(False, self._enrich(conn, suggestions))
