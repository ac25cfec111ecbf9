"""
Exceptions raised by the storage gateway and lookup services.
"""


class LexiconError(Exception):
    """Base class for lexical database errors."""


class StorageUnavailable(LexiconError):
    """The database file is missing, unreadable or not a SQLite database."""


class SchemaMismatch(LexiconError):
    """A relation required by the lookup engine is missing."""

    def __init__(self, table: str):
        super().__init__(f"Required table '{table}' not found in database")
        self.table = table
