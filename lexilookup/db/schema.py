"""
Schema of the precompiled lexical database.

The engine never creates these tables; the database is produced by a separate
build step. Table names and column order are the compatibility contract for
existing Dictionary.db files, so they are kept here for verification and for
building fixture databases.
"""

REQUIRED_TABLES = ("meanings_fts", "meanings", "synonyms", "words")

SCHEMA_SQL = """
-- Headwords, one row per stored spelling
CREATE TABLE IF NOT EXISTS words (
    word TEXT PRIMARY KEY                  -- Lowercase headword
);

-- One row per sense; a word may have several (noun, verb, ...)
CREATE TABLE IF NOT EXISTS meanings (
    word TEXT NOT NULL,
    definition TEXT NOT NULL,
    example TEXT,
    speech_part TEXT
);

-- Flat word -> synonym relation
CREATE TABLE IF NOT EXISTS synonyms (
    word TEXT NOT NULL,
    synonym TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_meanings_word ON meanings(word);
CREATE INDEX IF NOT EXISTS idx_synonyms_word ON synonyms(word);

-- Full-text search index (SQLite FTS5) used for prefix suggestions
CREATE VIRTUAL TABLE IF NOT EXISTS meanings_fts USING fts5(
    word,
    definition
);
"""
