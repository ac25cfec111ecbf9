import sqlite3

import pytest

from lexilookup.db.schema import SCHEMA_SQL

MEANINGS = [
    ("run", "move swiftly on foot", "she ran to the store", "verb"),
    ("run", "a score in baseball", "he hit a home run", "noun"),
    ("running", "the act of moving swiftly", "running is good exercise", "noun"),
    ("runner", "someone who runs", "the runner crossed the line", "noun"),
    ("runway", "a strip where planes take off", None, "noun"),
    ("apple", "fruit with red or green skin", "an apple a day", "noun"),
    ("ran", "past tense of run", "", "verb"),
]

SYNONYMS = [
    ("run", "sprint"),
    ("run", "dash"),
    ("run", "race"),
    ("run", "jog"),
    ("run", "gallop"),
    ("run", "hurry"),
    ("run", "scamper"),
    ("running", "jogging"),
]

# Prefix "runn" hits more index rows than the suggestion cap
EXTRA_INDEX = [
    ("runnel", "a small stream"),
    ("runners-up", "those finishing second"),
    ("runnier", "more runny"),
    ("runniest", "most runny"),
    ("runny", "tending to flow"),
]


def build_database(path, meanings=MEANINGS, synonyms=SYNONYMS, extra_index=EXTRA_INDEX):
    conn = sqlite3.connect(path)
    with conn:
        conn.executescript(SCHEMA_SQL)
        conn.executemany(
            "INSERT INTO meanings (word, definition, example, speech_part) VALUES (?, ?, ?, ?)",
            meanings,
        )
        conn.executemany(
            "INSERT OR IGNORE INTO words (word) VALUES (?)",
            [(m[0],) for m in meanings],
        )
        conn.executemany(
            "INSERT INTO synonyms (word, synonym) VALUES (?, ?)", synonyms
        )
        conn.executemany(
            "INSERT INTO meanings_fts (word, definition) VALUES (?, ?)",
            [(m[0], m[1]) for m in meanings] + list(extra_index),
        )
    conn.close()
    return path


@pytest.fixture
def db_path(tmp_path):
    return build_database(tmp_path / "Dictionary.db")


@pytest.fixture
def empty_db_path(tmp_path):
    return build_database(tmp_path / "Empty.db", [], [], [])


@pytest.fixture
def rw_conn(db_path):
    """Writable connection for reading expectations straight from the file."""
    conn = sqlite3.connect(db_path)
    yield conn
    conn.close()
