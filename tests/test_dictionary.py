from dataclasses import fields

from lexilookup.db.connection import connect
from lexilookup.services.dictionary import (
    DictionaryService,
    Lookup,
    MeaningRow,
    SuggestionRow,
)


class TestExactMatch:
    def test_returns_every_sense_in_store_order(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            rows = service.find_exact(conn, "run")
        assert rows == [
            MeaningRow("run", "move swiftly on foot", "she ran to the store", "verb"),
            MeaningRow("run", "a score in baseball", "he hit a home run", "noun"),
        ]

    def test_no_match_is_empty_not_error(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            assert service.find_exact(conn, "zzzqx") == []

    def test_null_example_reads_as_empty(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            (row,) = service.find_exact(conn, "runway")
        assert row.example == ""


class TestSuggestions:
    def test_prefix_match(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            rows = service.find_suggestions(conn, "runni")
        words = {row.word for row in rows}
        assert "running" in words
        assert all(isinstance(row, SuggestionRow) for row in rows)

    def test_capped_at_five_and_ordered_by_rank(self, db_path, rw_conn):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            rows = service.find_suggestions(conn, "runn")
        assert len(rows) == 5

        ranked = rw_conn.execute(
            "SELECT word, rank FROM meanings_fts WHERE word MATCH 'runn*' ORDER BY rank LIMIT 5"
        ).fetchall()
        assert [row.word for row in rows] == [r[0] for r in ranked]
        ranks = [r[1] for r in ranked]
        assert ranks == sorted(ranks)

    def test_no_prefix_match(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            assert service.find_suggestions(conn, "zzzqx") == []


class TestSynonyms:
    def test_capped_at_five_in_store_order(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            synonyms = service.get_synonyms(conn, "run")
        assert synonyms == ["sprint", "dash", "race", "jog", "gallop"]

    def test_word_without_synonyms(self, db_path):
        service = DictionaryService(db_path)
        with connect(db_path) as conn:
            assert service.get_synonyms(conn, "apple") == []


class TestLookup:
    def test_exact_takes_precedence(self, db_path):
        lookup = DictionaryService(db_path).lookup("run")
        assert lookup.exact
        assert [e.row.word for e in lookup.entries] == ["run", "run"]
        assert all(len(e.synonyms) == 5 for e in lookup.entries)

    def test_query_is_lowercased(self, db_path):
        lookup = DictionaryService(db_path).lookup("APPLE")
        assert lookup.exact
        assert lookup.entries[0].row.word == "apple"

    def test_falls_back_to_suggestions(self, db_path):
        lookup = DictionaryService(db_path).lookup("Runni")
        assert not lookup.exact
        running = [e for e in lookup.entries if e.row.word == "running"]
        assert running[0].synonyms == ("jogging",)

    def test_nothing_found(self, db_path):
        lookup = DictionaryService(db_path).lookup("zzzqx")
        assert lookup.entries == []


def test_lookup_fields():
    assert [f.name for f in fields(Lookup)] == ["exact", "entries"]
