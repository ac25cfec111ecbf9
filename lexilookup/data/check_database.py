"""
Checks that a lexical database file is usable by the lookup engine.
"""

import argparse
import sqlite3
from pathlib import Path
from typing import Dict, Optional

from lexilookup.db.connection import (
    connect,
    count_rows,
    get_db_config,
    table_exists,
)
from lexilookup.db.schema import REQUIRED_TABLES
from lexilookup.errors import LexiconError

SAMPLE_WORDS = ["the", "run", "dictionary", "word", "definition"]


def check_database_schema(db_path: Path) -> Dict[str, object]:
    """Check that the database opens read-only and has every required table."""
    results = {"opens": False, "schema_valid": False, "missing_tables": []}

    try:
        with connect(db_path) as conn:
            results["opens"] = True
            missing = [t for t in REQUIRED_TABLES if not table_exists(conn, t)]
            results["missing_tables"] = missing
            results["schema_valid"] = not missing
    except (LexiconError, sqlite3.Error) as e:
        print(f"Error checking schema: {e}")

    return results


def check_database_content(db_path: Path) -> Dict[str, object]:
    """Check that the database has meanings and that common words resolve."""
    results = {
        "has_data": False,
        "meaning_count": 0,
        "synonym_count": 0,
        "sample_words_found": 0,
        "index_searchable": False,
    }

    try:
        with connect(db_path) as conn:
            count = count_rows(conn, "meanings")
            results["meaning_count"] = count
            results["has_data"] = count > 0
            results["synonym_count"] = count_rows(conn, "synonyms")

            if count > 0:
                placeholders = ",".join("?" * len(SAMPLE_WORDS))
                row = conn.execute(
                    f"SELECT COUNT(DISTINCT word) FROM meanings WHERE word IN ({placeholders})",
                    SAMPLE_WORDS,
                ).fetchone()
                results["sample_words_found"] = row[0]

                # Any stored headword should be findable through the index
                first = conn.execute("SELECT word FROM meanings LIMIT 1").fetchone()
                phrase = first["word"].replace('"', '""')
                hit = conn.execute(
                    "SELECT 1 FROM meanings_fts WHERE word MATCH ? LIMIT 1",
                    (f'"{phrase}"',),
                ).fetchone()
                results["index_searchable"] = hit is not None
    except Exception as e:
        print(f"Error checking content: {e}")

    return results


def run_all_checks(db_path: Optional[Path] = None) -> int:
    """Run all database checks, print a report and return an exit code."""
    if db_path is None:
        db_path = Path(get_db_config()["db_path"])

    print(f"Checking lexical database at {db_path}")
    print("=" * 50)

    schema_results = check_database_schema(db_path)
    content_results = (
        check_database_content(db_path)
        if schema_results["schema_valid"]
        else {"has_data": False, "meaning_count": 0, "synonym_count": 0,
              "sample_words_found": 0, "index_searchable": False}
    )

    all_passed = (
        schema_results["schema_valid"]
        and content_results["has_data"]
        and content_results["index_searchable"]
    )

    print("\nSchema Checks:")
    print(f"  ✓ Opens read-only: {schema_results['opens']}")
    print(f"  ✓ Schema valid: {schema_results['schema_valid']}")
    if schema_results["missing_tables"]:
        print(f"  ✗ Missing tables: {', '.join(schema_results['missing_tables'])}")

    print("\nContent Checks:")
    print(f"  ✓ Has data: {content_results['has_data']}")
    print(f"  ✓ Meaning count: {content_results['meaning_count']:,}")
    print(f"  ✓ Synonym count: {content_results['synonym_count']:,}")
    print(f"  ✓ Sample words found: {content_results['sample_words_found']}")
    print(f"  ✓ Index searchable: {content_results['index_searchable']}")

    print("\n" + "=" * 50)
    if all_passed:
        print("✓ All checks PASSED - Database is ready for lookups!")
        return 0
    else:
        print("✗ Some checks FAILED - Lookups may not work.")
        return 1


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check a lexical database file")
    parser.add_argument(
        "--db-path",
        type=str,
        default=None,
        help="Path to database file (defaults to DICTIONARY_DB_PATH)",
    )
    args = parser.parse_args(argv)
    return run_all_checks(Path(args.db_path) if args.db_path else None)


if __name__ == "__main__":
    raise SystemExit(main())
