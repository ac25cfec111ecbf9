"""
Turns lookups into presentation-ready result records.

Scores are two-tier: 100 for exact hits and status messages, 80 for prefix
suggestions.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, Tuple

from lexilookup.services.dictionary import Entry, Lookup

EXACT_SCORE = 100
SUGGESTION_SCORE = 80
STATUS_SCORE = 100

PLUGIN_NAME = "Dictionary Plugin"


@dataclass(frozen=True)
class DictionaryResult:
    """Payload carried by data records for follow-up actions."""

    definition: str
    example: str
    speech_part: str
    synonyms: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ToolTip:
    title: str
    text: str


@dataclass(frozen=True)
class ResultRecord:
    title: str
    subtitle: str
    score: int
    icon_path: Optional[str] = None
    payload: Optional[DictionaryResult] = None
    tooltip: Optional[ToolTip] = None

    def to_dict(self) -> Dict:
        data = asdict(self)
        if self.payload is not None:
            data["payload"]["synonyms"] = list(self.payload.synonyms)
        return data


def _with_synonyms(text: str, synonyms: Tuple[str, ...]) -> str:
    if synonyms:
        return f"{text}\nSynonyms: " + ", ".join(synonyms)
    return text


def not_initialized(icon_path: Optional[str] = None) -> ResultRecord:
    return ResultRecord(
        title=f"{PLUGIN_NAME} Error",
        subtitle="Database not properly initialized. Check logs for details.",
        score=STATUS_SCORE,
        icon_path=icon_path,
    )


def prompt(icon_path: Optional[str] = None) -> ResultRecord:
    return ResultRecord(
        title=PLUGIN_NAME,
        subtitle="Type a word to search for its definition",
        score=STATUS_SCORE,
        icon_path=icon_path,
    )


def not_found(query: str, icon_path: Optional[str] = None) -> ResultRecord:
    return ResultRecord(
        title=f"No definition found for '{query}'",
        subtitle="Try a different word or check your spelling",
        score=STATUS_SCORE,
        icon_path=icon_path,
    )


def query_failed(message: str, icon_path: Optional[str] = None) -> ResultRecord:
    return ResultRecord(
        title="Error searching dictionary",
        subtitle=f"Error: {message}",
        score=STATUS_SCORE,
        icon_path=icon_path,
    )


def exact_record(entry: Entry, icon_path: Optional[str] = None) -> ResultRecord:
    row = entry.row
    return ResultRecord(
        title=row.word,
        subtitle=_with_synonyms(f"({row.speech_part}) {row.definition}", entry.synonyms),
        score=EXACT_SCORE,
        icon_path=icon_path,
        payload=DictionaryResult(
            row.definition, row.example, row.speech_part, entry.synonyms
        ),
        tooltip=ToolTip(
            row.word,
            f"Definition: {row.definition}\n"
            f"Example: {row.example}\n"
            f"Part of Speech: {row.speech_part}",
        ),
    )


def suggestion_record(entry: Entry, icon_path: Optional[str] = None) -> ResultRecord:
    row = entry.row
    return ResultRecord(
        title=f"Suggested: {row.word}",
        subtitle=_with_synonyms(row.definition, entry.synonyms),
        score=SUGGESTION_SCORE,
        icon_path=icon_path,
        # The index carries no example or part of speech
        payload=DictionaryResult(row.definition, "", "", entry.synonyms),
        tooltip=ToolTip(row.word, f"Definition: {row.definition}"),
    )


def format_lookup(
    lookup: Lookup, query: str, icon_path: Optional[str] = None
) -> List[ResultRecord]:
    """Build records for a finished lookup; ``query`` is the raw user text."""
    if not lookup.entries:
        return [not_found(query, icon_path)]
    build = exact_record if lookup.exact else suggestion_record
    return [build(entry, icon_path) for entry in lookup.entries]
