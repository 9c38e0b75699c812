"""JSON-ready serialization of generated activities."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.models import CrosswordLayout, PlacedCrosswordEntry, WordPair, WordSearchResult
from ..engine.activities import (Activity, AnagramActivity, FillInActivity, FlashcardActivity,
                                 MatchingActivity)


def word_pair_to_jsonable(pair: WordPair) -> Dict[str, str]:
    return {"id": pair.id, "word": pair.word, "definition": pair.definition}


def word_search_to_jsonable(result: WordSearchResult) -> Dict[str, Any]:
    return {
        "size": result.size,
        "grid": [list(row) for row in result.grid],
        "placed_words": [
            {"word": entry.word, "x": entry.x, "y": entry.y, "dx": entry.dx, "dy": entry.dy}
            for entry in result.placed_words
        ],
        "unplaced_words": list(result.unplaced_words),
    }


def _crossword_entry(entry: PlacedCrosswordEntry) -> Dict[str, Any]:
    return {
        "number": entry.number,
        "word": entry.word,
        "clue": entry.clue,
        "x": entry.x,
        "y": entry.y,
        "direction": entry.direction.value,
    }


def crossword_to_jsonable(layout: CrosswordLayout) -> Dict[str, Any]:
    return {
        "width": layout.width,
        "height": layout.height,
        "grid": [
            [{"char": cell.char, "x": cell.x, "y": cell.y, "number": cell.number} for cell in row]
            for row in layout.grid
        ],
        "placed_words": [_crossword_entry(entry) for entry in layout.placed_words],
        "unplaced_words": list(layout.unplaced_words),
    }


def _payload_to_jsonable(payload: Any) -> Dict[str, Any]:
    if isinstance(payload, WordSearchResult):
        return word_search_to_jsonable(payload)
    if isinstance(payload, CrosswordLayout):
        return crossword_to_jsonable(payload)
    if isinstance(payload, MatchingActivity):
        return {
            "words": [word_pair_to_jsonable(pair) for pair in payload.words],
            "definitions": [
                {"label": label, "definition": pair.definition}
                for label, pair in zip(payload.labels, payload.definitions)
            ],
            "answer_key": list(payload.answer_key),
        }
    if isinstance(payload, AnagramActivity):
        return {"items": [item.__dict__ for item in payload.items]}
    if isinstance(payload, FillInActivity):
        return {
            "items": [item.__dict__ for item in payload.items],
            "word_bank": list(payload.word_bank),
        }
    if isinstance(payload, FlashcardActivity):
        return {
            "page": payload.page,
            "page_count": payload.page_count,
            "cards": [word_pair_to_jsonable(pair) for pair in payload.cards],
        }
    raise TypeError(f"Unsupported activity payload: {type(payload).__name__}")


def activity_to_jsonable(activity: Activity) -> Dict[str, Any]:
    return {
        "type": activity.puzzle_type.value,
        "title": activity.title,
        "seed": activity.seed,
        "metadata": dict(activity.metadata),
        "payload": _payload_to_jsonable(activity.payload),
    }


def activities_to_jsonable(activities: List[Activity]) -> List[Dict[str, Any]]:
    return [activity_to_jsonable(activity) for activity in activities]


__all__ = [
    "activities_to_jsonable",
    "activity_to_jsonable",
    "crossword_to_jsonable",
    "word_pair_to_jsonable",
    "word_search_to_jsonable",
]
