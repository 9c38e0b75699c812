"""Shared constants and enumerations for the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Crossword word directions."""

    ACROSS = "across"
    DOWN = "down"


class PuzzleType(str, Enum):
    """All activity types that can be generated from a vocabulary list."""

    WORDSEARCH = "wordsearch"
    CROSSWORD = "crossword"
    MATCHING = "matching"
    ANAGRAM = "anagram"
    FILLIN = "fillin"
    FLASHCARDS = "flashcards"
    ALL = "all"


# Order matters: the word search draws an index into this tuple.
WORD_SEARCH_DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (0, 1),
    (1, 1),
    (1, -1),
    (-1, 0),
    (0, -1),
    (-1, -1),
    (-1, 1),
)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALLOWED_ACCENTS = "ÑÁÉÍÓÚÜ"

# Linear congruential generator parameters. Saved seeds depend on these.
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

MAX_PLACEMENT_ATTEMPTS = 100
CROSSWORD_CANVAS_SIZE = 40
CROP_PADDING = 1

MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 25
DEFAULT_GRID_SIZE = 15

FLASHCARDS_PER_PAGE = 10
PACK_ORDER: Tuple[PuzzleType, ...] = (
    PuzzleType.WORDSEARCH,
    PuzzleType.CROSSWORD,
    PuzzleType.MATCHING,
    PuzzleType.ANAGRAM,
    PuzzleType.FILLIN,
    PuzzleType.FLASHCARDS,
)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
