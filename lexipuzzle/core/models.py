"""Data models shared by the layout engine and the activity builders."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from .constants import (DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, Direction,
                        PuzzleType)


def new_word_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class WordPair:
    """A vocabulary entry as typed by the user."""

    id: str
    word: str
    definition: str = ""

    @classmethod
    def coerce(cls, item: Any) -> "WordPair":
        """Build a pair from a ``WordPair``, a mapping or a bare word string."""

        if isinstance(item, WordPair):
            return item
        if isinstance(item, Mapping):
            return cls(
                id=str(item.get("id") or new_word_id()),
                word=str(item.get("word") or ""),
                definition=str(item.get("definition") or ""),
            )
        return cls(id=new_word_id(), word="" if item is None else str(item))


def coerce_word_list(words: Any) -> List[WordPair]:
    """Return ``words`` as a list of pairs; anything but a list/tuple is empty."""

    if not isinstance(words, (list, tuple)):
        return []
    return [WordPair.coerce(item) for item in words]


@dataclass(frozen=True)
class PlacedWordSearchEntry:
    word: str
    x: int
    y: int
    dx: int
    dy: int

    def cells(self) -> List[Tuple[int, int]]:
        """Return the ``(x, y)`` coordinates covered by the word."""
        return [(self.x + k * self.dx, self.y + k * self.dy) for k in range(len(self.word))]


@dataclass
class WordSearchResult:
    grid: List[List[str]]
    placed_words: List[PlacedWordSearchEntry]
    size: int
    unplaced_words: List[str] = field(default_factory=list)

    def answer_cells(self) -> set:
        return {cell for entry in self.placed_words for cell in entry.cells()}


@dataclass
class GridCell:
    """A crossword cell in cropped coordinates."""

    x: int
    y: int
    char: Optional[str] = None
    number: Optional[int] = None

    def is_empty(self) -> bool:
        return self.char is None


@dataclass
class PlacedCrosswordEntry:
    word: str
    clue: str
    x: int
    y: int
    direction: Direction
    number: int = 0
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            if self.direction == Direction.ACROSS:
                self._cells = [(self.x + i, self.y) for i in range(len(self.word))]
            else:
                self._cells = [(self.x, self.y + i) for i in range(len(self.word))]
        return self._cells


@dataclass
class CrosswordLayout:
    grid: List[List[GridCell]]
    placed_words: List[PlacedCrosswordEntry]
    width: int
    height: int
    unplaced_words: List[str] = field(default_factory=list)

    def cell(self, x: int, y: int) -> GridCell:
        return self.grid[y][x]

    def clues(self, direction: Direction) -> List[PlacedCrosswordEntry]:
        """Entries running in ``direction`` ordered by clue number."""
        return sorted(
            (entry for entry in self.placed_words if entry.direction == direction),
            key=lambda entry: entry.number,
        )


def new_seed() -> int:
    """Return a fresh time-based seed in the 32-bit range."""
    return int(time.time() * 1000) % (2 ** 31)


@dataclass
class ActivitySettings:
    grid_size: int = DEFAULT_GRID_SIZE
    scramble: bool = True
    include_distractors: bool = False

    def clamped_grid_size(self) -> int:
        return max(MIN_GRID_SIZE, min(MAX_GRID_SIZE, int(self.grid_size)))


@dataclass
class ActivityState:
    """Everything needed to re-render the current set of activities."""

    vocab_list: List[WordPair] = field(default_factory=list)
    puzzle_type: PuzzleType = PuzzleType.WORDSEARCH
    title: str = "Vocabulary Activity"
    institution: str = ""
    logo_url: Optional[str] = None
    course: str = ""
    trimester: str = ""
    groups: str = ""
    seed: int = field(default_factory=new_seed)
    show_word_bank: bool = True
    show_answer_key: bool = False
    settings: ActivitySettings = field(default_factory=ActivitySettings)
