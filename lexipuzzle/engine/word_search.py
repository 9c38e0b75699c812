"""Word search layout: directional placement followed by a random letter fill."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..core.constants import (ALPHABET, MAX_PLACEMENT_ATTEMPTS,
                              WORD_SEARCH_DIRECTIONS, Bounds)
from ..core.models import PlacedWordSearchEntry, WordPair, WordSearchResult, coerce_word_list
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .seeded_random import SeededRandom


LOGGER = get_logger(__name__)


@dataclass
class WordSearchConfig:
    """Configuration values driving one word search generation."""

    size: int
    seed: int
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS

    def bounds(self) -> Bounds:
        return Bounds(rows=max(0, self.size), cols=max(0, self.size))


class WordSearchGenerator:
    """Places words on a square grid along the eight compass directions.

    Every call to :meth:`generate` builds its own grid and its own random
    stream from the configured seed, so repeated calls return identical
    results.
    """

    def __init__(self, config: WordSearchConfig) -> None:
        self.config = config
        self.bounds = config.bounds()

    def generate(self, words: Any) -> WordSearchResult:
        rng = SeededRandom(self.config.seed)
        grid: List[List[str]] = [["" for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)]
        placed: List[PlacedWordSearchEntry] = []
        unplaced: List[str] = []

        for pair in self._sorted_pairs(coerce_word_list(words)):
            term = clean_word(pair.word)
            if not term:
                LOGGER.debug("Skipping '%s': nothing left after normalization", pair.word)
                unplaced.append(pair.word)
                continue
            entry = self._place(grid, term, rng)
            if entry is None:
                LOGGER.debug("Dropped '%s' after %s attempts", term, self.config.max_attempts)
                unplaced.append(pair.word)
                continue
            placed.append(entry)

        self._fill_empty_cells(grid, rng)
        LOGGER.info(
            "Word search %sx%s: placed %s/%s words",
            self.bounds.rows,
            self.bounds.cols,
            len(placed),
            len(placed) + len(unplaced),
        )
        return WordSearchResult(
            grid=grid,
            placed_words=placed,
            size=self.bounds.rows,
            unplaced_words=unplaced,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    @staticmethod
    def _sorted_pairs(pairs: List[WordPair]) -> List[WordPair]:
        # sorted() is stable, so equal lengths keep input order
        return sorted(pairs, key=lambda pair: len(clean_word(pair.word)), reverse=True)

    def _place(
        self, grid: List[List[str]], term: str, rng: SeededRandom
    ) -> Optional[PlacedWordSearchEntry]:
        size = self.bounds.rows
        for _ in range(self.config.max_attempts):
            dx, dy = WORD_SEARCH_DIRECTIONS[rng.randrange(len(WORD_SEARCH_DIRECTIONS))]
            start_x = rng.randrange(size)
            start_y = rng.randrange(size)

            end_x = start_x + (len(term) - 1) * dx
            end_y = start_y + (len(term) - 1) * dy
            if not self.bounds.contains(end_y, end_x):
                continue
            if not self._fits(grid, term, start_x, start_y, (dx, dy)):
                continue

            for index, letter in enumerate(term):
                grid[start_y + index * dy][start_x + index * dx] = letter
            LOGGER.debug("Placed %s at (%s,%s) step (%s,%s)", term, start_x, start_y, dx, dy)
            return PlacedWordSearchEntry(word=term, x=start_x, y=start_y, dx=dx, dy=dy)
        return None

    @staticmethod
    def _fits(
        grid: List[List[str]], term: str, start_x: int, start_y: int, step: Tuple[int, int]
    ) -> bool:
        dx, dy = step
        for index, letter in enumerate(term):
            existing = grid[start_y + index * dy][start_x + index * dx]
            if existing and existing != letter:
                return False
        return True

    def _fill_empty_cells(self, grid: List[List[str]], rng: SeededRandom) -> None:
        for row in grid:
            for x, char in enumerate(row):
                if not char:
                    row[x] = ALPHABET[rng.randrange(len(ALPHABET))]


def generate_word_search(words: Any, size: int, seed: int) -> WordSearchResult:
    """Generate a ``size`` x ``size`` word search for ``words``.

    Words that cannot be placed within the attempt budget are left out of
    ``placed_words`` and listed in ``unplaced_words``; this never raises.

    Words that normalize to an empty string are skipped without drawing from
    the random stream. Lists containing such words therefore lay out
    differently from a generator that spends placement attempts on them.
    """

    return WordSearchGenerator(WordSearchConfig(size=size, seed=seed)).generate(words)


__all__ = ["WordSearchConfig", "WordSearchGenerator", "generate_word_search"]
