"""Greedy crossword layout.

Three phases:
  1. Placement: longest word centred across, then each further word hooked
     onto the first compatible letter found in row-major order.
  2. Crop: cut the canvas down to the placed letters plus one cell of padding.
  3. Numbering: distinct start cells numbered in reading order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..core.constants import CROP_PADDING, CROSSWORD_CANVAS_SIZE, Direction
from ..core.models import CrosswordLayout, PlacedCrosswordEntry, WordPair, coerce_word_list
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .grid import CanvasConfig, CrosswordCanvas
from .seeded_random import SeededRandom


LOGGER = get_logger(__name__)


@dataclass
class CrosswordConfig:
    seed: int
    canvas_size: int = CROSSWORD_CANVAS_SIZE
    padding: int = CROP_PADDING

    def to_canvas_config(self) -> CanvasConfig:
        return CanvasConfig(size=self.canvas_size)


@dataclass
class Placement:
    """A word fixed on the working canvas, in canvas coordinates."""

    word: str
    clue: str
    x: int
    y: int
    direction: Direction

    @property
    def end(self) -> Tuple[int, int]:
        if self.direction == Direction.ACROSS:
            return self.x + len(self.word) - 1, self.y
        return self.x, self.y + len(self.word) - 1


@dataclass
class PlacementReport:
    placements: List[Placement] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)


class CrosswordGenerator:
    """First-fit crossword builder.

    The search is greedy: the first legal intersection wins and a word that
    finds none is dropped, even when some other arrangement would fit it.
    """

    def __init__(self, config: CrosswordConfig) -> None:
        self.config = config

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Any) -> CrosswordLayout:
        rng = SeededRandom(self.config.seed)
        canvas = CrosswordCanvas(self.config.to_canvas_config())
        report = self._place_all(canvas, coerce_word_list(words), rng)

        if not report.placements:
            LOGGER.info("Crossword: no words placed")
            return CrosswordLayout(
                grid=[], placed_words=[], width=0, height=0, unplaced_words=report.unplaced
            )

        if LOGGER.isEnabledFor(logging.DEBUG):
            LOGGER.debug("Working canvas:\n%s", canvas.to_text())
        layout = self._crop(canvas, report.placements)
        layout.unplaced_words = report.unplaced
        self._assign_numbers(layout)
        LOGGER.info(
            "Crossword %sx%s: placed %s/%s words",
            layout.width,
            layout.height,
            len(layout.placed_words),
            len(layout.placed_words) + len(report.unplaced),
        )
        return layout

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_all(
        self, canvas: CrosswordCanvas, pairs: List[WordPair], rng: SeededRandom
    ) -> PlacementReport:
        report = PlacementReport()
        ordered = sorted(pairs, key=lambda pair: len(clean_word(pair.word)), reverse=True)
        for pair in ordered:
            term = clean_word(pair.word)
            placement: Optional[Placement] = None
            if term:
                if report.placements:
                    placement = self._find_intersection(canvas, term, pair.definition, rng)
                else:
                    placement = self._centre(canvas, term, pair.definition)
            if placement is None:
                LOGGER.debug("Dropped '%s': no legal placement", pair.word)
                report.unplaced.append(pair.word)
                continue
            canvas.place_word(placement.word, placement.x, placement.y, placement.direction)
            report.placements.append(placement)
            LOGGER.debug(
                "Placed %s %s at (%s,%s)",
                placement.word,
                placement.direction.value,
                placement.x,
                placement.y,
            )
        return report

    @staticmethod
    def _centre(canvas: CrosswordCanvas, term: str, clue: str) -> Optional[Placement]:
        start_x = canvas.center - len(term) // 2
        start_y = canvas.center
        if not canvas.fits_bounds(term, start_x, start_y, Direction.ACROSS):
            return None
        return Placement(term, clue, start_x, start_y, Direction.ACROSS)

    def _find_intersection(
        self, canvas: CrosswordCanvas, term: str, clue: str, rng: SeededRandom
    ) -> Optional[Placement]:
        for x, y in canvas.filled_cells():
            letter = canvas.letter(x, y)
            if letter not in term:
                continue
            indices = [index for index, char in enumerate(term) if char == letter]
            for index in indices:
                direction = self._infer_direction(canvas, x, y, rng)
                if direction is None:
                    continue
                if direction == Direction.ACROSS:
                    start_x, start_y = x - index, y
                else:
                    start_x, start_y = x, y - index
                if canvas.can_place(term, start_x, start_y, direction):
                    return Placement(term, clue, start_x, start_y, direction)
        return None

    @staticmethod
    def _infer_direction(
        canvas: CrosswordCanvas, x: int, y: int, rng: SeededRandom
    ) -> Optional[Direction]:
        horizontal = canvas.is_filled(x + 1, y) or canvas.is_filled(x - 1, y)
        vertical = canvas.is_filled(x, y + 1) or canvas.is_filled(x, y - 1)
        if horizontal and not vertical:
            return Direction.DOWN
        if vertical and not horizontal:
            return Direction.ACROSS
        if not horizontal and not vertical:
            return Direction.ACROSS if rng.next() > 0.5 else Direction.DOWN
        return None

    # ------------------------------------------------------------------
    # Crop & numbering
    # ------------------------------------------------------------------
    def _crop(self, canvas: CrosswordCanvas, placements: List[Placement]) -> CrosswordLayout:
        min_x = min(p.x for p in placements)
        min_y = min(p.y for p in placements)
        max_x = max(p.end[0] for p in placements)
        max_y = max(p.end[1] for p in placements)

        pad = self.config.padding
        origin_x, origin_y = min_x - pad, min_y - pad
        width = max_x - min_x + 1 + 2 * pad
        height = max_y - min_y + 1 + 2 * pad

        entries = [
            PlacedCrosswordEntry(
                word=p.word,
                clue=p.clue,
                x=p.x - origin_x,
                y=p.y - origin_y,
                direction=p.direction,
            )
            for p in placements
        ]
        return CrosswordLayout(
            grid=canvas.crop(origin_x, origin_y, width, height),
            placed_words=entries,
            width=width,
            height=height,
        )

    @staticmethod
    def _assign_numbers(layout: CrosswordLayout) -> None:
        starts = sorted({(entry.y, entry.x) for entry in layout.placed_words})
        numbers: Dict[Tuple[int, int], int] = {
            start: number for number, start in enumerate(starts, start=1)
        }
        for entry in layout.placed_words:
            entry.number = numbers[(entry.y, entry.x)]
        for (y, x), number in numbers.items():
            layout.grid[y][x].number = number


def generate_crossword(words: Any, seed: int) -> CrosswordLayout:
    """Lay out ``words`` as a crossword; unplaceable words are omitted."""

    return CrosswordGenerator(CrosswordConfig(seed=seed)).generate(words)


__all__ = ["CrosswordConfig", "CrosswordGenerator", "Placement", "generate_crossword"]
