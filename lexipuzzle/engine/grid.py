"""Working canvas for crossword placement."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.constants import CROSSWORD_CANVAS_SIZE, Bounds, Direction
from ..core.models import GridCell


@dataclass
class CanvasConfig:
    """Configuration values driving the oversized working canvas."""

    size: int = CROSSWORD_CANVAS_SIZE

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


class CrosswordCanvas:
    """Square letter buffer owned by a single crossword generation.

    Coordinates are ``(x, y)`` with the origin at the top-left. Reads outside
    the canvas return ``None`` so neighbour checks never need bounds guards.
    """

    def __init__(self, config: Optional[CanvasConfig] = None) -> None:
        self.config = config or CanvasConfig()
        self.bounds = self.config.bounds()
        self.cells: List[List[Optional[str]]] = [
            [None for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)
        ]

    @property
    def center(self) -> int:
        return self.bounds.rows // 2

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letter(self, x: int, y: int) -> Optional[str]:
        if not self.bounds.contains(y, x):
            return None
        return self.cells[y][x]

    def is_filled(self, x: int, y: int) -> bool:
        return self.letter(x, y) is not None

    def filled_cells(self) -> List[Tuple[int, int]]:
        """Return every filled ``(x, y)`` in row-major order."""
        return [
            (x, y)
            for y in range(self.bounds.rows)
            for x in range(self.bounds.cols)
            if self.cells[y][x] is not None
        ]

    @staticmethod
    def step(direction: Direction) -> Tuple[int, int]:
        return (1, 0) if direction == Direction.ACROSS else (0, 1)

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def fits_bounds(self, word: str, x: int, y: int, direction: Direction) -> bool:
        dx, dy = self.step(direction)
        end_x = x + dx * (len(word) - 1)
        end_y = y + dy * (len(word) - 1)
        return self.bounds.contains(y, x) and self.bounds.contains(end_y, end_x)

    def can_place(self, word: str, x: int, y: int, direction: Direction) -> bool:
        """Check bounds, overlaps and adjacency for a candidate placement.

        Overlapping letters must match. A cell that would be newly filled may
        not touch letters on either perpendicular side, and the cells just
        before the first letter and just after the last must be empty.
        """

        dx, dy = self.step(direction)
        # perpendicular neighbour offsets
        px, py = dy, dx
        last = len(word) - 1
        for index, letter in enumerate(word):
            cx, cy = x + dx * index, y + dy * index
            if not self.bounds.contains(cy, cx):
                return False
            existing = self.cells[cy][cx]
            if existing is not None and existing != letter:
                return False
            if existing is None and (
                self.is_filled(cx - px, cy - py) or self.is_filled(cx + px, cy + py)
            ):
                return False
            if index == 0 and self.is_filled(cx - dx, cy - dy):
                return False
            if index == last and self.is_filled(cx + dx, cy + dy):
                return False
        return True

    def place_word(self, word: str, x: int, y: int, direction: Direction) -> None:
        dx, dy = self.step(direction)
        for index, letter in enumerate(word):
            self.cells[y + dy * index][x + dx * index] = letter

    # ------------------------------------------------------------------
    # Cropping
    # ------------------------------------------------------------------
    def crop(self, origin_x: int, origin_y: int, width: int, height: int) -> List[List[GridCell]]:
        """Copy a window of the canvas into cells with window-local coordinates.

        The window may extend past the canvas edge; those cells are empty.
        """

        return [
            [
                GridCell(x=x, y=y, char=self.letter(origin_x + x, origin_y + y))
                for x in range(width)
            ]
            for y in range(height)
        ]

    def to_text(self) -> str:
        return "\n".join("".join(char or "." for char in row) for row in self.cells)
