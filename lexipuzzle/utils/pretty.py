"""Plain-text page rendering for printable activities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from ..core.constants import Direction, PuzzleType
from ..core.models import ActivityState, CrosswordLayout, WordSearchResult

if TYPE_CHECKING:
    from ..engine.activities import (Activity, AnagramActivity, FillInActivity,
                                     FlashcardActivity, MatchingActivity)


PAGE_WIDTH = 72
PAGE_BREAK = "\f"
BLANK = "_" * 14
EMPTY_LIST_MESSAGE = "Add words to generate puzzle..."


def _rule(char: str = "-") -> str:
    return char * PAGE_WIDTH


def _columns(items: List[str], count: int) -> List[str]:
    if not items:
        return []
    width = max(len(item) for item in items) + 4
    return [
        "".join(f"{item:<{width}}" for item in items[i:i + count]).rstrip()
        for i in range(0, len(items), count)
    ]


# ----------------------------------------------------------------------
# Grids
# ----------------------------------------------------------------------
def format_word_search_grid(result: WordSearchResult, show_answers: bool = False) -> str:
    """Render the letter grid; with answers on, filler letters are lowercased."""

    answers = result.answer_cells() if show_answers else set()
    lines = []
    for y, row in enumerate(result.grid):
        cells = []
        for x, char in enumerate(row):
            if show_answers and (x, y) not in answers:
                char = char.lower()
            cells.append(char)
        lines.append(" ".join(cells))
    return "\n".join(lines)


def format_crossword_grid(layout: CrosswordLayout, show_answers: bool = False) -> str:
    """Render each cell three characters wide: clue number then letter slot."""

    lines = []
    for row in layout.grid:
        rendered = []
        for cell in row:
            if cell.is_empty():
                rendered.append("   ")
                continue
            number = f"{cell.number:>2}" if cell.number else "  "
            rendered.append(number + (cell.char if show_answers else "_"))
        lines.append("".join(rendered).rstrip())
    return "\n".join(lines)


# ----------------------------------------------------------------------
# Page sections
# ----------------------------------------------------------------------
def render_header(state: ActivityState, activity_title: str) -> List[str]:
    lines = [state.institution.upper().center(PAGE_WIDTH).rstrip()]
    lines.append(
        f"Class: {state.course}    Term: {state.trimester}    Group: {state.groups}"
    )
    lines.append(_rule())
    title = (state.title or activity_title).upper()
    lines.append(f"{title:<{PAGE_WIDTH - 22}}Name: {BLANK}")
    lines.append(f"{activity_title.upper():<{PAGE_WIDTH - 22}}Date: {BLANK}")
    lines.append(_rule("="))
    return lines


def _word_bank(words: Iterable[str], columns: int) -> List[str]:
    return ["Word Bank", _rule()] + _columns([f"[ ] {word}" for word in words], columns)


def _render_word_search(activity: "Activity", state: ActivityState) -> List[str]:
    result: WordSearchResult = activity.payload
    lines = format_word_search_grid(result, state.show_answer_key).splitlines()
    if state.show_word_bank:
        lines += [""] + _word_bank((pair.word for pair in activity.words), 3)
    return lines


def _render_crossword(activity: "Activity", state: ActivityState) -> List[str]:
    layout: CrosswordLayout = activity.payload
    lines = format_crossword_grid(layout, state.show_answer_key).splitlines()
    for direction, heading in ((Direction.ACROSS, "Across"), (Direction.DOWN, "Down")):
        lines += ["", heading, _rule()]
        lines += [f"{entry.number}. {entry.clue}" for entry in layout.clues(direction)]
    return lines


def _render_matching(activity: "Activity", state: ActivityState) -> List[str]:
    matching: MatchingActivity = activity.payload
    lines = ["Words", _rule()]
    for index, (pair, letter) in enumerate(zip(matching.words, matching.answer_key), start=1):
        answer = letter if state.show_answer_key else ""
        lines.append(f"{answer:_^4} {index}. {pair.word}")
    lines += ["", "Definitions", _rule()]
    for label, pair in zip(matching.labels, matching.definitions):
        lines.append(f"{label}. {pair.definition}")
    return lines


def _render_anagrams(activity: "Activity", state: ActivityState) -> List[str]:
    anagrams: AnagramActivity = activity.payload
    lines = []
    for item in anagrams.items:
        answer = item.answer if state.show_answer_key else BLANK
        lines.append(f"{' '.join(item.scrambled):>24}   {item.definition}")
        lines.append(f"{'':>24}   -> {answer}")
    return lines


def _render_fill_in(activity: "Activity", state: ActivityState) -> List[str]:
    fill_in: FillInActivity = activity.payload
    lines: List[str] = []
    if state.show_word_bank:
        lines += ["Word Bank", _rule(), "   ".join(fill_in.word_bank), ""]
    for item in fill_in.items:
        answer = item.answer if state.show_answer_key else BLANK
        lines.append(f"{item.number}. {item.definition}")
        lines.append(f"   {answer}")
    return lines


def _render_flashcards(activity: "Activity", state: ActivityState) -> List[str]:
    cards: FlashcardActivity = activity.payload
    lines = []
    border = ("- " * (PAGE_WIDTH // 2)).rstrip()
    for pair in cards.cards:
        lines.append(border)
        lines.append(pair.word.center(PAGE_WIDTH).rstrip())
        lines.append(pair.definition.center(PAGE_WIDTH).rstrip())
    if cards.cards:
        lines.append(border)
    if cards.page_count > 1:
        lines.append(f"Page {cards.page}/{cards.page_count}".rjust(PAGE_WIDTH))
    return lines


_RENDERERS = {
    PuzzleType.WORDSEARCH: _render_word_search,
    PuzzleType.CROSSWORD: _render_crossword,
    PuzzleType.MATCHING: _render_matching,
    PuzzleType.ANAGRAM: _render_anagrams,
    PuzzleType.FILLIN: _render_fill_in,
    PuzzleType.FLASHCARDS: _render_flashcards,
}


def render_page(activity: "Activity", state: Optional[ActivityState] = None) -> str:
    """Render one activity as a printable text page.

    Flashcard pages have no header so they can be cut out.
    """

    state = state or ActivityState()
    lines: List[str] = []
    if activity.puzzle_type != PuzzleType.FLASHCARDS:
        lines += render_header(state, activity.title) + [""]
    if not activity.words:
        lines.append(EMPTY_LIST_MESSAGE)
    else:
        lines += _RENDERERS[activity.puzzle_type](activity, state)
    return "\n".join(lines) + "\n"


def render_pack(activities: List["Activity"], state: Optional[ActivityState] = None) -> str:
    return PAGE_BREAK.join(render_page(activity, state) for activity in activities)


__all__ = [
    "format_crossword_grid",
    "format_word_search_grid",
    "render_header",
    "render_pack",
    "render_page",
]
