"""Builders for every printable activity, including the six-activity pack."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from ..core.constants import DEFAULT_GRID_SIZE, FLASHCARDS_PER_PAGE, PACK_ORDER, PuzzleType
from ..core.exceptions import UnknownPuzzleTypeError
from ..core.models import (ActivitySettings, ActivityState, CrosswordLayout, WordPair, WordSearchResult,
                           coerce_word_list)
from ..data.normalization import clean_word
from ..utils.logger import get_logger
from .crossword import generate_crossword
from .shuffle import scramble_word, shuffle_array
from .word_search import generate_word_search


LOGGER = get_logger(__name__)

# Seed offsets keep the shuffled activities independent of each other.
MATCHING_SEED_OFFSET = 1
FILL_IN_SEED_OFFSET = 2

ACTIVITY_TITLES = {
    PuzzleType.WORDSEARCH: "Word Search",
    PuzzleType.CROSSWORD: "Crossword Puzzle",
    PuzzleType.MATCHING: "Matching Quiz",
    PuzzleType.ANAGRAM: "Word Scramble",
    PuzzleType.FILLIN: "Vocabulary Quiz",
    PuzzleType.FLASHCARDS: "Flashcards",
}


def definition_label(index: int) -> str:
    """Column-style label for a zero-based index: A..Z, AA, AB, ..."""

    label = ""
    index += 1
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


@dataclass
class MatchingActivity:
    words: List[WordPair]
    definitions: List[WordPair]
    answer_key: List[str]

    @property
    def labels(self) -> List[str]:
        return [definition_label(i) for i in range(len(self.definitions))]


@dataclass
class AnagramItem:
    scrambled: str
    definition: str
    answer: str


@dataclass
class AnagramActivity:
    items: List[AnagramItem]


@dataclass
class FillInItem:
    number: int
    definition: str
    answer: str


@dataclass
class FillInActivity:
    items: List[FillInItem]
    word_bank: List[str]


@dataclass
class FlashcardActivity:
    cards: List[WordPair]
    page: int = 1
    page_count: int = 1


Payload = Union[
    WordSearchResult, CrosswordLayout, MatchingActivity, AnagramActivity, FillInActivity, FlashcardActivity
]


@dataclass
class Activity:
    """One printable page worth of content."""

    puzzle_type: PuzzleType
    words: List[WordPair]
    payload: Payload
    seed: int
    metadata: dict = field(default_factory=dict)

    @property
    def title(self) -> str:
        return ACTIVITY_TITLES[self.puzzle_type]


# ----------------------------------------------------------------------
# Individual builders
# ----------------------------------------------------------------------
def build_matching(words: Any, seed: int) -> MatchingActivity:
    pairs = coerce_word_list(words)
    # shuffle input positions so repeated pairs still get distinct labels
    order = shuffle_array(list(range(len(pairs))), seed + MATCHING_SEED_OFFSET)
    definitions = [pairs[source] for source in order]
    position = {source: index for index, source in enumerate(order)}
    answer_key = [definition_label(position[source]) for source in range(len(pairs))]
    return MatchingActivity(words=pairs, definitions=definitions, answer_key=answer_key)


def build_anagrams(words: Any, seed: int) -> AnagramActivity:
    items = [
        AnagramItem(
            scrambled=scramble_word(clean_word(pair.word), seed + index),
            definition=pair.definition,
            answer=pair.word,
        )
        for index, pair in enumerate(coerce_word_list(words))
    ]
    return AnagramActivity(items=items)


def build_fill_in(words: Any, seed: int) -> FillInActivity:
    pairs = coerce_word_list(words)
    shuffled = shuffle_array(pairs, seed + FILL_IN_SEED_OFFSET)
    items = [
        FillInItem(number=number, definition=pair.definition, answer=pair.word)
        for number, pair in enumerate(shuffled, start=1)
    ]
    return FillInActivity(items=items, word_bank=[pair.word for pair in pairs])


def build_flashcards(words: Any, per_page: int = FLASHCARDS_PER_PAGE) -> List[FlashcardActivity]:
    """Split the list into card pages; an empty list still yields one page."""

    pairs = coerce_word_list(words)
    chunks = [pairs[i:i + per_page] for i in range(0, len(pairs), per_page)] or [[]]
    return [
        FlashcardActivity(cards=chunk, page=page, page_count=len(chunks))
        for page, chunk in enumerate(chunks, start=1)
    ]


# ----------------------------------------------------------------------
# Dispatch
# ----------------------------------------------------------------------
def build_activity(
    puzzle_type: Union[PuzzleType, str],
    words: Any,
    seed: int,
    grid_size: Optional[int] = None,
) -> List[Activity]:
    """Build the page(s) for one puzzle type.

    Flashcards may span several pages; every other type is a single page.
    ``PuzzleType.ALL`` is delegated to :func:`build_pack`.
    """

    try:
        kind = PuzzleType(puzzle_type)
    except ValueError as exc:
        raise UnknownPuzzleTypeError(f"Unknown puzzle type: {puzzle_type!r}") from exc
    if kind == PuzzleType.ALL:
        return build_pack(words, seed, grid_size=grid_size)

    pairs = coerce_word_list(words)
    if kind == PuzzleType.FLASHCARDS:
        return [
            Activity(kind, page.cards, page, seed, {"page": page.page, "page_count": page.page_count})
            for page in build_flashcards(pairs)
        ]

    payload: Payload
    metadata: dict = {}
    if kind == PuzzleType.WORDSEARCH:
        settings = ActivitySettings(grid_size=DEFAULT_GRID_SIZE if grid_size is None else grid_size)
        metadata["grid_size"] = settings.clamped_grid_size()
        payload = generate_word_search(pairs, metadata["grid_size"], seed)
    elif kind == PuzzleType.CROSSWORD:
        payload = generate_crossword(pairs, seed)
    elif kind == PuzzleType.MATCHING:
        payload = build_matching(pairs, seed)
    elif kind == PuzzleType.ANAGRAM:
        payload = build_anagrams(pairs, seed)
    else:
        payload = build_fill_in(pairs, seed)
    LOGGER.debug("Built %s activity for %s words", kind.value, len(pairs))
    return [Activity(kind, pairs, payload, seed, metadata)]


def build_pack(words: Any, seed: int, grid_size: Optional[int] = None) -> List[Activity]:
    """Build all six activities in print order."""

    pairs = coerce_word_list(words)
    pages: List[Activity] = []
    for kind in PACK_ORDER:
        pages.extend(build_activity(kind, pairs, seed, grid_size=grid_size))
    LOGGER.info("Built activity pack with %s pages", len(pages))
    return pages


def build_from_state(state: ActivityState) -> List[Activity]:
    return build_activity(
        state.puzzle_type,
        state.vocab_list,
        state.seed,
        grid_size=state.settings.grid_size,
    )


__all__ = [
    "Activity",
    "AnagramActivity",
    "AnagramItem",
    "FillInActivity",
    "FillInItem",
    "FlashcardActivity",
    "MatchingActivity",
    "ACTIVITY_TITLES",
    "build_activity",
    "build_anagrams",
    "build_fill_in",
    "build_flashcards",
    "build_from_state",
    "build_matching",
    "build_pack",
    "definition_label",
]
