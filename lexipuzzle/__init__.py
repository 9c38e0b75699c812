"""Printable vocabulary activity generator.

This package exposes the public API surface via:

- ``lexipuzzle.engine.word_search.generate_word_search``: seeded word search layout.
- ``lexipuzzle.engine.crossword.generate_crossword``: greedy crossword layout.
- ``lexipuzzle.engine.shuffle``: ``shuffle_array`` and ``scramble_word``.
- ``lexipuzzle.engine.activities``: matching, anagram, fill-in, flashcards and the full pack.
"""

from .core.models import ActivityState, CrosswordLayout, WordPair, WordSearchResult
from .data.normalization import clean_word
from .data.vocabulary import parse_vocabulary
from .engine.activities import build_activity, build_pack
from .engine.crossword import generate_crossword
from .engine.seeded_random import SeededRandom
from .engine.shuffle import scramble_word, shuffle_array
from .engine.word_search import generate_word_search

__all__ = [
    "ActivityState",
    "CrosswordLayout",
    "SeededRandom",
    "WordPair",
    "WordSearchResult",
    "build_activity",
    "build_pack",
    "clean_word",
    "generate_crossword",
    "generate_word_search",
    "parse_vocabulary",
    "scramble_word",
    "shuffle_array",
]

__version__ = "0.1.0"
