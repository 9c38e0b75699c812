"""Custom exception hierarchy for the activity glue layers.

The layout engine itself never raises for bad input; these cover parsing,
persistence and dispatch around it.
"""


class LexiPuzzleError(Exception):
    """Base exception for activity generation failures."""


class VocabularyParseError(LexiPuzzleError):
    """Raised when vocabulary text contains no usable word/definition pairs."""


class StateLoadError(LexiPuzzleError):
    """Raised when the saved state snapshot cannot be read."""


class UnknownPuzzleTypeError(LexiPuzzleError):
    """Raised when an activity is requested for an unsupported puzzle type."""
