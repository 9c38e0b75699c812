"""Parsing of ``Word: Definition`` vocabulary lists."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Set

from ..core.exceptions import VocabularyParseError
from ..core.models import WordPair, new_word_id
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

# Split on the first colon, dash, equals sign or comma.
PAIR_RE = re.compile(r"^([^:\-=,]+)[:\-=,](.+)$")


def parse_vocabulary(text: str) -> List[WordPair]:
    """Turn one-pair-per-line text into word pairs.

    Accepted separators are ``:``, ``-``, ``=`` and ``,``. Blank lines and
    lines starting with ``#`` are ignored, lines without a separator are
    skipped, and a word that repeats (case-insensitively) keeps its first
    definition.
    """

    pairs: List[WordPair] = []
    seen: Set[str] = set()
    for line_no, raw_line in enumerate((text or "").splitlines(), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        match = PAIR_RE.match(line)
        if not match:
            LOGGER.warning("Line %s has no word/definition separator: %r", line_no, line)
            continue
        word = match.group(1).strip()
        definition = match.group(2).strip()
        key = word.lower()
        if key in seen:
            LOGGER.debug("Skipping duplicate word '%s' on line %s", word, line_no)
            continue
        seen.add(key)
        pairs.append(WordPair(id=new_word_id(), word=word, definition=definition))

    if not pairs and (text or "").strip():
        raise VocabularyParseError(
            "No word/definition pairs found. Use 'Word: Definition' or 'Word - Definition'."
        )
    return pairs


def load_vocabulary_file(path: Path | str) -> List[WordPair]:
    """Read a UTF-8 vocabulary file and parse it."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise VocabularyParseError(f"Cannot read vocabulary file {source}: {exc}") from exc
    pairs = parse_vocabulary(text)
    LOGGER.info("Loaded %s word pairs from %s", len(pairs), source)
    return pairs


def format_vocabulary(pairs: Iterable[WordPair]) -> str:
    """Inverse of :func:`parse_vocabulary` for display in editors."""

    return "\n".join(f"{pair.word}: {pair.definition}" for pair in pairs)


__all__ = ["parse_vocabulary", "load_vocabulary_file", "format_vocabulary", "PAIR_RE"]
