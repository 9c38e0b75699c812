"""Word normalization shared by every puzzle generator."""

from __future__ import annotations

import re

from ..core.constants import ALLOWED_ACCENTS

WORD_RE = re.compile(f"[^A-Z{ALLOWED_ACCENTS}]")


def clean_word(text: str) -> str:
    """Return ``text`` uppercased with everything but letters removed.

    Only ``A-Z`` and the Spanish accented capitals ``Ñ Á É Í Ó Ú Ü`` survive,
    so spaces, punctuation and digits disappear: ``"Café-123"`` -> ``"CAFÉ"``.
    """

    if not text:
        return ""
    return WORD_RE.sub("", str(text).upper())


__all__ = ["clean_word", "WORD_RE"]
