"""Single-snapshot persistence of the current activity state.

Only one document exists: ``current.json`` under
``local_db/state/``. Saving overwrites it; there is no history.
"""

from __future__ import annotations

import json
from dataclasses import fields
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.constants import PuzzleType
from ..core.exceptions import StateLoadError
from ..core.models import ActivitySettings, ActivityState, WordPair
from ..utils.logger import get_logger
from .export import word_pair_to_jsonable


LOGGER = get_logger(__name__)

DEFAULT_STATE_DIR = Path("local_db/state")
SNAPSHOT_NAME = "current.json"


def state_to_jsonable(state: ActivityState) -> Dict[str, Any]:
    return {
        "vocab_list": [word_pair_to_jsonable(pair) for pair in state.vocab_list],
        "puzzle_type": state.puzzle_type.value,
        "title": state.title,
        "institution": state.institution,
        "logo_url": state.logo_url,
        "course": state.course,
        "trimester": state.trimester,
        "groups": state.groups,
        "seed": state.seed,
        "show_word_bank": state.show_word_bank,
        "show_answer_key": state.show_answer_key,
        "settings": {
            "grid_size": state.settings.grid_size,
            "scramble": state.settings.scramble,
            "include_distractors": state.settings.include_distractors,
        },
    }


def state_from_jsonable(doc: Dict[str, Any]) -> ActivityState:
    """Rebuild a state, falling back to defaults for missing fields.

    Settings that cannot be converted raise ``TypeError`` or ``ValueError``.
    """

    defaults = ActivityState()
    vocab = doc.get("vocab_list")
    vocab_list = [
        WordPair.coerce(item) for item in (vocab if isinstance(vocab, list) else [])
    ]

    try:
        puzzle_type = PuzzleType(doc.get("puzzle_type", defaults.puzzle_type))
    except ValueError:
        LOGGER.warning("Unknown puzzle type in snapshot: %r", doc.get("puzzle_type"))
        puzzle_type = defaults.puzzle_type

    raw_settings = doc.get("settings") or {}
    if not isinstance(raw_settings, dict):
        raise TypeError(f"settings must be an object, got {type(raw_settings).__name__}")
    settings_kwargs: Dict[str, Any] = {}
    for f in fields(ActivitySettings):
        value = raw_settings.get(f.name)
        if value is None:
            continue
        # conversion errors surface through StateStore.load as StateLoadError
        settings_kwargs[f.name] = int(value) if f.name == "grid_size" else bool(value)

    text_fields = ("title", "institution", "course", "trimester", "groups")
    text_values = {name: doc.get(name) or getattr(defaults, name) for name in text_fields}

    return ActivityState(
        vocab_list=vocab_list,
        puzzle_type=puzzle_type,
        logo_url=doc.get("logo_url", defaults.logo_url),
        seed=int(doc.get("seed", defaults.seed)),
        show_word_bank=bool(doc.get("show_word_bank", defaults.show_word_bank)),
        show_answer_key=bool(doc.get("show_answer_key", defaults.show_answer_key)),
        settings=ActivitySettings(**settings_kwargs),
        **text_values,
    )


class StateStore:
    """Save and restore the one current :class:`ActivityState`."""

    def __init__(self, store_dir: Path | str = DEFAULT_STATE_DIR) -> None:
        self.store_dir = Path(store_dir)

    @property
    def path(self) -> Path:
        return self.store_dir / SNAPSHOT_NAME

    def save(self, state: ActivityState) -> Path:
        self.store_dir.mkdir(parents=True, exist_ok=True)
        doc = {
            "id": "current",
            "saved_at": datetime.now(timezone.utc).isoformat(),
            **state_to_jsonable(state),
        }
        self.path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("State saved: %s (%s words)", self.path, len(state.vocab_list))
        return self.path

    def load(self) -> Optional[ActivityState]:
        if not self.path.exists():
            LOGGER.debug("No saved state at %s", self.path)
            return None
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            raise StateLoadError(f"Cannot read state snapshot {self.path}: {exc}") from exc
        if not isinstance(doc, dict):
            raise StateLoadError(f"State snapshot {self.path} is not a JSON object")
        try:
            state = state_from_jsonable(doc)
        except (TypeError, ValueError) as exc:
            raise StateLoadError(f"Malformed state snapshot {self.path}: {exc}") from exc
        LOGGER.info("State loaded: %s (%s words)", self.path, len(state.vocab_list))
        return state

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
