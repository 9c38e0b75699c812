"""CLI entrypoint for the vocabulary activity generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lexipuzzle.core.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, PuzzleType
from lexipuzzle.core.exceptions import LexiPuzzleError
from lexipuzzle.core.models import ActivitySettings, ActivityState, WordPair, new_seed
from lexipuzzle.data.vocabulary import load_vocabulary_file, parse_vocabulary
from lexipuzzle.engine.activities import build_from_state
from lexipuzzle.io.export import activities_to_jsonable
from lexipuzzle.io.state_store import DEFAULT_STATE_DIR, StateStore
from lexipuzzle.utils.logger import configure_logging
from lexipuzzle.utils.pretty import render_pack


LOGGER = logging.getLogger(__name__)


def grid_size_arg(value: str) -> int:
    size = int(value)
    if not MIN_GRID_SIZE <= size <= MAX_GRID_SIZE:
        raise argparse.ArgumentTypeError(
            f"grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}"
        )
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate printable vocabulary activities from a word list",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="PAIR",
        help="Inline entries in 'Word: Definition' form",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one 'Word: Definition' entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--type",
        dest="puzzle_type",
        choices=[t.value for t in PuzzleType],
        default=None,
        help="Activity to generate; 'all' builds the full pack",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--grid-size",
        type=grid_size_arg,
        default=None,
        help=f"Word search grid size ({MIN_GRID_SIZE}-{MAX_GRID_SIZE}, default {DEFAULT_GRID_SIZE})",
    )
    parser.add_argument("--title", type=str, default=None, help="Activity title shown in the header")
    parser.add_argument("--institution", type=str, default=None, help="School name shown in the header")
    parser.add_argument("--course", type=str, default=None, help="Class / subject")
    parser.add_argument("--trimester", type=str, default=None, help="Term label")
    parser.add_argument("--groups", type=str, default=None, help="Groups label, e.g. '5A & 5B'")
    parser.add_argument("--answer-key", action="store_true", help="Show answers")
    parser.add_argument("--no-word-bank", action="store_true", help="Hide the word bank")
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )
    parser.add_argument("--output", type=Path, help="Optional output path")
    parser.add_argument(
        "--state-dir",
        type=Path,
        default=DEFAULT_STATE_DIR,
        help="Directory holding the current state snapshot",
    )
    parser.add_argument(
        "--load-state",
        action="store_true",
        help="Start from the saved snapshot; other flags override its fields",
    )
    parser.add_argument("--save-state", action="store_true", help="Save the resulting state snapshot")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> Optional[List[WordPair]]:
    """Return the words given on the command line, or None when none were given."""

    if not args.words and not args.words_file:
        return None
    pairs: List[WordPair] = []
    if args.words_file:
        pairs.extend(load_vocabulary_file(args.words_file))
    if args.words:
        pairs.extend(parse_vocabulary("\n".join(args.words)))
    return pairs


def resolve_state(args: argparse.Namespace, store: StateStore) -> ActivityState:
    state = (store.load() if args.load_state else None) or ActivityState()

    words = collect_words(args)
    if words is not None:
        state.vocab_list = words
    if args.puzzle_type is not None:
        state.puzzle_type = PuzzleType(args.puzzle_type)
    if args.seed is not None:
        state.seed = args.seed
    elif not args.load_state:
        state.seed = new_seed()
    if args.grid_size is not None:
        state.settings = ActivitySettings(
            grid_size=args.grid_size,
            scramble=state.settings.scramble,
            include_distractors=state.settings.include_distractors,
        )
    for name in ("title", "institution", "course", "trimester", "groups"):
        value = getattr(args, name)
        if value is not None:
            setattr(state, name, value)
    if args.answer_key:
        state.show_answer_key = True
    if args.no_word_bank:
        state.show_word_bank = False
    return state


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if not args.load_state and not (args.words or args.words_file):
        parser.error("provide --words / --words-file or --load-state")

    store = StateStore(args.state_dir)
    try:
        state = resolve_state(args, store)
        activities = build_from_state(state)
    except LexiPuzzleError as exc:
        LOGGER.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.save_state:
        store.save(state)

    if args.format == "json":
        payload = {
            "seed": state.seed,
            "puzzle_type": state.puzzle_type.value,
            "activities": activities_to_jsonable(activities),
        }
        output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    else:
        output_text = render_pack(activities, state)

    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
        LOGGER.info("Wrote %s page(s) to %s", len(activities), args.output)
    else:
        print(output_text)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
