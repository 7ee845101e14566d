"""Entry point for `python -m keylane` or the `keylane` console script."""

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from keylane.config import DEMO_NOTES
from keylane.notes import NoteSet
from keylane.session import GameSession
from keylane.settings import DEFAULT_SETTINGS_PATH, load_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="KeyLane — four-lane rhythm game (keys D F J K)")
    parser.add_argument("--settings", type=Path, default=DEFAULT_SETTINGS_PATH, help="Settings JSON file")
    parser.add_argument("--max-score", type=float, help="Score for a perfect hit")
    parser.add_argument("--duration", type=float, help="Seconds a note takes to cross the screen")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every hit and miss")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(args.settings)
    if args.max_score is not None:
        settings = replace(settings, max_score_per_hit=args.max_score)
    if args.duration is not None:
        settings = replace(settings, song_duration_s=args.duration)

    from keylane.app import App

    session = GameSession.from_settings(settings, NoteSet.from_pairs(DEMO_NOTES))
    App(session, target_y=settings.target_y).run()


if __name__ == "__main__":
    main()
