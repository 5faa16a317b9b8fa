"""Entry point for `python -m cubefall` or the `cubefall` console script."""

import argparse
import logging
from pathlib import Path

from cubefall.app import App
from cubefall.storage import DEFAULT_DB_PATH


def main() -> None:
    parser = argparse.ArgumentParser(description="Cubefall — falling-note reflex game")
    parser.add_argument("--db-path", type=Path, default=DEFAULT_DB_PATH, help="Where the best difficulty is stored")
    parser.add_argument("--midi-port", type=int, default=None, help="MIDI input port index for a pad controller")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ...)")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    app = App(db_path=args.db_path, midi_port=args.midi_port)
    app.run()


if __name__ == "__main__":
    main()
