"""
Debugging CLI: replay a board and inspect it.

Usage:
    python -m src.main board.yaml
    python -m src.main board.yaml --candidates --max-length 8 --verbose
"""

import argparse
import logging
import sys

from .board import BoardError, Conflict, candidates, new_grid, place, render_grid
from .config import load_config
from .utils.logger import configure_logging, get_logger


LOGGER = get_logger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Replay a Bananagrams board and print it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example board.yaml:
  max_word_length: 8
  board: |
    CAT H
    TAR[0] @ CAT[2] V
  entries:
    - text: DOG
      orientation: H
      start: [5, 0]
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML board configuration"
    )
    parser.add_argument(
        "--candidates", "-c",
        action="store_true",
        help="List the positions where a new word could be attached"
    )
    parser.add_argument(
        "--max-length",
        type=int,
        help="Override the longest word considered by the candidate search"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every placement"
    )

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config)
        entries = config.resolved_entries()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.max_length is not None:
        config.max_word_length = args.max_length

    grid = new_grid(config.grid_size())
    for entry in entries:
        try:
            result = place(entry, grid)
        except BoardError as e:
            print(f"Cannot place '{entry.text}': {e}", file=sys.stderr)
            return 1
        if isinstance(result, Conflict):
            print(f"Conflict placing '{entry.text}': {result.describe()}", file=sys.stderr)
            return 1

    LOGGER.info("Replayed %d entries on a grid of size %d", len(entries), grid.size)
    print(render_grid(grid))

    if args.candidates:
        found = candidates(config.sweep_length, grid)
        print()
        print(f"=== Candidates ({len(found)}) ===")
        for candidate in found:
            letters_on_line = " ".join(
                f"{offset}:{char}" for offset, char in candidate.chars
            )
            print(
                f"{tuple(candidate.yx)} {candidate.orientation.value} "
                f"bounds={candidate.bounds} letters={letters_on_line}"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
