"""CLI entrypoint for songshare-queries.

Provides a simple CLI using argparse. Uses logging instead of print for
diagnostics; query results go to stdout.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from typing import cast

from songshare_queries.frame import dataframe_summary, songs_dataframe

from .query_cli_process import QUERY_COMMANDS, QueryArgs, load_dataset, run_query


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="songshare-queries")
    subparsers = parser.add_subparsers(dest="command")

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--data",
        help=(
            "Path to a JSON array of songs (defaults to $SONGSHARE_SONGS_PATH, "
            "then the bundled example songs)"
        ),
    )
    source.add_argument(
        "--scan",
        help="Build the song list from audio file tags in a file or directory",
    )
    parser.add_argument(
        "-r",
        "--recursive",
        action="store_true",
        help="With --scan, recursively scan directories for audio files",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Log a small summary of the song list instead of the full table",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Output CSV instead of a table",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output for debugging",
    )

    for cmd in QUERY_COMMANDS:
        sub = subparsers.add_parser(cmd.name, help=cmd.help)
        if cmd.argument:
            sub.add_argument(cmd.argument, type=cmd.argument_type)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    # Default to quiet mode; enable INFO with --verbose
    logging.basicConfig(level=logging.WARNING)
    logger = logging.getLogger(__name__)

    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logger.setLevel(logging.INFO)
        logging.getLogger().setLevel(logging.INFO)

    try:
        songs = load_dataset(cast("QueryArgs", args))
    except (OSError, ValueError, RuntimeError) as exc:
        logger.error("Failed to load songs: %s", exc)
        raise SystemExit(1) from exc

    if args.summary:
        s = dataframe_summary(songs_dataframe(songs))
        logger.info("Summary: %s", s)
        return

    if args.command:
        run_query(cast("QueryArgs", args), songs, logger)
        return

    df = songs_dataframe(songs)
    if args.csv:
        # Print CSV to stdout; users can redirect as needed
        print(df.to_csv(index=False))  # noqa: T201
    else:
        print(df.to_string(index=False))  # noqa: T201


if __name__ == "__main__":
    main()
