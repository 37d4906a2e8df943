"""Command line entry point for browsing journal entries."""

import argparse
import json
import sys
from pathlib import Path

import structlog

from memojournal.core.errors import InvalidEntryNameError, MemoJournalError
from memojournal.journal import DataRepo, Entry
from memojournal.utils.logging import setup_logging

logger = structlog.get_logger()


def _cmd_list(args: argparse.Namespace) -> None:
    repo = DataRepo(args.data_dir) if args.data_dir else DataRepo.from_settings()
    for entry in repo.list_entries():
        try:
            title = entry.title()
        except InvalidEntryNameError:
            logger.warning("entry_name_invalid", entry=entry.basename)
            title = "-"
        print(f"{entry.basename}  {title}")


def _cmd_captions(args: argparse.Namespace) -> None:
    entry = Entry(Path(args.entry_dir))
    captions = entry.read_captions(compact=args.compact)
    if args.json:
        print(json.dumps([c.to_dict() for c in captions], ensure_ascii=False, indent=2))
        return
    for caption in captions:
        text = caption.text.replace("\n", " / ")
        print(f"{caption.start_time} --> {caption.end_time}  {text}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="memojournal",
        description="Browse voice-memo journal entries and their transcripts",
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: from MEMOJOURNAL_LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    list_parser = subparsers.add_parser("list", help="List entries, newest first")
    list_parser.add_argument(
        "--data-dir", type=Path, default=None,
        help="Data directory (default: from MEMOJOURNAL_DATA_DIR)",
    )
    list_parser.set_defaults(func=_cmd_list)

    captions_parser = subparsers.add_parser(
        "captions", help="Print an entry's captions"
    )
    captions_parser.add_argument("entry_dir", type=str, help="Entry directory path")
    captions_parser.add_argument(
        "--compact", action="store_true",
        help="Merge consecutive captions with identical text",
    )
    captions_parser.add_argument(
        "--json", action="store_true", help="Print captions as a JSON array",
    )
    captions_parser.set_defaults(func=_cmd_captions)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        args.func(args)
    except MemoJournalError as e:
        logger.error("command_failed", command=args.command, code=e.code)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    return 0

