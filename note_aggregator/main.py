# note_aggregator/main.py
"""Command line entry point.

    note-aggregator "Projects/Alpha" --vault ~/notes
    note-aggregator Alpha --ignore-dir Archive/ --ignore-tag private --stdout
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from note_aggregator.core.errors import AggregationError, ClipboardWriteFailure
from note_aggregator.core.filters import IgnoreConfig
from note_aggregator.infrastructure.filesystem import atomic_write_text
from note_aggregator.logging_setup import SESSION_ID, install_global_exception_hooks, log, setup_logging
from note_aggregator.services.aggregate_service import aggregate_note, aggregate_to_clipboard
from note_aggregator.vault.repo import VaultRepository

EXIT_OK = 0
EXIT_NOTHING_TO_DO = 1
EXIT_CLIPBOARD = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="note-aggregator",
        description="Aggregate a note and every note it links to or shares a tag with.",
    )
    p.add_argument("note", help="Active note: vault-relative path (with or without .md) or basename")
    p.add_argument(
        "--vault",
        type=Path,
        default=Path.cwd(),
        help="Path to notes folder (vault)",
    )
    p.add_argument("--ignore-tag", action="append", default=[], metavar="TAG",
                   help="Tag to ignore (repeatable), with or without '#'")
    p.add_argument("--ignore-dir", action="append", default=[], metavar="PREFIX",
                   help="Path prefix to ignore (repeatable), e.g. Archive/")
    p.add_argument("--settings", type=Path, default=None,
                   help="Settings file holding the persisted ignore lists")
    p.add_argument("--no-settings", action="store_true",
                   help="Do not read the persisted ignore lists")
    p.add_argument("--save-settings", action="store_true",
                   help="Persist the merged ignore lists")

    out = p.add_mutually_exclusive_group()
    out.add_argument("--stdout", action="store_true", help="Print the report instead of copying it")
    out.add_argument("--output", type=Path, default=None, help="Write the report to a file")

    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def load_config(args: argparse.Namespace) -> IgnoreConfig:
    base = IgnoreConfig()
    store = None
    if not args.no_settings or args.save_settings:
        from note_aggregator.config import SettingsStore

        store = SettingsStore(args.settings)
        if not args.no_settings:
            base = store.load()

    config = base.merged(tags=args.ignore_tag, directories=args.ignore_dir)
    if args.save_settings and store is not None:
        store.save(config)
    return config


async def run(args: argparse.Namespace) -> int:
    if args.stdout or args.output:
        host = VaultRepository(args.vault)
    else:
        from note_aggregator.clipboard import write_clipboard_text

        host = VaultRepository(args.vault, clipboard_writer=write_clipboard_text)

    active = host.find_note(args.note)
    if active is None:
        log.warning("Active note not found: %s (vault=%s)", args.note, args.vault)

    # settings are only read or written once there is a note to aggregate
    config = load_config(args) if active is not None else IgnoreConfig()

    try:
        if args.stdout or args.output:
            try:
                result = await aggregate_note(host, active, config)
            except AggregationError as exc:
                host.notify_user(str(exc))
                raise
            if args.output:
                atomic_write_text(args.output, result.text + "\n")
                host.notify_user(f"Linked notes aggregated to {args.output}")
            else:
                sys.stdout.write(result.text + "\n")
        else:
            await aggregate_to_clipboard(host, active, config)
    except ClipboardWriteFailure:
        return EXIT_CLIPBOARD
    except AggregationError:
        return EXIT_NOTHING_TO_DO
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level))
    install_global_exception_hooks()
    log.debug("note-aggregator started, SID=%s vault=%s", SESSION_ID, args.vault)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
