"""Command line entry point: ``peperone new|show|list|tail|remove``."""
from __future__ import annotations

import argparse
import logging
import math
import sys
from typing import Callable, List, Optional

from peperone import __version__
from peperone.config.settings import Settings
from peperone.core.errors import TimerError, TimerNotFoundError, TimerStorageError
from peperone.core.formatting import format_elapsed
from peperone.core.store import DEFAULT_NAME, TimerStore
from peperone.runtime.watch import MAX_INTERVAL, MIN_INTERVAL, WatchOutcome, watch
from peperone.services.logging import setup_logging

log = logging.getLogger(__name__)

PROG = "peperone"

Handler = Callable[[TimerStore, Settings, argparse.Namespace], int]


def _add_name(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "name",
        nargs="?",
        default=DEFAULT_NAME,
        metavar="NAME",
        help=f"Timer name (default: {DEFAULT_NAME})",
    )


def _interval(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid interval: {value!r}") from None
    if not math.isfinite(seconds) or not MIN_INTERVAL <= seconds <= MAX_INTERVAL:
        raise argparse.ArgumentTypeError(
            f"interval must be between {MIN_INTERVAL} and {MAX_INTERVAL:.0f} seconds, got {value!r}"
        )
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description="Minimal stopwatch with timers stored on disk")
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")
    parser.add_argument("--dir", metavar="PATH", help="Base directory (default: $PEPERONE_DIR or ~/.config/peperone)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on stderr")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    new_parser = subparsers.add_parser("new", aliases=["start", "s"], help="Start timer")
    _add_name(new_parser)
    new_parser.add_argument("-f", "--force", action="store_true", help="Restart the timer if it already exists")
    new_parser.set_defaults(handler=_cmd_new)

    show_parser = subparsers.add_parser(
        "show", aliases=["cat", "info", "view", "status"], help="Show elapsed time"
    )
    _add_name(show_parser)
    show_parser.add_argument("-q", "--quiet", action="store_true", help="Print elapsed whole seconds only")
    show_parser.set_defaults(handler=_cmd_show)

    list_parser = subparsers.add_parser("list", aliases=["ls", "l"], help="List timers")
    list_parser.add_argument("-l", "--long", action="store_true", help="Include the elapsed time of each timer")
    list_parser.set_defaults(handler=_cmd_list)

    tail_parser = subparsers.add_parser("tail", aliases=["watch", "t"], help="Print elapsed time continuously")
    _add_name(tail_parser)
    tail_parser.add_argument(
        "-i", "--interval", type=_interval, metavar="SECONDS", help="Polling interval (default: 1 second)"
    )
    tail_parser.set_defaults(handler=_cmd_tail)

    remove_parser = subparsers.add_parser("remove", aliases=["rm", "r", "del"], help="Remove timer")
    _add_name(remove_parser)
    remove_parser.set_defaults(handler=_cmd_remove)

    return parser


# ----------------------------------------------------------------------
def _cmd_new(store: TimerStore, settings: Settings, args: argparse.Namespace) -> int:
    store.create(args.name, overwrite=True if args.force else None)
    return 0


def _cmd_show(store: TimerStore, settings: Settings, args: argparse.Namespace) -> int:
    timer = store.read(args.name)
    elapsed = timer.elapsed(store.now())
    print(elapsed if args.quiet else format_elapsed(elapsed))
    return 0


def _cmd_list(store: TimerStore, settings: Settings, args: argparse.Namespace) -> int:
    status = 0
    for name in store.list():
        if not args.long:
            print(name)
            continue
        try:
            timer = store.read(name)
        except TimerNotFoundError:
            log.debug("Timer %s removed while listing", name)
            continue
        except TimerStorageError as exc:
            print(f"{name}\t??:??")
            print(f"{PROG}: error: {exc}", file=sys.stderr)
            status = 1
            continue
        print(f"{name}\t{format_elapsed(timer.elapsed(store.now()))}")
    return status


def _cmd_tail(store: TimerStore, settings: Settings, args: argparse.Namespace) -> int:
    interval = args.interval if args.interval is not None else settings.tail_interval
    try:
        outcome = watch(store, args.name, interval=interval, emit=_print_flush)
    except KeyboardInterrupt:
        log.debug("tail interrupted by user")
        return 0
    if outcome is WatchOutcome.REMOVED:
        print(f"{PROG}: timer '{args.name}' no longer exists", file=sys.stderr)
    return 0


def _cmd_remove(store: TimerStore, settings: Settings, args: argparse.Namespace) -> int:
    store.remove(args.name)
    return 0


def _print_flush(line: str) -> None:
    print(line, flush=True)


# ----------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console_level = logging.DEBUG if args.verbose else logging.WARNING
    setup_logging(console_level=console_level)
    settings = Settings.load(args.dir)
    setup_logging(settings.log_dir, level=settings.log_level, console_level=console_level)
    store = TimerStore(settings.timers_dir, overwrite=settings.overwrite)
    log.debug("Running %s with settings %s", args.command, settings.to_dict())

    handler: Handler = args.handler
    try:
        return handler(store, settings, args)
    except TimerError as exc:
        log.debug("Command %s failed", args.command, exc_info=True)
        print(f"{PROG}: error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
