"""CLI entrypoints for mylint commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List

from .config import ConfigError
from .logging import configure_logging
from .models import FileOutcome
from .orchestrator import STATUS_UPDATED, Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_paths_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Markdown files or directories to lint (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mylint",
        description="Normalise math delimiters and heading/list spacing in Markdown files.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    fix_parser = subparsers.add_parser(
        "fix",
        help="Rewrite documents in place.",
    )
    _add_verbose_option(fix_parser, suppress_default=True)
    _add_paths_argument(fix_parser)
    fix_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes as a diff without writing files.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Exit non-zero if any document would be rewritten.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_paths_argument(check_parser)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for mylint commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    orchestrator = Orchestrator()

    if args.command == "fix":
        dry_run = bool(getattr(args, "dry_run", False))
        outcomes = _run(parser, lambda: orchestrator.run_fix(args.paths, dry_run=dry_run))
        changed = [outcome for outcome in outcomes if outcome.status == STATUS_UPDATED]
        for outcome in changed:
            if dry_run:
                print(outcome.diff or "(no diff)")
            else:
                print(f"Updated {_relativize(outcome.path)}")
        print(_summary(outcomes, changed, dry_run=dry_run))
    elif args.command == "check":
        outcomes = _run(parser, lambda: orchestrator.run_check(args.paths))
        changed = [outcome for outcome in outcomes if outcome.status == STATUS_UPDATED]
        for outcome in changed:
            print(f"Would reformat {_relativize(outcome.path)}")
        if changed:
            parser.exit(1, f"{len(changed)} document(s) would be reformatted\n")
        print(f"{len(outcomes)} document(s) already normalised")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _run(
    parser: argparse.ArgumentParser, action: Callable[[], List[FileOutcome]]
) -> List[FileOutcome]:
    try:
        return action()
    except FileNotFoundError as exc:
        parser.exit(1, f"{exc}\n")
    except ConfigError as exc:
        parser.exit(1, f"mylint failed: {exc}\n")


def _summary(outcomes: List[FileOutcome], changed: List[FileOutcome], *, dry_run: bool) -> str:
    if not changed:
        return "No changes"
    verb = "would change" if dry_run else "changed"
    return f"{len(changed)} of {len(outcomes)} document(s) {verb}"


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
