from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from ltsv_tokenizer.core.models import LtsvError
from ltsv_tokenizer.core.reader import lint_files, parse_file, parse_file_dicts, validate_file

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _positive_int(s: str) -> int:
    try:
        value = int(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError("must be an integer") from e
    if value <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return value


def _format_error(path: Path, e: LtsvError) -> str:
    return f"{path}:{e.line}:{e.start}-{e.end}: {e.kind.value} {e.text!r}"


async def _validate(paths: Sequence[Path]) -> int:
    status = EXIT_OK
    for path in paths:
        try:
            await validate_file(path)
        except LtsvError as e:
            print(_format_error(path, e), file=sys.stderr)
            status = EXIT_INVALID
        else:
            print(f"{path}: ok")
    return status


async def _parse(path: Path, *, as_dicts: bool) -> int:
    try:
        if as_dicts:
            records: list = await parse_file_dicts(path)
        else:
            records = [
                [{"label": p.label, "field": p.field} for p in row]
                for row in await parse_file(path)
            ]
    except LtsvError as e:
        print(_format_error(path, e), file=sys.stderr)
        return EXIT_INVALID

    json.dump(records, sys.stdout, ensure_ascii=False)
    print()
    return EXIT_OK


async def _lint(paths: Sequence[Path], *, limit: int | None, max_workers: int | None) -> int:
    results = await lint_files(paths, limit=limit, max_workers=max_workers)
    total = 0
    for path, errors in results.items():
        for e in errors:
            print(_format_error(path, e))
        total += len(errors)

    print(f"\nFound {total} errors in {len(results)} files.")
    return EXIT_INVALID if total else EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ltsv", description="Validate and parse LTSV files.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    v = sub.add_parser("validate", help="Report the first error of each file")
    v.add_argument("paths", nargs="+", type=Path)

    ps = sub.add_parser("parse", help="Print records as JSON")
    ps.add_argument("path", type=Path)
    ps.add_argument("--dicts", action="store_true", help="One {label: field} object per line")

    lt = sub.add_parser("lint", help="Report every error of each file")
    lt.add_argument("paths", nargs="+", type=Path)
    lt.add_argument("--max", dest="limit", type=_positive_int, default=None, help="Max errors per file")
    lt.add_argument("--workers", dest="max_workers", type=_positive_int, default=None)
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    LOGGER.debug("command=%s", args.command)

    try:
        if args.command == "validate":
            return asyncio.run(_validate(args.paths))
        if args.command == "parse":
            return asyncio.run(_parse(args.path, as_dicts=args.dicts))
        return asyncio.run(_lint(args.paths, limit=args.limit, max_workers=args.max_workers))
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    raise SystemExit(main())
