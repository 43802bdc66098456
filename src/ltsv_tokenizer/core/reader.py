"""Load LTSV files and hand them to the in-memory tokenizer.

Files are read whole; parsing itself never touches the filesystem.
"""

from __future__ import annotations

import asyncio
import gzip
import os
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from itertools import islice
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .collect import iter_errors, parse, parse_dicts, validate
from .models import LtsvError, Pair
from .tokenizer import RecordStream, tokenize


@asynccontextmanager
async def _open_binary(path: Path):
    """Open a file for async binary reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rb")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode="rb") as f:
            yield f


def _require_file(log_path: str | Path) -> Path:
    path = Path(log_path)
    if not path.is_file():
        raise FileNotFoundError(f"LTSV file not found: {path}")
    return path


def _resolve_max_workers(max_workers: int | None) -> int:
    if max_workers is not None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return max_workers

    env = os.getenv("LTSV_MAX_WORKERS")
    if env:
        try:
            value = int(env)
        except ValueError as exc:
            raise ValueError("LTSV_MAX_WORKERS must be an integer") from exc
        if value < 1:
            raise ValueError("LTSV_MAX_WORKERS must be >= 1")
        return value

    cpu_count = os.cpu_count() or 1
    return min(32, cpu_count)


async def read_bytes(log_path: str | Path) -> bytes:
    """Read a whole file (``.gz`` is decompressed)."""
    path = _require_file(log_path)
    async with _open_binary(path) as f:
        return await f.read()


async def tokenize_file(log_path: str | Path) -> RecordStream:
    """Read a file and return a lazy tokenizer over its contents."""
    return tokenize(await read_bytes(log_path))


async def parse_file(log_path: str | Path) -> list[list[Pair]]:
    """Read and parse a file; raises ``LtsvError`` on the first bad field."""
    return parse(await read_bytes(log_path))


async def parse_file_dicts(log_path: str | Path) -> list[dict[str, str]]:
    """Read and parse a file into one mapping per line."""
    return parse_dicts(await read_bytes(log_path))


async def validate_file(log_path: str | Path) -> None:
    """Read and validate a file; raises ``LtsvError`` on the first bad field."""
    validate(await read_bytes(log_path))


def _lint(data: bytes, limit: int | None) -> list[LtsvError]:
    return list(islice(iter_errors(data), limit))


async def lint_file(log_path: str | Path, *, limit: int | None = None) -> list[LtsvError]:
    """Return every error in a file (at most ``limit``)."""
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    return _lint(await read_bytes(log_path), limit)


async def lint_files(
    log_paths: Iterable[str | Path],
    *,
    limit: int | None = None,
    max_workers: int | None = None,
) -> dict[Path, list[LtsvError]]:
    """Lint several files, each scanned on its own worker thread.

    The result preserves the order of ``log_paths``.
    """
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    paths: Sequence[Path] = [_require_file(p) for p in log_paths]
    if not paths:
        return {}

    workers = min(_resolve_max_workers(max_workers), len(paths))
    loop = asyncio.get_running_loop()

    async def lint_one(path: Path, executor: ThreadPoolExecutor) -> list[LtsvError]:
        data = await read_bytes(path)
        return await loop.run_in_executor(executor, _lint, data, limit)

    executor = ThreadPoolExecutor(max_workers=workers)
    try:
        results = await asyncio.gather(*(lint_one(p, executor) for p in paths))
    finally:
        executor.shutdown(wait=True)

    return dict(zip(paths, results))
