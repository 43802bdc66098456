from __future__ import annotations

from pathlib import Path

import pytest

from ltsv_tokenizer.core.models import ErrorKind, LtsvError, Pair
from ltsv_tokenizer.core.reader import (
    lint_file,
    lint_files,
    parse_file,
    parse_file_dicts,
    read_bytes,
    tokenize_file,
    validate_file,
)


@pytest.mark.asyncio
async def test_parse_file(tmp_path: Path, write_ltsv) -> None:
    path = tmp_path / "access.ltsv"
    write_ltsv(path)

    rows = await parse_file(path)

    assert len(rows) == 2
    assert rows[1][2] == Pair("user", "alice")


@pytest.mark.asyncio
async def test_parse_file_dicts(tmp_path: Path, write_ltsv) -> None:
    path = tmp_path / "access.ltsv"
    write_ltsv(path)

    rows = await parse_file_dicts(path)

    assert rows[0] == {"host": "127.0.0.1", "ident": "-", "user": "frank"}


@pytest.mark.asyncio
async def test_gzip_file(tmp_path: Path, write_bytes) -> None:
    path = tmp_path / "access.ltsv.gz"
    write_bytes(path, [b"a:1\tb:2", b"c:3"])

    assert await read_bytes(path) == b"a:1\tb:2\nc:3\n"
    stream = await tokenize_file(path)
    assert [len(record.run()) for record in stream] == [2, 1]


@pytest.mark.asyncio
async def test_validate_file_raises(tmp_path: Path, write_broken_ltsv) -> None:
    path = tmp_path / "broken.ltsv"
    write_broken_ltsv(path)

    with pytest.raises(LtsvError) as exc:
        await validate_file(path)

    assert exc.value == LtsvError(ErrorKind.INVALID_PAIR, "noseparator", 0, 15, 26)


@pytest.mark.asyncio
async def test_lint_file_reports_every_error(tmp_path: Path, write_broken_ltsv) -> None:
    path = tmp_path / "broken.ltsv"
    write_broken_ltsv(path)

    errors = await lint_file(path)

    assert [(e.kind, e.line) for e in errors] == [
        (ErrorKind.INVALID_PAIR, 0),
        (ErrorKind.INVALID_LABEL, 1),
    ]
    assert await lint_file(path, limit=1) == errors[:1]


@pytest.mark.asyncio
async def test_lint_files_preserves_order(tmp_path: Path, write_ltsv, write_broken_ltsv) -> None:
    good = tmp_path / "good.ltsv"
    bad = tmp_path / "bad.ltsv"
    write_ltsv(good)
    write_broken_ltsv(bad)

    results = await lint_files([bad, good], max_workers=2)

    assert list(results) == [bad, good]
    assert len(results[bad]) == 2
    assert results[good] == []


@pytest.mark.asyncio
async def test_lint_files_env_workers(tmp_path: Path, write_ltsv, monkeypatch) -> None:
    path = tmp_path / "good.ltsv"
    write_ltsv(path)

    monkeypatch.setenv("LTSV_MAX_WORKERS", "nope")
    with pytest.raises(ValueError):
        await lint_files([path])

    monkeypatch.setenv("LTSV_MAX_WORKERS", "1")
    assert await lint_files([path]) == {path: []}


@pytest.mark.asyncio
async def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        await parse_file(tmp_path / "missing.ltsv")
