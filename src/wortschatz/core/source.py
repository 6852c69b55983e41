# src/wortschatz/core/source.py
"""
Byte sources for streaming a lexicon into the dictionary.

A source is an async iterator of byte chunks plus an optional declared
size. The size is only used for progress percentages.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Iterable

import httpx


@dataclass
class ByteSource:
    body: AsyncIterator[bytes] | None
    total_size: int = 0

    async def read(self) -> tuple[bool, bytes]:
        """Next chunk as (done, chunk). Once done, chunk is b""."""
        if self.body is None:
            raise ValueError("Response body is null")
        try:
            chunk = await anext(self.body)
        except StopAsyncIteration:
            return True, b""
        return False, chunk

    async def aclose(self) -> None:
        aclose = getattr(self.body, "aclose", None)
        if aclose is not None:
            await aclose()

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ByteSource":
        """
        Wrap a streamed httpx response.

        The caller owns the response, e.g. `async with client.stream(...)`.
        """
        total = response.headers.get("content-length")
        return cls(
            body=response.aiter_bytes(),
            total_size=int(total) if total and total.isdigit() else 0,
        )

    @classmethod
    def from_file(cls, path: str | Path, chunk_size: int = 65536) -> "ByteSource":
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"Lexicon not found: {path}")
        return cls(body=_read_file(path, chunk_size), total_size=path.stat().st_size)

    @classmethod
    def from_chunks(cls, chunks: Iterable[bytes], total_size: int = 0) -> "ByteSource":
        return cls(body=_iterate(chunks), total_size=total_size)


async def _read_file(path: Path, chunk_size: int) -> AsyncIterator[bytes]:
    with path.open("rb") as f:
        while chunk := f.read(chunk_size):
            yield chunk


async def _iterate(chunks: Iterable[bytes]) -> AsyncIterator[bytes]:
    for chunk in chunks:
        yield chunk
