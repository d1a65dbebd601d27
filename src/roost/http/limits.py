"""Bounded body reading.

``BoundedReader`` decorates an async chunk iterator and raises
``PayloadTooLarge`` as soon as the running byte count crosses the limit.
The chunk that crosses it is never yielded, and the underlying iterator
is closed so no further chunks are pulled from the client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from roost.errors import PayloadTooLarge


class BoundedReader:
    """Async iterator over body chunks with a hard size limit.

    Usage::

        reader = BoundedReader(request.stream(), limit=1024)
        chunks = [chunk async for chunk in reader]
        # reader.size == total bytes read
    """

    __slots__ = ("_chunks", "limit", "size")

    def __init__(self, chunks: AsyncIterator[bytes], limit: int) -> None:
        self._chunks = chunks
        self.limit = limit
        self.size = 0

    def __aiter__(self) -> BoundedReader:
        return self

    async def __anext__(self) -> bytes:
        chunk = await anext(self._chunks)
        self.size += len(chunk)
        if self.size > self.limit:
            await self.aclose()
            raise PayloadTooLarge
        return chunk

    async def aclose(self) -> None:
        """Close the underlying iterator if it supports closing."""
        close = getattr(self._chunks, "aclose", None)
        if close is not None:
            await close()

    async def read(self) -> bytes:
        """Consume the remaining chunks and return them joined."""
        return b"".join([chunk async for chunk in self])
