"""In-memory PNG chunk stream."""

from __future__ import annotations

import struct
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .chunk import CHUNK_OVERHEAD, Chunk
from .errors import BadSignature, ChunkNotFound, PngChunkError, TruncatedChunk, TruncatedFile

__all__ = ["PNG_SIGNATURE", "TERMINATOR_TYPE", "Png"]

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
TERMINATOR_TYPE = "IEND"
_LENGTH_STRUCT = struct.Struct(">I")


class Png:
    """The signature plus an ordered list of chunks.

    The list is mutable through :meth:`insert_chunk`, :meth:`append_chunk` and
    :meth:`remove_chunk`; the chunks themselves are immutable.
    """

    signature = PNG_SIGNATURE

    def __init__(self, chunks: Optional[Iterable[Chunk]] = None) -> None:
        self._chunks: List[Chunk] = list(chunks) if chunks is not None else []

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, raw: Union[bytes, bytearray, memoryview]) -> "Png":
        raw = bytes(raw)
        if len(raw) < len(PNG_SIGNATURE):
            raise TruncatedFile(
                f"file is {len(raw)} bytes, too short for the {len(PNG_SIGNATURE)} byte PNG signature"
            )
        if not raw.startswith(PNG_SIGNATURE):
            raise BadSignature("data does not start with the PNG signature", offset=0)

        return cls(chunk for _, chunk in cls._iter_chunks(raw, len(PNG_SIGNATURE)))

    @staticmethod
    def _iter_chunks(raw: bytes, offset: int) -> Iterator[Tuple[int, Chunk]]:
        total_length = len(raw)
        while offset < total_length:
            remaining = total_length - offset
            if remaining < CHUNK_OVERHEAD:
                raise TruncatedChunk(
                    f"{remaining} trailing bytes cannot hold a chunk", offset=offset
                )
            (length,) = _LENGTH_STRUCT.unpack_from(raw, offset)
            chunk_end = offset + CHUNK_OVERHEAD + length
            try:
                chunk = Chunk.parse(raw[offset:chunk_end])
            except PngChunkError as exc:
                raise type(exc)(str(exc), offset=offset) from exc
            yield offset, chunk
            offset = chunk_end

    # ------------------------------------------------------------------
    # Chunk access
    # ------------------------------------------------------------------
    @property
    def chunks(self) -> Tuple[Chunk, ...]:
        return tuple(self._chunks)

    def __len__(self) -> int:
        return len(self._chunks)

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks)

    def chunk_by_type(self, chunk_type: str) -> Optional[Chunk]:
        for chunk in self._chunks:
            if str(chunk.chunk_type) == chunk_type:
                return chunk
        return None

    def chunks_by_type(self, chunk_type: str) -> List[Chunk]:
        return [chunk for chunk in self._chunks if str(chunk.chunk_type) == chunk_type]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def append_chunk(self, chunk: Chunk) -> None:
        self._chunks.append(chunk)

    def insert_chunk(self, chunk: Chunk, before_type: Optional[str] = TERMINATOR_TYPE) -> int:
        """Insert ``chunk`` and return its index.

        When the last chunk is of type ``before_type`` (``IEND`` by default) the
        new chunk goes immediately before it, so the terminator stays last.
        Otherwise, or when ``before_type`` is ``None``, the chunk is appended.
        """

        if (
            before_type is not None
            and self._chunks
            and str(self._chunks[-1].chunk_type) == before_type
        ):
            index = len(self._chunks) - 1
        else:
            index = len(self._chunks)
        self._chunks.insert(index, chunk)
        return index

    def remove_chunk(self, chunk_type: str) -> Chunk:
        """Remove and return the first chunk of ``chunk_type``."""

        for index, chunk in enumerate(self._chunks):
            if str(chunk.chunk_type) == chunk_type:
                return self._chunks.pop(index)
        raise ChunkNotFound(f"no chunk of type {chunk_type!r} in file")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def to_bytes(self) -> bytes:
        return PNG_SIGNATURE + b"".join(chunk.to_bytes() for chunk in self._chunks)

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def describe(self, verbose: bool = False) -> str:
        """Return a human readable listing of the chunk structure."""

        noun = "chunk" if len(self._chunks) == 1 else "chunks"
        lines = [f"PNG file with {len(self._chunks)} {noun}"]
        offset = len(PNG_SIGNATURE)
        for index, chunk in enumerate(self._chunks):
            line = (
                f"  [{index:>3}] offset={offset:<8} type={chunk.chunk_type} "
                f"length={chunk.length:<8} crc={chunk.crc:#010x}"
            )
            if verbose:
                line += f" flags={chunk.chunk_type.flags()}"
            lines.append(line)
            offset += CHUNK_OVERHEAD + chunk.length
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        types = ", ".join(str(chunk.chunk_type) for chunk in self._chunks)
        return f"Png([{types}])"
