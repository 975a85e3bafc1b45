# flacparse/format_handlers/flac/flac_utils.py
# !/usr/bin/env python3

import struct

from typing import BinaryIO

from flacparse._exceptions import FlacIOError, TruncatedError

DEFAULT_SKIP_CHUNK_SIZE = 64 * 1024
READ_CHUNK_SIZE = 64 * 1024


def read_exact(f: BinaryIO, n: int) -> bytes:
    """
    Reads exactly n bytes from a forward-only stream.
    Short reads are retried until the stream reports end of data.
    Each request is capped at READ_CHUNK_SIZE bytes.
    """
    chunks = []
    received = 0
    while received < n:
        try:
            chunk = f.read(min(n - received, READ_CHUNK_SIZE))
        except OSError as e:
            raise FlacIOError(f"Error reading from stream: {e}") from e
        if not chunk:
            raise TruncatedError(n, received)
        chunks.append(chunk)
        received += len(chunk)
    return b"".join(chunks)


def read_uint32_le(f: BinaryIO) -> int:
    return struct.unpack("<I", read_exact(f, 4))[0]


def read_uint32_be(f: BinaryIO) -> int:
    return struct.unpack(">I", read_exact(f, 4))[0]


def skip_bytes(f: BinaryIO, n: int, chunk_size: int = DEFAULT_SKIP_CHUNK_SIZE) -> None:
    """Consumes and discards exactly n bytes without seeking."""
    remaining = n
    while remaining > 0:
        step = min(remaining, chunk_size)
        try:
            read_exact(f, step)
        except TruncatedError as e:
            raise TruncatedError(n, n - remaining + e.received) from e
        remaining -= step
