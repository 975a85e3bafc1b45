"""Test configuration and fixtures"""

import io
import struct

import pytest


def metadata_block(block_type, body, last=False):
    """Build a FLAC metadata block: 4-byte big-endian header plus body"""
    header = (0x80000000 if last else 0) | (block_type << 24) | len(body)
    return struct.pack(">I", header) + body


def comment_body(vendor, comments):
    """Build a VORBIS_COMMENT block body from a vendor string and raw entries"""
    vendor_bytes = vendor.encode("utf-8") if isinstance(vendor, str) else vendor
    body = struct.pack("<I", len(vendor_bytes)) + vendor_bytes
    body += struct.pack("<I", len(comments))
    for comment in comments:
        data = comment.encode("utf-8") if isinstance(comment, str) else comment
        body += struct.pack("<I", len(data)) + data
    return body


def flac_stream(*blocks):
    return b"fLaC" + b"".join(blocks)


class ReadOnlyStream:
    """Forward-only byte source exposing nothing but read()"""

    def __init__(self, data, max_chunk=None):
        self._buffer = io.BytesIO(data)
        self._max_chunk = max_chunk

    def read(self, n=-1):
        if self._max_chunk is not None and (n < 0 or n > self._max_chunk):
            n = self._max_chunk
        return self._buffer.read(n)


@pytest.fixture
def streaminfo_block():
    """A non-last STREAMINFO block with a dummy 34-byte body"""
    return metadata_block(0, b"\x00" * 34)


@pytest.fixture
def sample_flac_bytes(streaminfo_block):
    """FLAC stream with STREAMINFO, PADDING and a final VORBIS_COMMENT block"""
    return flac_stream(
        streaminfo_block,
        metadata_block(1, b"\x00" * 16),
        metadata_block(
            4,
            comment_body(
                "reference libFLAC 1.4.3 20230623",
                ["TITLE=Song", "ARTIST=Band", "ALBUM=Record", "TRACKNUMBER=A3"],
            ),
            last=True,
        ),
    )


@pytest.fixture
def sample_flac_file(tmp_path, sample_flac_bytes):
    path = tmp_path / "song.flac"
    path.write_bytes(sample_flac_bytes)
    return path
