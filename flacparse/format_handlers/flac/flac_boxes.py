# flacparse/format_handlers/flac/flac_boxes.py
# !/usr/bin/env python3

import logging

from enum import IntEnum
from typing import BinaryIO, Dict, NamedTuple, Tuple

from flacparse._exceptions import MalformedDataError
from .flac_utils import read_exact, read_uint32_be, read_uint32_le

logger = logging.getLogger(__name__)

FLAC_SIGNATURE = b"fLaC"


class BlockType(IntEnum):
    STREAMINFO = 0
    PADDING = 1
    APPLICATION = 2
    SEEKTABLE = 3
    VORBIS_COMMENT = 4
    CUESHEET = 5
    PICTURE = 6


class BlockHeader(NamedTuple):
    is_last: bool
    block_type: int
    length: int


def block_type_name(block_type: int) -> str:
    try:
        return BlockType(block_type).name
    except ValueError:
        return f"UNKNOWN({block_type})"


def validate_signature(f: BinaryIO) -> bool:
    """Consumes 4 bytes and reports whether they are the FLAC magic marker."""
    return read_exact(f, 4) == FLAC_SIGNATURE


def read_block_header(f: BinaryIO) -> BlockHeader:
    """
    Reads a 4-byte METADATA_BLOCK_HEADER.

    Bit 31 is the last-block flag, bits 30-24 the block type and
    bits 23-0 the big-endian length of the block body.
    """
    header_val = read_uint32_be(f)
    return BlockHeader(
        is_last=(header_val & 0x80000000) != 0,
        block_type=(header_val >> 24) & 0x7F,
        length=header_val & 0x00FFFFFF,
    )


def parse_vorbis_comment_block(f: BinaryIO) -> Tuple[str, Dict[str, str]]:
    """
    Parses a VORBIS_COMMENT block body into its vendor string and tags.

    The stream must be positioned at the vendor length field. All lengths
    inside the block are little-endian, unlike the block header.
    """
    vendor_len = read_uint32_le(f)
    vendor_string = _decode_utf8(read_exact(f, vendor_len), "vendor string")

    comment_count = read_uint32_le(f)
    logger.debug(f"Vendor '{vendor_string}', {comment_count} user comments")

    tags: Dict[str, str] = {}
    for index in range(comment_count):
        length = read_uint32_le(f)
        comment_str = _decode_utf8(read_exact(f, length), f"user comment {index}")
        key, value = _split_comment(comment_str)
        if key in tags:
            logger.debug(f"Duplicate tag '{key}', keeping the later value")
        tags[key] = value

    return vendor_string, tags


def _decode_utf8(data: bytes, what: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedDataError(f"Malformed FLAC file, {what} is not valid UTF-8: {e}") from e


def _split_comment(comment_str: str) -> Tuple[str, str]:
    """Splits 'KEY=VALUE' on the first '='; the value may contain further '='."""
    key, sep, value = comment_str.partition("=")
    if not sep:
        raise MalformedDataError(
            f"Malformed FLAC file, could not split user comment {comment_str!r}"
        )
    return key, value
