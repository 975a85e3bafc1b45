# flacparse/format_handlers/flac/flac.py
# !/usr/bin/env python3

import logging

from typing import BinaryIO

from flacparse._exceptions import NoCommentBlockError, NotFlacError, TruncatedError
from flacparse.format_handlers.base import BaseTagParser
from flacparse.metadata import VorbisMetadata
from .flac_boxes import (
    BlockHeader,
    BlockType,
    block_type_name,
    parse_vorbis_comment_block,
    read_block_header,
    validate_signature,
)
from .flac_utils import DEFAULT_SKIP_CHUNK_SIZE, skip_bytes

logger = logging.getLogger(__name__)


class FlacParser(BaseTagParser):
    """
    Reads the Vorbis comment tags of a FLAC stream in a single forward pass.
    Metadata blocks other than VORBIS_COMMENT are skipped by their declared
    length without being interpreted.
    """

    def __init__(self, skip_chunk_size: int = DEFAULT_SKIP_CHUNK_SIZE):
        if skip_chunk_size <= 0:
            raise ValueError("skip_chunk_size must be a positive number of bytes.")
        self.skip_chunk_size = skip_chunk_size

    def validate(self, f: BinaryIO) -> None:
        """Consumes the stream signature, raising NotFlacError on mismatch."""
        try:
            is_flac = validate_signature(f)
        except TruncatedError as e:
            raise NotFlacError(
                "Not a valid FLAC file: stream too short for 'fLaC' magic bytes."
            ) from e
        if not is_flac:
            raise NotFlacError("Not a valid FLAC file: missing 'fLaC' magic bytes.")

    def find_comment_block(self, f: BinaryIO) -> BlockHeader:
        """
        Walks the metadata blocks until the VORBIS_COMMENT block is found.
        On return the stream is positioned at the first byte of its body.
        """
        while True:
            header = read_block_header(f)
            if header.block_type == BlockType.VORBIS_COMMENT:
                logger.debug(f"Found VORBIS_COMMENT block, {header.length} bytes")
                return header
            if header.is_last:
                raise NoCommentBlockError(
                    "Ran out of metadata blocks before finding a VORBIS_COMMENT block."
                )
            logger.debug(
                f"Skipping {block_type_name(header.block_type)} block, "
                f"{header.length} bytes"
            )
            skip_bytes(f, header.length, self.skip_chunk_size)

    def parse(self, f: BinaryIO) -> VorbisMetadata:
        """Parses the FLAC stream and returns its Vorbis comment block."""
        self.validate(f)
        self.find_comment_block(f)
        vendor_string, tags = parse_vorbis_comment_block(f)
        return VorbisMetadata(vendor_string, tags)
