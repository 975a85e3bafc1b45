# flacparse/inspector.py
# !/usr/bin/env python3

import os
import sys
import logging
from contextlib import contextmanager
from typing import BinaryIO, Iterator

from .format_handlers.flac.flac import FlacParser
from .format_handlers.flac.flac_utils import DEFAULT_SKIP_CHUNK_SIZE
from .metadata import MusicMetadata, VorbisMetadata

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


class TagInspector:
    def __init__(self, source_path: str, skip_chunk_size: int = DEFAULT_SKIP_CHUNK_SIZE):
        if source_path != STDIN_PATH and not os.path.exists(source_path):
            raise FileNotFoundError(f"File not found at '{source_path}'")
        self.source_path = source_path
        self.skip_chunk_size = skip_chunk_size

    @contextmanager
    def _open_source(self) -> Iterator[BinaryIO]:
        """Yields a binary stream for the source; standard input is left open."""
        if self.source_path == STDIN_PATH:
            yield sys.stdin.buffer
        else:
            with open(self.source_path, "rb") as f:
                yield f

    def inspect_raw(self) -> VorbisMetadata:
        """
        Reads the source and returns the raw Vorbis comment block.
        """
        parser = FlacParser(skip_chunk_size=self.skip_chunk_size)
        with self._open_source() as f:
            logger.info(f"Using parser: {type(parser).__name__} for '{self.source_path}'")
            return parser.parse(f)

    def inspect(self) -> MusicMetadata:
        """
        Reads the source and returns its tags in the format-independent shape.
        """
        return MusicMetadata.from_music_data(self.inspect_raw())
