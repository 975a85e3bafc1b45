# flacparse/parsers.py
# !/usr/bin/env python3

"""
This module provides the main parse entry points.
It acts as a central import point for format-specific parsers.
"""

from typing import BinaryIO

from flacparse.format_handlers.flac.flac import FlacParser
from flacparse.metadata import MusicMetadata, VorbisMetadata

__all__ = [
    "FlacParser",
    "parse",
    "parse_vorbis",
]


def parse_vorbis(f: BinaryIO) -> VorbisMetadata:
    """Reads the raw Vorbis comment block, vendor string included."""
    return FlacParser().parse(f)


def parse(f: BinaryIO) -> MusicMetadata:
    """Reads the tags of a FLAC stream into the format-independent shape."""
    return MusicMetadata.from_music_data(parse_vorbis(f))
