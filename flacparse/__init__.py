# flacparse/__init__.py
# !/usr/bin/env python3

__version__ = "0.1.0"

from .parsers import FlacParser, parse, parse_vorbis
from .inspector import TagInspector
from .metadata import MusicData, MusicMetadata, VorbisMetadata
from ._exceptions import (
    FlacParseError,
    NotFlacError,
    NoCommentBlockError,
    MalformedDataError,
    FlacIOError,
    TruncatedError,
)
