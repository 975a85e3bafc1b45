# flacparse/_exceptions.py
# !/usr/bin/env python3

"""
_exceptions.py
~~~~~~~~~~~~~~~

Exception hierarchy raised while reading tags from a FLAC stream.
Every failure is terminal for the parse call that raised it.
"""


class FlacParseError(Exception):
    """Base class for all errors raised by flacparse."""


class NotFlacError(FlacParseError):
    """The stream does not start with the 'fLaC' signature."""


class NoCommentBlockError(FlacParseError):
    """The last metadata block was reached without finding a VORBIS_COMMENT block."""


class MalformedDataError(FlacParseError):
    """A comment entry has no '=' separator or its text is not valid UTF-8."""


class FlacIOError(FlacParseError):
    """The underlying byte source failed while being read."""


class TruncatedError(FlacIOError):
    """The stream ended before a declared length could be satisfied."""

    def __init__(self, expected: int, received: int):
        super().__init__(
            f"Unexpected end of stream: expected {expected} bytes, got {received}."
        )
        self.expected = expected
        self.received = received
