# flacparse/metadata.py
# !/usr/bin/env python3

"""
metadata.py
~~~~~~~~~~~~~~~

Read-only views over decoded tags. Every format result exposes the same
named-field lookups so callers do not need to know where the tags came from.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

TITLE = "TITLE"
ARTIST = "ARTIST"
ALBUM = "ALBUM"
TRACKNUMBER = "TRACKNUMBER"


class MusicData(ABC):
    """
    Common accessors for decoded music tags.

    Lookups are exact and case-sensitive. A missing tag yields None.
    """

    @property
    @abstractmethod
    def tags(self) -> Mapping[str, str]:
        pass

    def get(self, key: str) -> Optional[str]:
        return self.tags.get(key)

    def title(self) -> Optional[str]:
        return self.get(TITLE)

    def artist(self) -> Optional[str]:
        return self.get(ARTIST)

    def album(self) -> Optional[str]:
        return self.get(ALBUM)

    def tracknumber(self) -> Optional[str]:
        """
        Track number as stored in the file.
        Kept as a string since values like 'A3' (side A, track 3) are common.
        """
        return self.get(TRACKNUMBER)

    def map(self) -> Dict[str, str]:
        """Returns a new dict with every tag, owned by the caller."""
        return dict(self.tags)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title(),
            "artist": self.artist(),
            "album": self.album(),
            "track_number": self.tracknumber(),
            "tags": self.map(),
        }

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return dict(self.tags) == dict(other.tags)

    __hash__ = None


class VorbisMetadata(MusicData):
    """A decoded Vorbis comment block, including its vendor string."""

    def __init__(self, vendor_string: str, user_comments: Mapping[str, str]):
        self._vendor_string = vendor_string
        self._user_comments = MappingProxyType(dict(user_comments))

    @property
    def vendor_string(self) -> str:
        return self._vendor_string

    @property
    def tags(self) -> Mapping[str, str]:
        return self._user_comments

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is NotImplemented or not result:
            return result
        return self._vendor_string == other.vendor_string

    def __repr__(self) -> str:
        return (
            f"VorbisMetadata(vendor_string={self._vendor_string!r}, "
            f"user_comments={dict(self._user_comments)!r})"
        )


class MusicMetadata(MusicData):
    """Format-independent tags with no container-specific extras."""

    def __init__(self, tags: Mapping[str, str]):
        self._tags = MappingProxyType(dict(tags))

    @classmethod
    def from_music_data(cls, data: MusicData) -> "MusicMetadata":
        return cls(data.map())

    @property
    def tags(self) -> Mapping[str, str]:
        return self._tags

    def __repr__(self) -> str:
        return f"MusicMetadata(tags={dict(self._tags)!r})"
