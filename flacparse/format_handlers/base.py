# flacparse/format_handlers/base.py
# !/usr/bin/env python3

from abc import ABC, abstractmethod
from typing import BinaryIO

from flacparse.metadata import MusicData


class BaseTagParser(ABC):
    """
    Abstract base class for tag parsers.
    Defines the interface that all concrete format parsers must implement.
    """

    @abstractmethod
    def parse(self, f: BinaryIO) -> MusicData:
        """
        Reads the tags from the given binary stream.

        Args:
            f: A readable binary file-like object positioned at the start
               of the container. It is only read forward and is never
               kept by the parser once this call returns.

        Returns:
            A MusicData instance holding the decoded tags.
        """
        pass
