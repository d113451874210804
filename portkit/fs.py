"""File system types: attributes, access modes, seek origins and entries."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum, IntFlag
from typing import Optional

from portkit.text import safe_copy

MAX_NAME_LEN = 127
_UINT32_MAX = 0xFFFFFFFF


class FileAttributes(IntFlag):
    """Attribute bits of a file or directory."""

    NONE = 0
    READ_ONLY = 0x01
    HIDDEN = 0x02
    SYSTEM = 0x04
    VOLUME_NAME = 0x08
    DIRECTORY = 0x10
    ARCHIVE = 0x20


class FileMode(IntFlag):
    """File access mode bits."""

    READ = 1
    WRITE = 2
    CREATE = 4
    TRUNC = 8


class SeekOrigin(IntEnum):
    """Reference point of a seek offset."""

    SET = os.SEEK_SET
    CUR = os.SEEK_CUR
    END = os.SEEK_END


def _check_size(size: int) -> None:
    if not 0 <= size <= _UINT32_MAX:
        raise ValueError(f"size {size} does not fit in 32 bits")


@dataclass
class FileStat:
    """Status of a file."""

    attributes: FileAttributes = FileAttributes.NONE
    size: int = 0
    modified: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.attributes = FileAttributes(self.attributes)
        _check_size(self.size)

    def is_directory(self) -> bool:
        """Return True if the directory attribute is set."""
        return FileAttributes.DIRECTORY in self.attributes


@dataclass
class DirEntry:
    """One entry of a directory listing; names longer than ``MAX_NAME_LEN`` are cut."""

    name: str
    attributes: FileAttributes = FileAttributes.NONE
    size: int = 0
    modified: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.attributes = FileAttributes(self.attributes)
        _check_size(self.size)
        self.name = safe_copy(self.name, MAX_NAME_LEN + 1)

    def is_directory(self) -> bool:
        """Return True if the directory attribute is set."""
        return FileAttributes.DIRECTORY in self.attributes