"""Read-only access to a packed archive of embedded resources.

The archive starts with a 14-byte header: a little-endian 32-bit total size
followed by the root entry.  Each entry is a packed record of a one-byte
type, a 32-bit data offset, a 32-bit data length and a one-byte name length,
followed by the name.  A directory's data is a run of such entries.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple, Union

from portkit.errors import ErrorCode, PortError

_ENTRY = struct.Struct("<BIIB")
_HEADER = struct.Struct("<IBIIB")
_SEPARATORS = "/\\"


class ResType(IntEnum):
    """Kind of an archive entry."""

    DIR = 1
    FILE = 2


@dataclass(frozen=True)
class ResourceEntry:
    """Location and kind of an entry found in the archive."""

    type: Union[ResType, int]
    data_start: int
    data_length: int
    volume: int = 0


@dataclass(frozen=True)
class _RawEntry:
    type: int
    data_start: int
    data_length: int
    name: bytes


def _as_type(value: int) -> Union[ResType, int]:
    try:
        return ResType(value)
    except ValueError:
        return value


def _tokens(path: str) -> Iterator[Tuple[str, bool]]:
    """Yield each path element and whether it ends the path."""
    size = len(path)

    def next_separator(start: int) -> int:
        for idx in range(start, size):
            if path[idx] in _SEPARATORS:
                return idx
        return size

    pos = 0
    while pos < size:
        end = next_separator(pos)
        if end == pos:
            pos += 1
            end = next_separator(pos)
        yield path[pos:end], end >= size
        pos = end + 1


def _invalid(message: str) -> PortError:
    return PortError(ErrorCode.INVALID_RESOURCE, message)


class ResourceArchive:
    """A resource archive held in memory."""

    def __init__(self, data) -> None:
        self._data = bytes(data)
        if len(self._data) < _HEADER.size:
            raise _invalid("resource data is shorter than its header")
        total_size, _type, start, length, _name_len = _HEADER.unpack_from(self._data)
        if total_size < _HEADER.size:
            raise _invalid("resource header declares an invalid total size")
        self._root = (start, length)

    def _entries(self, start: int, length: int) -> Iterator[_RawEntry]:
        data = self._data
        offset = start
        while length > 0:
            if length < _ENTRY.size:
                raise _invalid("truncated directory entry")
            if offset + _ENTRY.size > len(data):
                raise _invalid("directory entry lies outside the resource data")
            typ, data_start, data_length, name_len = _ENTRY.unpack_from(data, offset)
            record = _ENTRY.size + name_len
            if length < record:
                raise _invalid("directory entry name overruns its directory")
            name = data[offset + _ENTRY.size:offset + record]
            if len(name) != name_len:
                raise _invalid("directory entry name lies outside the resource data")
            yield _RawEntry(typ, data_start, data_length, name)
            length -= record
            offset += record

    def _lookup(self, path: str, file_inside_error: ErrorCode) -> _RawEntry:
        start, length = self._root
        for token, at_end in _tokens(path):
            wanted = token.encode("utf-8").lower()
            for entry in self._entries(start, length):
                if entry.name.lower() == wanted:
                    break
            else:
                raise PortError(ErrorCode.NOT_FOUND, f"{path!r} not found")
            if entry.type == ResType.DIR:
                start, length = entry.data_start, entry.data_length
            else:
                if not at_end:
                    raise PortError(file_inside_error, f"{token!r} is not a directory")
                return entry
        raise PortError(ErrorCode.NOT_FOUND, f"{path!r} not found")

    def get_data(self, path: str) -> bytes:
        """Return the contents of the file at ``path``.

        Raises :class:`PortError` with ``NOT_FOUND`` when no file lies at the
        path, and ``INVALID_RESOURCE`` when the archive is malformed.
        """
        entry = self._lookup(path, ErrorCode.NOT_FOUND)
        if entry.type != ResType.FILE:
            raise PortError(ErrorCode.NOT_FOUND, f"{path!r} is not a file")
        end = entry.data_start + entry.data_length
        if end > len(self._data):
            raise _invalid("file data lies outside the resource data")
        return self._data[entry.data_start:end]

    def search_file(self, path: str) -> ResourceEntry:
        """Return the entry at ``path``.

        Raises :class:`PortError` with ``NOT_FOUND`` when nothing lies at the
        path, ``INVALID_PATH`` when a file is used as a directory, and
        ``INVALID_RESOURCE`` when the archive is malformed.
        """
        entry = self._lookup(path, ErrorCode.INVALID_PATH)
        return ResourceEntry(
            type=_as_type(entry.type),
            data_start=entry.data_start,
            data_length=entry.data_length,
        )