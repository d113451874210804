# portkit

Small building blocks with no dependencies outside the standard library:
path helpers that accept both `/` and `\` as separators, string helpers for
fixed-size fields, a reader for packed resource archives, file-system value
types, and task and synchronisation primitives built on Python threads.

## Installation

```
pip install portkit
```

To run the test suite:

```
pip install "portkit[test]"
pytest
```

## Errors

`portkit.errors` holds `ErrorCode`, an `IntEnum` of numeric codes grouped in
blocks of one hundred (for example `ErrorCode.INVALID_PARAMETER`,
`ErrorCode.NOT_FOUND`, `ErrorCode.INVALID_RESOURCE`), and `PortError`, the
exception the package raises with one of those codes. `PortError(code,
message=None)` stores `code` and `message`; without a message it uses the
code's name in lower case with spaces, such as `"not found"`.

## Paths

`portkit.path` works on strings and returns new strings:

- `is_absolute(path)` / `is_relative(path)`: whether the path starts with `/` or `\`.
- `get_filename(path)`: the last component, with any trailing separators.
- `remove_filename(path)`: the path without its last component.
- `truncate(src, max_len)`: at most `max_len` characters.
- `canonicalize(path)`: turns every run of separators into one `/` and
  resolves `.` and `..` elements.
- `add_slash(path, max_len)`: appends `/` unless the path already ends with a
  separator or the result would be longer than `max_len`.
- `remove_slash(path)`: drops trailing separators but keeps a leading root one.
- `combine(path, more, max_len)`: joins two paths with one separator, cut to
  `max_len` characters.
- `match(path, pattern)`: case-insensitive wildcard match; `*` matches any
  run of characters and `?` exactly one.

```python
from portkit import path

path.canonicalize("/a/./b/../c")      # "/a/c"
path.combine("dir", "/file.txt", 64)  # "dir/file.txt"
path.match("Index.HTML", "*.html")    # True
```

## Strings

`portkit.text` provides `duplicate`, `trim_whitespace`,
`remove_trailing_space`, `replace_char` and `safe_copy`. White space means
space, tab, newline, vertical tab, form feed and carriage return.
`replace_char` raises `ValueError` unless both characters are single
characters. `safe_copy(src, dest_size)` returns `src` cut to fit a buffer of
`dest_size` including its terminator, that is at most `dest_size - 1`
characters, and raises `PortError` with `INVALID_PARAMETER` when `src` is
`None` or `dest_size` is below one.

## Resource archives

`portkit.resources.ResourceArchive` reads an archive image held in memory.
The image starts with a 14-byte header: a little-endian 32-bit total size
followed by the root entry. Every entry is a packed record of a one-byte
type (`ResType.DIR` = 1, `ResType.FILE` = 2), a 32-bit data offset, a 32-bit
data length and a one-byte name length, followed by the name. A directory's
data is a run of such entries. Names are compared without regard to case,
and either separator may be used in a path.

- `get_data(path)` returns the bytes of the file at `path`.
- `search_file(path)` returns a `ResourceEntry` with `type`, `data_start`,
  `data_length` and `volume` (always 0).

Failures raise `PortError`: `NOT_FOUND` when nothing (or, for `get_data`, no
file) lies at the path; `INVALID_PATH` from `search_file` when a file is used
as a directory; `INVALID_RESOURCE` when the image is malformed.

```python
import struct

from portkit.resources import ResourceArchive

name, payload = b"hello.txt", b"Hello"
header = struct.pack("<IBIIB", 38, 1, 14, 19, 0)
entry = struct.pack("<BIIB", 2, 33, len(payload), len(name)) + name
archive = ResourceArchive(header + entry + payload)

archive.get_data("/HELLO.TXT")    # b"Hello"
archive.search_file("hello.txt")  # ResourceEntry(type=<ResType.FILE: 2>, data_start=33, data_length=5, volume=0)
```

## File-system types

`portkit.fs` defines `FileAttributes` and `FileMode` (flag enums),
`SeekOrigin` (`SET`, `CUR`, `END`), and the dataclasses `FileStat` and
`DirEntry`, each with `attributes`, `size` and `modified`, and an
`is_directory()` method. `DirEntry` also has a `name`, cut to
`MAX_NAME_LEN` (127) characters. A `size` outside the 32-bit unsigned range
raises `ValueError`.

## Tasks and synchronisation

`portkit.osport` measures times in milliseconds. `INFINITE_DELAY` waits
forever and a timeout of zero polls without blocking.

- `create_task(name, task_code, arg=None, params=None)` runs
  `task_code(arg)` in a new daemon thread and returns the thread;
  `TaskParameters(stack_size, priority)` is accepted but does not change how
  the thread runs.
- `delay_task(delay)` sleeps; `switch_task()` yields.
- `get_system_time()` returns monotonic milliseconds wrapped to 32 bits;
  `get_system_time64()` returns them unwrapped.
- `time_compare(t1, t2)` gives `t1 - t2` as a signed 32-bit value, so
  wrapped tick counts compare correctly; `lsb(x)` and `msb(x)` return the
  low and second bytes.
- `Event` is auto-reset: `set()`, `reset()`, `wait(timeout)` (a successful
  wait clears it) and `set_from_isr()`, which sets it and returns `False`.
- `Semaphore(count)` starts full; `wait(timeout)` takes a unit and
  `release()` gives one back, raising `ValueError` if it is already full.
- `Mutex` may be acquired more than once by its owner and works as a
  context manager.

```python
from portkit.osport import Event, Mutex

event = Event()
event.set()
assert event.wait(0)
assert not event.wait(0)

lock = Mutex()
with lock:
    ...
```

## What it does not do

`portkit.fs` only describes files; it does not open, read, write or list
anything. Tasks cannot be deleted or reprioritised once started, and there
is no scheduler locking. There is no command-line program.