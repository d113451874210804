import struct

import pytest

from portkit.errors import ErrorCode, PortError
from portkit.resources import ResourceArchive, ResourceEntry, ResType

ENTRY = struct.Struct("<BIIB")
HEADER = struct.Struct("<IBIIB")

INDEX = b"<html>index</html>"
STYLE = b"body { color: red; }"
LOGO = b"\x89PNG fake image"


def build_archive(tree):
    blob = bytearray(HEADER.size)

    def place(node):
        if isinstance(node, bytes):
            start = len(blob)
            blob.extend(node)
            return start, len(node)
        children = []
        for name, child in node.items():
            kind = 1 if isinstance(child, dict) else 2
            children.append((name.encode(), kind, place(child)))
        start = len(blob)
        for name, kind, (s, length) in children:
            blob.extend(ENTRY.pack(kind, s, length, len(name)) + name)
        return start, len(blob) - start

    root_start, root_length = place(tree)
    HEADER.pack_into(blob, 0, len(blob), 1, root_start, root_length, 0)
    return bytearray(blob)


TREE = {
    "index.html": INDEX,
    "css": {"style.css": STYLE},
    "img": {"icons": {"logo.png": LOGO}},
}


@pytest.fixture
def raw():
    return build_archive(TREE)


@pytest.fixture
def archive(raw):
    return ResourceArchive(raw)


def test_get_data_top_level_file(archive):
    assert archive.get_data("index.html") == INDEX


def test_get_data_nested_file(archive):
    assert archive.get_data("img/icons/logo.png") == LOGO


def test_get_data_is_case_insensitive(archive):
    assert archive.get_data("/CSS/Style.CSS") == STYLE


def test_get_data_accepts_backslashes(archive):
    assert archive.get_data("css\\style.css") == STYLE


def test_get_data_leading_slash(archive):
    assert archive.get_data("/index.html") == INDEX


def test_get_data_missing_file(archive):
    with pytest.raises(PortError) as info:
        archive.get_data("missing.txt")
    assert info.value.code == ErrorCode.NOT_FOUND


def test_get_data_directory_is_not_found(archive):
    with pytest.raises(PortError) as info:
        archive.get_data("css")
    assert info.value.code == ErrorCode.NOT_FOUND


def test_get_data_file_used_as_directory(archive):
    with pytest.raises(PortError) as info:
        archive.get_data("index.html/extra")
    assert info.value.code == ErrorCode.NOT_FOUND


def test_get_data_empty_path(archive):
    with pytest.raises(PortError) as info:
        archive.get_data("")
    assert info.value.code == ErrorCode.NOT_FOUND


def test_search_file_file_used_as_directory(archive):
    with pytest.raises(PortError) as info:
        archive.search_file("index.html/extra")
    assert info.value.code == ErrorCode.INVALID_PATH


def test_search_file_finds_file(archive, raw):
    entry = archive.search_file("css/style.css")
    assert entry.type == ResType.FILE
    assert entry.volume == 0
    assert entry.data_length == len(STYLE)
    assert bytes(raw[entry.data_start:entry.data_start + entry.data_length]) == STYLE


def test_search_file_directory_at_end_is_not_found(archive):
    with pytest.raises(PortError) as info:
        archive.search_file("img/icons")
    assert info.value.code == ErrorCode.NOT_FOUND


def test_search_file_matches_get_data(archive):
    entry = archive.search_file("img/icons/logo.png")
    assert isinstance(entry, ResourceEntry)
    assert entry.data_length == len(archive.get_data("img/icons/logo.png"))


def test_header_total_size_too_small(raw):
    struct.pack_into("<I", raw, 0, HEADER.size - 1)
    with pytest.raises(PortError) as info:
        ResourceArchive(raw)
    assert info.value.code == ErrorCode.INVALID_RESOURCE


def test_data_shorter_than_header():
    with pytest.raises(PortError) as info:
        ResourceArchive(b"\x00\x01\x02")
    assert info.value.code == ErrorCode.INVALID_RESOURCE


def test_truncated_root_directory(raw):
    struct.pack_into("<I", raw, 9, ENTRY.size - 1)
    archive = ResourceArchive(raw)
    with pytest.raises(PortError) as info:
        archive.get_data("index.html")
    assert info.value.code == ErrorCode.INVALID_RESOURCE


def test_empty_root_directory(raw):
    struct.pack_into("<I", raw, 9, 0)
    archive = ResourceArchive(raw)
    with pytest.raises(PortError) as info:
        archive.get_data("index.html")
    assert info.value.code == ErrorCode.NOT_FOUND


def test_file_data_outside_archive():
    blob = build_archive({"a.txt": b"abc"})
    root_start = struct.unpack_from("<I", blob, 5)[0]
    struct.pack_into("<I", blob, root_start + 5, 10_000)
    archive = ResourceArchive(blob)
    with pytest.raises(PortError) as info:
        archive.get_data("a.txt")
    assert info.value.code == ErrorCode.INVALID_RESOURCE