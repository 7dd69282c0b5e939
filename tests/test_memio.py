import pytest

from vpdscan.memio import (
    MemoryReadError,
    checksum,
    dword,
    mem_chunk,
    qword,
    read_file,
    u64_range,
    word,
    write_dump,
)


def test_checksum_zero_sum():
    assert checksum(b"\x01\xff") is True
    assert checksum(b"\x10\xf0\x00") is True


def test_checksum_nonzero_sum():
    assert checksum(b"\x01") is False


def test_checksum_empty_is_valid():
    assert checksum(b"") is True


def test_word_dword_qword_round_trip():
    data = (0x1234).to_bytes(2, "little") + (0xDEADBEEF).to_bytes(4, "little")
    data += (0x0123456789ABCDEF).to_bytes(8, "little")
    assert word(data, 0) == 0x1234
    assert dword(data, 2) == 0xDEADBEEF
    assert qword(data, 6) == 0x0123456789ABCDEF


def test_u64_range_single():
    assert u64_range(42, 42) == 1


def test_u64_range_full_span_wraps():
    assert u64_range(0, (1 << 64) - 1) == 0


def test_u64_range_is_inverse_of_offset():
    start = 0xFFFF_FFF0
    size = 0x40
    assert u64_range(start, start + size - 1) == size


def test_read_file_from_offset(tmp_path):
    path = tmp_path / "blob"
    data = bytes(range(50))
    path.write_bytes(data)
    assert read_file(path, 2, 100) == data[2:]


def test_read_file_limited(tmp_path):
    path = tmp_path / "blob"
    data = bytes(range(50))
    path.write_bytes(data)
    assert read_file(path, 0, 10) == data[:10]


def test_read_file_missing_returns_none(tmp_path):
    assert read_file(tmp_path / "absent", 0, 16) is None


def test_mem_chunk_reads_region(tmp_path):
    path = tmp_path / "mem"
    data = bytes(i & 0xFF for i in range(10000))
    path.write_bytes(data)
    assert mem_chunk(5000, 100, path) == data[5000:5100]
    assert mem_chunk(0, 16, path) == data[:16]


def test_mem_chunk_beyond_end(tmp_path):
    path = tmp_path / "mem"
    path.write_bytes(b"\x00" * 100)
    with pytest.raises(MemoryReadError, match="beyond end"):
        mem_chunk(90, 20, path)


def test_mem_chunk_missing_device(tmp_path):
    with pytest.raises(MemoryReadError):
        mem_chunk(0, 16, tmp_path / "absent")


def test_write_dump_round_trip(tmp_path):
    path = tmp_path / "dump.bin"
    write_dump(0, b"hello", path, False)
    write_dump(8, b"xyz", path, True)
    content = path.read_bytes()
    assert content[:5] == b"hello"
    assert content[8:11] == b"xyz"
    assert len(content) == 11


def test_write_dump_truncates_without_add(tmp_path):
    path = tmp_path / "dump.bin"
    path.write_bytes(b"a" * 20)
    write_dump(0, b"bc", path, False)
    assert path.read_bytes() == b"bc"


def test_write_dump_add_requires_existing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_dump(0, b"data", tmp_path / "absent", True)