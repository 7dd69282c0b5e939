"""Low-level access to physical memory images and small binary helpers."""

from __future__ import annotations

import mmap
import os
import stat
import sys

if sys.platform.startswith("haiku") or sys.platform.startswith("beos"):
    DEFAULT_MEM_DEV = "/dev/misc/mem"
elif sys.platform.startswith("sunos"):
    DEFAULT_MEM_DEV = "/dev/xsvc"
else:
    DEFAULT_MEM_DEV = "/dev/mem"

_U64_MASK = (1 << 64) - 1


class MemoryReadError(Exception):
    """Raised when a memory device or image cannot be read."""


def checksum(data: bytes) -> bool:
    """Return True if the bytes of ``data`` sum to zero modulo 256."""
    return sum(data) & 0xFF == 0


def read_file(path: str | os.PathLike, base: int, max_len: int) -> bytes | None:
    """Read up to ``max_len`` bytes of ``path`` starting at ``base``.

    Returns None when the file does not exist; other failures raise
    MemoryReadError.
    """
    try:
        with open(path, "rb") as handle:
            try:
                handle.seek(base)
            except OSError as exc:
                raise MemoryReadError(f"{path}: lseek: {exc.strerror}") from exc
            chunks = []
            remaining = max_len
            while remaining > 0:
                chunk = handle.read(remaining)
                if not chunk:
                    break
                chunks.append(chunk)
                remaining -= len(chunk)
            return b"".join(chunks)
    except FileNotFoundError:
        return None
    except MemoryReadError:
        raise
    except OSError as exc:
        raise MemoryReadError(f"{path}: {exc.strerror}") from exc


def _read_exact(fd: int, base: int, length: int, devmem: str) -> bytes:
    try:
        os.lseek(fd, base, os.SEEK_SET)
    except OSError as exc:
        raise MemoryReadError(f"{devmem}: lseek: {exc.strerror}") from exc
    chunks = []
    remaining = length
    while remaining > 0:
        try:
            chunk = os.read(fd, remaining)
        except OSError as exc:
            raise MemoryReadError(f"{devmem}: {exc.strerror}") from exc
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    if remaining:
        raise MemoryReadError(f"{devmem}: Unexpected end of file")
    return b"".join(chunks)


def mem_chunk(base: int, length: int, devmem: str | os.PathLike) -> bytes:
    """Copy ``length`` bytes of physical memory at ``base`` from ``devmem``."""
    name = os.fspath(devmem)
    try:
        fd = os.open(name, os.O_RDONLY)
    except OSError as exc:
        raise MemoryReadError(f"{name}: {exc.strerror}") from exc
    try:
        try:
            info = os.fstat(fd)
        except OSError as exc:
            raise MemoryReadError(f"{name}: stat: {exc.strerror}") from exc
        if stat.S_ISREG(info.st_mode) and base + length > info.st_size:
            raise MemoryReadError(f"mmap: Can't map beyond end of file {name}")

        mmoffset = base % mmap.ALLOCATIONGRANULARITY
        try:
            with mmap.mmap(
                fd,
                mmoffset + length,
                access=mmap.ACCESS_READ,
                offset=base - mmoffset,
            ) as mapped:
                return bytes(mapped[mmoffset:mmoffset + length])
        except (OSError, ValueError, OverflowError):
            return _read_exact(fd, base, length, name)
    finally:
        os.close(fd)


def write_dump(base: int, data: bytes, dumpfile: str | os.PathLike, add: bool) -> None:
    """Write ``data`` at offset ``base`` of ``dumpfile``.

    With ``add`` the file must exist and is patched in place; otherwise it
    is created or truncated first.
    """
    with open(dumpfile, "r+b" if add else "wb") as handle:
        handle.seek(base)
        handle.write(data)


def u64_range(start: int, end: int) -> int:
    """Return ``end - start + 1`` as an unsigned 64-bit quantity."""
    return (end - start + 1) & _U64_MASK


def word(data: bytes, offset: int) -> int:
    """Little-endian unsigned 16-bit value at ``offset``."""
    return int.from_bytes(data[offset:offset + 2], "little")


def dword(data: bytes, offset: int) -> int:
    """Little-endian unsigned 32-bit value at ``offset``."""
    return int.from_bytes(data[offset:offset + 4], "little")


def qword(data: bytes, offset: int) -> int:
    """Little-endian unsigned 64-bit value at ``offset``."""
    return int.from_bytes(data[offset:offset + 8], "little")