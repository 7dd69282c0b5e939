"""Locate and decode IBM Vital Product Data records in BIOS memory."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass

from .memio import MemoryReadError, checksum, mem_chunk
from .options import OptionError, Options, StringKeyword, help_text, parse_command_line

VERSION = "3.1"

VPD_BASE = 0xF0000
VPD_SIZE = 0x10000
_SIGNATURE = b"\xaaUVPD"


@dataclass(frozen=True)
class VpdRecord:
    """A VPD record found at ``offset`` within the scanned area."""

    offset: int
    data: bytes

    @property
    def length(self) -> int:
        return self.data[5]

    @property
    def address(self) -> int:
        return VPD_BASE + self.offset


def format_entry(name: str | None, data: bytes) -> str:
    """Render a string field, replacing non-printable bytes and dropping NULs."""
    text = "".join(
        chr(b) if 32 <= b < 127 else "."
        for b in data
        if b != 0
    )
    return f"{name}: {text}" if name is not None else text


def hex_dump(data: bytes) -> list[str]:
    """Hexadecimal and ASCII dump, 16 bytes per line."""
    lines = []
    for done in range(0, len(data), 16):
        row = data[done:done + 16]
        hexpart = "".join(f" {b:02X}" for b in row) + "   " * (16 - len(row))
        text = "".join(chr(b) if 32 <= b < 127 else "." for b in row)
        lines.append(f"{done:02X}:{hexpart}     {text}")
    return lines


def decode_record(
    record: VpdRecord, string_keyword: StringKeyword | None, quiet: bool
) -> list[str] | None:
    """Decode a record; None if it is too short to be a VPD record."""
    p = record.data
    length = record.length
    if length < 0x30:
        return None

    lines = []
    valid = (
        (length >= 0x45 and checksum(p[:length]))
        or checksum(p[:0x30])
        or checksum(p[0x0D:0x30])
    )
    if not valid and not quiet:
        lines.append("# Bad checksum!")

    if string_keyword is not None:
        start = string_keyword.offset
        if start + string_keyword.length < length:
            lines.append(format_entry(None, p[start:start + string_keyword.length]))
        return lines

    lines.append(format_entry("BIOS Build ID", p[0x0D:0x16]))
    lines.append(format_entry("Box Serial Number", p[0x16:0x1D]))
    lines.append(format_entry("Motherboard Serial Number", p[0x1D:0x28]))
    lines.append(format_entry("Machine Type/Model", p[0x28:0x2F]))

    if length < 0x44:
        return lines

    lines.append(format_entry("BIOS Release Date", p[0x30:0x38]))
    lines.append(format_entry("Default Flash Image File Name", p[0x38:0x44]))

    if length >= 0x46 and p[0x44] != 0:
        lines.append(f"BIOS Revision: {p[0x44]}")
    return lines


def find_records(buf: bytes) -> Iterator[VpdRecord]:
    """Yield VPD records found at 4-byte boundaries of ``buf``."""
    for fp in range(0, len(buf) - 15, 4):
        if buf[fp:fp + 5] != _SIGNATURE:
            continue
        length = buf[fp + 5]
        end = fp + length - 1
        if 0 <= end < len(buf):
            yield VpdRecord(fp, bytes(buf[fp:fp + max(length, 6)]))


def scan(buf: bytes, options: Options) -> list[str]:
    """Produce the report lines for all records in ``buf``."""
    lines = []
    found = 0
    for record in find_records(buf):
        if record.offset % 16 and not options.quiet:
            lines.append(f"# Unaligned address ({record.address:#x})")
        if options.dump:
            lines.extend(hex_dump(record.data[:record.length]))
            found += 1
        else:
            decoded = decode_record(record, options.string, options.quiet)
            if decoded is not None:
                lines.extend(decoded)
                found += 1
    if not found and not options.quiet:
        lines.append("# No VPD structure found, sorry.")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Run the decoder command; returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_command_line(argv)
    except OptionError as exc:
        sys.stderr.write(str(exc).rstrip("\n") + "\n")
        return 2

    if options.help:
        sys.stdout.write(help_text())
        return 0
    if options.version:
        print(VERSION)
        return 0
    if not options.quiet:
        print(f"# vpddecode {VERSION}")

    try:
        buf = mem_chunk(VPD_BASE, VPD_SIZE, options.devmem)
    except MemoryReadError as exc:
        print(exc, file=sys.stderr)
        return 1

    for line in scan(buf, options):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())