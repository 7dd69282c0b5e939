# vpdscan

`vpdscan` searches the BIOS memory area (physical addresses
`0xF0000`–`0xFFFFF`) for IBM Vital Product Data (VPD) records and prints
their contents: BIOS build ID, box and motherboard serial numbers, machine
type/model, BIOS release date, default flash image file name and BIOS
revision. This data is present on IBM and Lenovo machines such as ThinkPad,
ThinkCentre, NetVista and xSeries systems.

Records are looked for at every 4-byte boundary and are recognised by their
`\xAA\x55VPD` signature. A record whose checksum does not match is still
decoded, preceded by a `# Bad checksum!` line.

## Installation

```
pip install .
```

## Command line

Reading `/dev/mem` usually needs root:

```
sudo vpdscan
```

Options:

```
 -d, --dev-mem FILE     Read memory from device FILE (default: /dev/mem)
 -h, --help             Display this help text and exit
 -s, --string KEYWORD   Only display the value of the given VPD string
 -u, --dump             Do not decode the VPD records
 -V, --version          Display the version and exit
```

Valid keywords for `--string` are `bios-build-id`, `box-serial-number`,
`motherboard-serial-number`, `machine-type-model` and `bios-release-date`;
case is ignored. `--string` turns off the `#` comment lines, so the output
holds nothing but the value. `--string` and `--dump` cannot be given
together; `--string` can be given only once.

The exit status is 0 on success, 1 when memory cannot be read and 2 for a
command line error.

`--dev-mem` may also name a regular file holding an image of physical
memory. The BIOS area is read at offset `0xF0000` of that file, so the image
must be at least 1 MiB long; a shorter file is rejected with
"Can't map beyond end of file".

## Library use

```python
from vpdscan.memio import mem_chunk
from vpdscan.decoder import VPD_BASE, VPD_SIZE, find_records, decode_record

buf = mem_chunk(VPD_BASE, VPD_SIZE, "/dev/mem")
for record in find_records(buf):
    lines = decode_record(record, None, False)  # None if the record is too short
    if lines is not None:
        print("\n".join(lines))
```

`vpdscan.decoder` also has `scan(buf, options)`, which returns the report
lines the command prints, `hex_dump` and `format_entry`. Command line
parsing lives in `vpdscan.options` (`parse_command_line`, `Options`,
`find_string_keyword`, `OptionError`).

`vpdscan.memio` holds the helpers the scanner is built on: `checksum`,
`read_file`, `write_dump`, the little-endian readers `word`, `dword` and
`qword`, and `u64_range`. When memory cannot be read, `mem_chunk` and
`read_file` raise `MemoryReadError`; `read_file` returns `None` for a file
that does not exist.

## What it does not do

`vpdscan` only reads VPD records. It does not decode DMI/SMBIOS tables or
other BIOS structures, and it does not write anything back to memory.

## Tests

```
pip install .[test]
pytest
```