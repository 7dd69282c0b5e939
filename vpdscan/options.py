"""Command line handling for the VPD decoder."""

from __future__ import annotations

import getopt
from dataclasses import dataclass

from .memio import DEFAULT_MEM_DEV


@dataclass(frozen=True)
class StringKeyword:
    """A named string field of a VPD record."""

    keyword: str
    offset: int
    length: int


STRING_KEYWORDS: tuple[StringKeyword, ...] = (
    StringKeyword("bios-build-id", 0x0D, 9),
    StringKeyword("box-serial-number", 0x16, 7),
    StringKeyword("motherboard-serial-number", 0x1D, 11),
    StringKeyword("machine-type-model", 0x28, 7),
    StringKeyword("bios-release-date", 0x30, 8),
)


class OptionError(Exception):
    """Raised for invalid command line arguments."""


@dataclass
class Options:
    """Settings chosen on the command line."""

    devmem: str = DEFAULT_MEM_DEV
    help: bool = False
    version: bool = False
    dump: bool = False
    quiet: bool = False
    string: StringKeyword | None = None


def keyword_list_text() -> str:
    """Text listing the valid string keywords."""
    lines = ["Valid string keywords are:"]
    lines.extend(f"  {kw.keyword}" for kw in STRING_KEYWORDS)
    return "\n".join(lines) + "\n"


def find_string_keyword(name: str) -> StringKeyword:
    """Look up a string keyword, ignoring case."""
    wanted = name.lower()
    for kw in STRING_KEYWORDS:
        if kw.keyword == wanted:
            return kw
    raise OptionError(f"Invalid string keyword: {name}\n{keyword_list_text()}")


_SHORT_OPTS = "d:hs:uV"
_LONG_OPTS = ["dev-mem=", "help", "string=", "dump", "version"]


def parse_command_line(argv: list[str]) -> Options:
    """Parse arguments (without the program name) into Options."""
    try:
        parsed, _rest = getopt.gnu_getopt(list(argv), _SHORT_OPTS, _LONG_OPTS)
    except getopt.GetoptError as exc:
        if exc.opt in ("s", "string") and "requires argument" in exc.msg:
            raise OptionError(
                f"String keyword expected\n{keyword_list_text()}"
            ) from exc
        raise OptionError(exc.msg) from exc

    options = Options()
    for name, value in parsed:
        if name in ("-d", "--dev-mem"):
            options.devmem = value
        elif name in ("-h", "--help"):
            options.help = True
        elif name in ("-s", "--string"):
            if options.string is not None:
                raise OptionError("Only one string can be specified")
            options.string = find_string_keyword(value)
            options.quiet = True
        elif name in ("-u", "--dump"):
            options.dump = True
        elif name in ("-V", "--version"):
            options.version = True

    if options.dump and options.string is not None:
        raise OptionError("Options --string and --dump are mutually exclusive")
    return options


def help_text() -> str:
    """Usage text for the command."""
    return (
        "Usage: vpddecode [OPTIONS]\n"
        "Options are:\n"
        f" -d, --dev-mem FILE     Read memory from device FILE (default: {DEFAULT_MEM_DEV})\n"
        " -h, --help             Display this help text and exit\n"
        " -s, --string KEYWORD   Only display the value of the given VPD string\n"
        " -u, --dump             Do not decode the VPD records\n"
        " -V, --version          Display the version and exit\n"
    )