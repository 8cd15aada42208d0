"""
Reader for Message Compiler (mc.exe) generated header files.

Compiling an instrumentation manifest with `mc.exe` produces a C header
that declares each provider's GUID and a `#define` per channel symbol::

    //+
    // Provider Corp-WEC-Basic Event Count 0
    //+
    EXTERN_C __declspec(selectany) const GUID WEC_EVENTS_Basic = {0xcf27f07f, 0x7013, 0x483a, {0xbc, 0x74, 0x97, 0xa0, 0xf6, 0xaa, 0x32, 0xfc}};

    //
    // Channel
    //
    #define WEC_Basic_Domain_Controllers 0x10
    #define WEC_Basic_Member_Servers 0x11

The header is the only artifact of a custom channel manifest that names
both the provider and channel symbols, so it is the source for
`ChannelDefinition` records.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..models.channels import ChannelDefinition
from ..validation import HeaderParseError, handle_file_error

logger = logging.getLogger(__name__)

_PROVIDER_RE = re.compile(r"^//\s*Provider\s+(?P<name>.+?)\s+Event\s+Count\s+(?P<count>\d+)\s*$")
_GUID_RE = re.compile(
    r"^EXTERN_C\s+__declspec\(selectany\)\s+const\s+GUID\s+(?P<symbol>\w+)\s*=\s*(?P<init>\{.*\})\s*;"
)
_SECTION_RE = re.compile(r"^//\s*(?P<title>[A-Za-z][A-Za-z ]*?)\s*$")
_DEFINE_RE = re.compile(r"^#define\s+(?P<symbol>\w+)\s+(?P<value>0[xX][0-9A-Fa-f]+|\d+)\b")
_HEX_RE = re.compile(r"0[xX]([0-9A-Fa-f]+)")


@dataclass
class HeaderChannel:
    """A channel symbol and its numeric value."""

    symbol: str
    value: int


@dataclass
class HeaderProvider:
    """A provider block of a Message Compiler header."""

    name: str
    event_count: int = 0
    symbol: Optional[str] = None
    # Canonical lower-case GUID text, without braces.
    guid: Optional[str] = None
    channels: List[HeaderChannel] = field(default_factory=list)


def format_guid_initializer(initializer: str) -> str:
    """
    Render a C GUID initializer as GUID text.

    Examples:
        >>> format_guid_initializer("{0x1, 0x2, 0x3, {0x4, 0x5, 0x6, 0x7, 0x8, 0x9, 0xa, 0xb}}")
        '00000001-0002-0003-0405-060708090a0b'

    Raises:
        ValueError: If the initializer does not hold eleven hex numbers
    """
    parts = [int(number, 16) for number in _HEX_RE.findall(initializer)]
    if len(parts) != 11:
        raise ValueError(f"GUID initializer has {len(parts)} components, expected 11")
    data4 = "".join(f"{byte:02x}" for byte in parts[3:])
    return f"{parts[0]:08x}-{parts[1]:04x}-{parts[2]:04x}-{data4[:4]}-{data4[4:]}"


def parse_header(text: str) -> List[HeaderProvider]:
    """
    Parse the text of a Message Compiler header.

    Raises:
        HeaderParseError: If a channel block or GUID appears before any
            provider, or a GUID initializer is malformed
    """
    providers: List[HeaderProvider] = []
    current: Optional[HeaderProvider] = None
    in_channels = False

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if not line:
            continue

        match = _PROVIDER_RE.match(line)
        if match:
            current = HeaderProvider(name=match.group("name"), event_count=int(match.group("count")))
            providers.append(current)
            in_channels = False
            continue

        match = _GUID_RE.match(line)
        if match:
            if current is None:
                raise HeaderParseError(
                    f"GUID {match.group('symbol')} declared before any provider", line_number
                )
            if current.symbol is None:
                try:
                    current.guid = format_guid_initializer(match.group("init"))
                except ValueError as e:
                    raise HeaderParseError(str(e), line_number)
                current.symbol = match.group("symbol")
            continue

        match = _SECTION_RE.match(line)
        if match:
            in_channels = match.group("title") == "Channel"
            if in_channels and current is None:
                raise HeaderParseError("Channel block before any provider", line_number)
            continue

        match = _DEFINE_RE.match(line)
        if match and in_channels:
            current.channels.append(
                HeaderChannel(symbol=match.group("symbol"), value=int(match.group("value"), 0))
            )

    logger.debug(
        f"Parsed {len(providers)} providers with "
        f"{sum(len(p.channels) for p in providers)} channels from header"
    )
    return providers


def read_header(path: Union[str, Path], encoding: str = "utf-8") -> List[HeaderProvider]:
    """
    Read and parse a Message Compiler header file.

    A UTF-8 byte order mark is skipped when `encoding` is "utf-8".

    Raises:
        FileNotFoundError: If the file does not exist
        HeaderParseError: If the header cannot be decoded or interpreted
    """
    path = Path(path)
    if encoding.lower().replace("-", "") == "utf8":
        encoding = "utf-8-sig"
    try:
        text = path.read_text(encoding=encoding)
    except OSError as e:
        handle_file_error(e, f"reading header {path}", logger=logger)
        raise
    except (UnicodeDecodeError, LookupError) as e:
        raise HeaderParseError(f"cannot decode {path} as {encoding}: {e}") from e
    logger.info(f"Reading channel definitions from header: {path}")
    return parse_header(text)


def channel_titles(symbols: List[str]) -> List[str]:
    """
    Human-readable channel titles from a provider's channel symbols.

    The prefix shared by all symbols (up to an underscore) is dropped and
    remaining underscores become spaces. A lone symbol keeps its last
    underscore-separated token.

    Examples:
        >>> channel_titles(["WEC_Basic_Domain_Controllers", "WEC_Basic_Security"])
        ['Domain Controllers', 'Security']
    """
    if not symbols:
        return []
    if len(symbols) == 1:
        return [symbols[0].rsplit("_", 1)[-1]]

    prefix = os.path.commonprefix(symbols)
    prefix = prefix[: prefix.rfind("_") + 1]
    return [(symbol[len(prefix):] or symbol).replace("_", " ") for symbol in symbols]


def channel_definitions(providers: Iterable[HeaderProvider]) -> List[ChannelDefinition]:
    """
    ChannelDefinition records for every channel of every provider.

    Channel names follow the `<provider>/<channel title>` convention.
    """
    definitions = []
    for provider in providers:
        symbols = [channel.symbol for channel in provider.channels]
        for symbol, title in zip(symbols, channel_titles(symbols)):
            definitions.append(
                ChannelDefinition(
                    provider_name=provider.name,
                    provider_symbol=provider.symbol,
                    channel_name=f"{provider.name}/{title}",
                    channel_symbol=symbol,
                )
            )
    return definitions
