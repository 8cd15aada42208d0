"""
Channel definitions from compiled instrumentation manifests.
"""

from .header import (
    HeaderChannel,
    HeaderProvider,
    channel_definitions,
    channel_titles,
    format_guid_initializer,
    parse_header,
    read_header,
)

__all__ = [
    "HeaderChannel",
    "HeaderProvider",
    "channel_definitions",
    "channel_titles",
    "format_guid_initializer",
    "parse_header",
    "read_header",
]
