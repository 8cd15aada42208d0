"""
Access to the host event log subsystem through `wevtutil`.
"""

from .collector import EventLogChannelCollector, match_names
from .convert import (
    channel_config_from_log,
    channel_configs,
    channel_definitions,
    channel_definitions_from_provider,
)
from .wevtutil import (
    derive_log_mode,
    parse_log_configuration,
    parse_name_list,
    parse_provider_metadata,
    parse_wevtutil_tree,
)

__all__ = [
    "EventLogChannelCollector",
    "match_names",
    "channel_config_from_log",
    "channel_configs",
    "channel_definitions",
    "channel_definitions_from_provider",
    "derive_log_mode",
    "parse_log_configuration",
    "parse_name_list",
    "parse_provider_metadata",
    "parse_wevtutil_tree",
]
