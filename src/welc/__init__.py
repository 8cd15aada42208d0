"""
welc: Windows Event Log channel metadata.

This package provides records describing event log channels and the tools
to fill them:
- models: ChannelDefinition, ChannelConfig, EventLogChannel and local
  mirrors of the host's event log configuration and provider metadata
- eventlog: collection from a local or remote host through `wevtutil`
- manifest: channel definitions from Message Compiler headers
- report: polars tables of channel records
- config: TOML configuration with singleton access
- validation: exceptions, error handling and validators
- cli: the `welc` command

Usage:
    From command line:
        welc channels Security
        welc header CustomEventChannels.h

    Programmatically:
        from welc import EventLogChannelCollector, channel_configs
        channel = EventLogChannelCollector().collect(log_names=["Security"], provider_names=[])
        configs = channel_configs(channel)
"""

# Main interfaces
from .config import get_config, clear_config_cache, set_config_path
from .cli import main_cli

# Channel records and event log mirrors
from .models import (
    ChannelConfig,
    ChannelDefinition,
    EventLogChannel,
    EventLogConfiguration,
    EventLogLink,
    EventLogMode,
    ProviderMetadata,
)

# Collection and conversion
from .eventlog import (
    EventLogChannelCollector,
    channel_config_from_log,
    channel_configs,
    channel_definitions,
)

# Manifest headers
from .manifest import read_header, parse_header

# Validation utilities
from .validation import (
    CommandError,
    HeaderParseError,
    ValidationError,
    WelcError,
    WevtutilParseError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "main_cli",
    # Records
    "ChannelConfig",
    "ChannelDefinition",
    "EventLogChannel",
    "EventLogConfiguration",
    "EventLogLink",
    "EventLogMode",
    "ProviderMetadata",
    # Collection
    "EventLogChannelCollector",
    "channel_config_from_log",
    "channel_configs",
    "channel_definitions",
    # Manifest headers
    "read_header",
    "parse_header",
    # Errors
    "CommandError",
    "HeaderParseError",
    "ValidationError",
    "WelcError",
    "WevtutilParseError",
]
