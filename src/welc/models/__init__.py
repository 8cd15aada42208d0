"""
Data models for the welc package.

Channel Records:
- ChannelDefinition: provider/channel pair by name and symbol
- ChannelConfig: runtime configuration of a channel
- EventLogChannel: host name with collected configuration and provider metadata

Event Log Mirrors:
- Local mirrors of the host event log subsystem's configuration and
  provider metadata records, with their enumerations

Configuration Models:
- Collector and report settings loaded from `config.toml`
"""

# Channel records
from .channels import ChannelConfig, ChannelDefinition, EventLogChannel

# Event log mirrors
from .eventlog import (
    EventLogConfiguration,
    EventLogIsolation,
    EventLogLink,
    EventLogMode,
    EventLogType,
    ProviderMetadata,
)

# Configuration models
from .config import AppConfig, CollectorConfig, ReportConfig

__all__ = [
    # Channel records
    "ChannelConfig",
    "ChannelDefinition",
    "EventLogChannel",
    # Event log mirrors
    "EventLogConfiguration",
    "EventLogIsolation",
    "EventLogLink",
    "EventLogMode",
    "EventLogType",
    "ProviderMetadata",
    # Configuration
    "AppConfig",
    "CollectorConfig",
    "ReportConfig",
]
