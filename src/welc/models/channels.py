"""
Windows Event Log channel records.

These are plain value containers that callers populate from an event log
provider enumeration (see `welc.eventlog`) or from a Message Compiler header
(see `welc.manifest`). They carry no validation: whatever the caller stores
is read back unchanged.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .eventlog import EventLogConfiguration, ProviderMetadata


@dataclass
class ChannelDefinition:
    """
    A provider/channel pair, identified by name and by symbol.
    """

    # Name of the event provider (e.g., "Corp-WEC-Basic").
    provider_name: Optional[str] = None
    # Programmatic identifier for the provider (e.g., "WEC_EVENTS_Basic").
    provider_symbol: Optional[str] = None
    # Name of the log channel (e.g., "Corp-WEC-Basic/Security").
    channel_name: Optional[str] = None
    # Programmatic identifier for the channel (e.g., "WEC_Basic_Security").
    channel_symbol: Optional[str] = None


@dataclass
class ChannelConfig:
    """
    Runtime configuration of a single event log channel.
    """

    # Name of the log channel being configured.
    channel_name: Optional[str] = None
    # Fully-qualified log path or name.
    log_full_name: Optional[str] = None
    # Logging mode descriptor, stored as free-form text ("Circular", "AutoBackup", "Retain").
    log_mode: Optional[str] = None
    # Whether the channel is active.
    enabled: bool = False
    # Maximum size of the log in bytes (signed 64-bit range).
    max_event_log_size: int = 0


@dataclass
class EventLogChannel:
    """
    Event log configuration and provider metadata collected from one host.
    """

    # Name of the host the data was collected from.
    ps_computer_name: Optional[str] = None
    # Configuration entries collected from that host.
    win_event_log: List[EventLogConfiguration] = field(default_factory=list)
    # Provider metadata entries collected from that host.
    provider: List[ProviderMetadata] = field(default_factory=list)
