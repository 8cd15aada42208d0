"""
Local mirrors of the host event log subsystem's records.

The Windows event log API describes logs and providers with its own
configuration and metadata objects. The classes below carry the subset of
those fields that `wevtutil` reports, so collected data can be held without
a Windows runtime.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class EventLogMode(Enum):
    """Behavior of a log once it reaches its maximum size."""

    CIRCULAR = "Circular"
    AUTO_BACKUP = "AutoBackup"
    RETAIN = "Retain"


class EventLogType(Enum):
    """Channel type as declared in the provider manifest."""

    ADMINISTRATIVE = "Administrative"
    OPERATIONAL = "Operational"
    ANALYTICAL = "Analytical"
    DEBUG = "Debug"


class EventLogIsolation(Enum):
    """Access isolation applied to a channel."""

    APPLICATION = "Application"
    SYSTEM = "System"
    CUSTOM = "Custom"


@dataclass
class EventLogConfiguration:
    """
    Configuration of one event log as reported by the host.
    """

    log_name: str
    is_enabled: bool = False
    # None for classic logs, which have no manifest-declared type.
    log_type: Optional[EventLogType] = None
    log_isolation: Optional[EventLogIsolation] = None
    owning_provider_name: Optional[str] = None
    log_file_path: Optional[str] = None
    maximum_size_in_bytes: int = 0
    log_mode: EventLogMode = EventLogMode.CIRCULAR
    is_classic_log: bool = False
    security_descriptor: Optional[str] = None


@dataclass
class EventLogLink:
    """
    A channel a provider writes to.
    """

    log_name: str
    channel_id: Optional[int] = None
    # True when the channel is imported from another provider's manifest.
    is_imported: bool = False
    display_name: Optional[str] = None


@dataclass
class ProviderMetadata:
    """
    Metadata of one registered event provider.
    """

    name: str
    # Provider GUID in registry format, without braces.
    id: Optional[str] = None
    message_file_path: Optional[str] = None
    resource_file_path: Optional[str] = None
    parameter_file_path: Optional[str] = None
    help_link: Optional[str] = None
    log_links: List[EventLogLink] = field(default_factory=list)
