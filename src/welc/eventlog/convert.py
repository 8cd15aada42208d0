"""
Conversions from collected event log metadata to channel records.
"""

from typing import List

from ..models.channels import ChannelConfig, ChannelDefinition, EventLogChannel
from ..models.eventlog import EventLogConfiguration, ProviderMetadata


def channel_config_from_log(log: EventLogConfiguration) -> ChannelConfig:
    """Build the ChannelConfig describing one collected log configuration."""
    return ChannelConfig(
        channel_name=log.log_name,
        log_full_name=log.log_file_path,
        log_mode=log.log_mode.value,
        enabled=log.is_enabled,
        max_event_log_size=log.maximum_size_in_bytes,
    )


def channel_configs(channel: EventLogChannel) -> List[ChannelConfig]:
    """ChannelConfig records for every log configuration held by `channel`."""
    return [channel_config_from_log(log) for log in channel.win_event_log]


def channel_definitions_from_provider(provider: ProviderMetadata) -> List[ChannelDefinition]:
    """
    One ChannelDefinition per channel the provider writes to.

    Registered provider metadata carries no symbols, so both symbol fields
    stay unset.
    """
    return [
        ChannelDefinition(provider_name=provider.name, channel_name=link.log_name)
        for link in provider.log_links
    ]


def channel_definitions(channel: EventLogChannel) -> List[ChannelDefinition]:
    """ChannelDefinition records for every provider held by `channel`."""
    definitions = []
    for provider in channel.provider:
        definitions.extend(channel_definitions_from_provider(provider))
    return definitions
