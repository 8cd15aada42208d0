"""
Tabular views of channel records.

The frames use the record field names of the event log tooling
(`ChannelName`, `MaxEventLogSize`, ...) as column names so printed tables
read the same as the PowerShell output administrators are used to.
"""

import logging
from typing import Iterable

import polars as pl

from .models.channels import ChannelConfig, ChannelDefinition

logger = logging.getLogger(__name__)

CHANNEL_CONFIG_SCHEMA = {
    "ChannelName": pl.Utf8,
    "LogFullName": pl.Utf8,
    "LogMode": pl.Utf8,
    "Enabled": pl.Boolean,
    "MaxEventLogSize": pl.Int64,
}

CHANNEL_DEFINITION_SCHEMA = {
    "ProviderName": pl.Utf8,
    "ProviderSymbol": pl.Utf8,
    "ChannelName": pl.Utf8,
    "ChannelSymbol": pl.Utf8,
}


def channel_configs_frame(configs: Iterable[ChannelConfig]) -> pl.DataFrame:
    """Build a DataFrame with one row per ChannelConfig."""
    rows = [
        {
            "ChannelName": config.channel_name,
            "LogFullName": config.log_full_name,
            "LogMode": config.log_mode,
            "Enabled": config.enabled,
            "MaxEventLogSize": config.max_event_log_size,
        }
        for config in configs
    ]
    logger.debug(f"Building channel config frame with {len(rows)} rows")
    return pl.DataFrame(rows, schema=CHANNEL_CONFIG_SCHEMA)


def channel_definitions_frame(definitions: Iterable[ChannelDefinition]) -> pl.DataFrame:
    """Build a DataFrame with one row per ChannelDefinition."""
    rows = [
        {
            "ProviderName": definition.provider_name,
            "ProviderSymbol": definition.provider_symbol,
            "ChannelName": definition.channel_name,
            "ChannelSymbol": definition.channel_symbol,
        }
        for definition in definitions
    ]
    logger.debug(f"Building channel definition frame with {len(rows)} rows")
    return pl.DataFrame(rows, schema=CHANNEL_DEFINITION_SCHEMA)


def render_frame(frame: pl.DataFrame, max_rows: int = 50) -> str:
    """Render a frame as a text table showing at most `max_rows` rows."""
    with pl.Config(
        tbl_rows=max_rows,
        tbl_cols=-1,
        fmt_str_lengths=120,
        tbl_width_chars=200,
        tbl_hide_dataframe_shape=True,
    ):
        return str(frame)
