"""
Configuration validation utilities.

This module turns the raw `[collector]` and `[report]` tables into validated
configuration models.
"""

import logging
from typing import Any, Dict

from ..models.config import AppConfig, CollectorConfig, ReportConfig
from ..validation import (
    ValidationError,
    validate_boolean,
    validate_computer_name,
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_collector_config(collector_data: Dict[str, Any]) -> CollectorConfig:
    """
    Validate and create a CollectorConfig from raw configuration data.

    Args:
        collector_data: Raw `[collector]` table from TOML

    Returns:
        Validated CollectorConfig instance

    Raises:
        ValidationError: If validation fails
    """
    defaults = CollectorConfig()
    try:
        wevtutil_path = collector_data.get("wevtutil_path", defaults.wevtutil_path)
        if not isinstance(wevtutil_path, str) or not wevtutil_path.strip():
            raise ValidationError(
                "collector.wevtutil_path must be a non-empty string",
                field_name="collector.wevtutil_path",
                value=wevtutil_path,
            )

        command_timeout = validate_positive_float(
            collector_data.get("command_timeout", defaults.command_timeout),
            min_value=0.1,
            max_value=600.0,
            field_name="collector.command_timeout",
        )

        skip_inaccessible = validate_boolean(
            collector_data.get("skip_inaccessible", defaults.skip_inaccessible),
            field_name="collector.skip_inaccessible",
        )

        default_computer = validate_computer_name(
            collector_data.get("default_computer", defaults.default_computer),
            field_name="collector.default_computer",
        )

        return CollectorConfig(
            wevtutil_path=wevtutil_path.strip(),
            command_timeout=command_timeout,
            skip_inaccessible=skip_inaccessible,
            default_computer=default_computer,
        )

    except ValidationError as e:
        logger.error(f"Collector configuration validation failed: {e}")
        raise


def validate_report_config(report_data: Dict[str, Any]) -> ReportConfig:
    """
    Validate and create a ReportConfig from raw configuration data.

    Raises:
        ValidationError: If validation fails
    """
    defaults = ReportConfig()
    try:
        max_rows = validate_positive_integer(
            report_data.get("max_rows", defaults.max_rows),
            min_value=1,
            max_value=10000,
            field_name="report.max_rows",
        )

        log_level = validate_enum_choice(
            report_data.get("log_level", defaults.log_level),
            valid_choices=LOG_LEVELS,
            field_name="report.log_level",
            case_sensitive=False,
        )

        return ReportConfig(max_rows=max_rows, log_level=log_level)

    except ValidationError as e:
        logger.error(f"Report configuration validation failed: {e}")
        raise


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name, {})
    if not isinstance(section, dict):
        raise ValidationError(
            f"[{name}] must be a table, got {type(section).__name__}",
            field_name=name,
            value=section,
        )
    return section


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """Validate the whole parsed `config.toml` document."""
    return AppConfig(
        collector=validate_collector_config(_section(config_data, "collector")),
        report=validate_report_config(_section(config_data, "report")),
    )
