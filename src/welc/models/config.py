"""
Configuration data models.

This module contains the configuration data structures loaded from
`config.toml`: collector settings for talking to the host event log
subsystem and report settings for the command line tables.
"""

from dataclasses import dataclass, field


@dataclass
class CollectorConfig:
    """
    Settings for `wevtutil` based collection, loaded from `[collector]`.
    """

    # Executable name or absolute path of wevtutil.
    wevtutil_path: str = "wevtutil"
    # Timeout in seconds for a single wevtutil invocation.
    command_timeout: float = 30.0
    # Log and skip logs or providers that cannot be read instead of failing.
    skip_inaccessible: bool = True
    # Host to collect from when none is given; empty means the local host.
    default_computer: str = ""


@dataclass
class ReportConfig:
    """
    Settings for printed reports, loaded from `[report]`.
    """

    # Maximum number of rows shown by the command line tables.
    max_rows: int = 50
    # Root logger level used by the command line.
    log_level: str = "INFO"


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    collector: CollectorConfig = field(default_factory=CollectorConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
