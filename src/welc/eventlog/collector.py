"""
Collection of event log channel metadata from a host.

The collector drives `wevtutil` to enumerate logs and providers on the
local machine or, through `/r:<host>`, on a remote one, and assembles the
results into an `EventLogChannel` record.
"""

import fnmatch
import logging
import socket
from typing import Callable, Iterable, List, Optional, TypeVar

from ..config import get_config
from ..models.channels import EventLogChannel
from ..models.config import CollectorConfig
from ..models.eventlog import EventLogConfiguration, ProviderMetadata
from ..system.commands import build_wevtutil_command, run_command
from ..validation import CommandError, WelcError, validate_computer_name
from .wevtutil import parse_log_configuration, parse_name_list, parse_provider_metadata

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _has_wildcard(pattern: str) -> bool:
    return any(ch in pattern for ch in "*?[")


def match_names(available: Iterable[str], patterns: Optional[Iterable[str]]) -> List[str]:
    """
    Select names from `available` matching any of `patterns`.

    Matching is case-insensitive with shell-style wildcards. A pattern
    without wildcards is kept even when it is not listed, so that asking for
    a specific name reports its own error instead of silently matching
    nothing. With no patterns every available name is returned.
    """
    available = list(available)
    if patterns is None:
        return available

    selected: List[str] = []
    seen = set()
    for pattern in patterns:
        if _has_wildcard(pattern):
            matches = [
                name for name in available
                if fnmatch.fnmatchcase(name.lower(), pattern.lower())
            ]
            if not matches:
                logger.warning(f"No event log names match '{pattern}'")
        else:
            matches = [name for name in available if name.lower() == pattern.lower()]
            if not matches:
                matches = [pattern]
        for name in matches:
            if name.lower() not in seen:
                seen.add(name.lower())
                selected.append(name)
    return selected


class EventLogChannelCollector:
    """
    Reads event log configuration and provider metadata from one host.

    Args:
        config: Collector settings; the global configuration when None.
        computer_name: Host to query; falls back to `config.default_computer`
            and then to the local machine.
    """

    def __init__(
        self,
        config: Optional[CollectorConfig] = None,
        computer_name: Optional[str] = None,
    ):
        self.config = config or get_config().collector
        remote = computer_name if computer_name is not None else self.config.default_computer
        self.remote_computer = validate_computer_name(remote or "", field_name="computer_name")

    @property
    def computer_name(self) -> str:
        """Name of the queried host, as reported in `EventLogChannel.ps_computer_name`."""
        return self.remote_computer or socket.gethostname()

    def _wevtutil(self, verb: str, *args: str) -> str:
        command = build_wevtutil_command(
            self.config.wevtutil_path,
            verb,
            *args,
            computer_name=self.remote_computer or None,
        )
        returncode, stdout, stderr = run_command(command, timeout=self.config.command_timeout)
        if returncode != 0:
            raise CommandError(
                f"'{' '.join(command)}' failed with exit code {returncode}: {stderr.strip()}",
                command=command,
                returncode=returncode,
                stderr=stderr,
            )
        return stdout

    def list_log_names(self) -> List[str]:
        """Names of all logs registered on the host (`wevtutil el`)."""
        return parse_name_list(self._wevtutil("el"))

    def list_provider_names(self) -> List[str]:
        """Names of all providers registered on the host (`wevtutil ep`)."""
        return parse_name_list(self._wevtutil("ep"))

    def get_log_configuration(self, log_name: str) -> EventLogConfiguration:
        """Configuration of one log (`wevtutil gl`)."""
        return parse_log_configuration(self._wevtutil("gl", log_name))

    def get_provider_metadata(self, provider_name: str) -> ProviderMetadata:
        """Metadata of one provider (`wevtutil gp`)."""
        return parse_provider_metadata(self._wevtutil("gp", provider_name))

    def _read_each(self, names: List[str], reader: Callable[[str], T], kind: str) -> List[T]:
        results: List[T] = []
        for name in names:
            try:
                results.append(reader(name))
            except WelcError as e:
                if not self.config.skip_inaccessible:
                    raise
                logger.warning(f"Skipping {kind} '{name}' on {self.computer_name}: {e}")
        return results

    def collect_logs(self, log_names: Optional[Iterable[str]] = None) -> List[EventLogConfiguration]:
        """
        Configurations of the logs matching `log_names`.

        None selects every log; an empty sequence selects none without
        querying the host.
        """
        if log_names is not None:
            log_names = list(log_names)
            if not log_names:
                return []
        names = match_names(self.list_log_names(), log_names)
        return self._read_each(names, self.get_log_configuration, "log")

    def collect_providers(
        self, provider_names: Optional[Iterable[str]] = None
    ) -> List[ProviderMetadata]:
        """Metadata of the providers matching `provider_names`, selected like `collect_logs`."""
        if provider_names is not None:
            provider_names = list(provider_names)
            if not provider_names:
                return []
        names = match_names(self.list_provider_names(), provider_names)
        return self._read_each(names, self.get_provider_metadata, "provider")

    def collect(
        self,
        log_names: Optional[Iterable[str]] = None,
        provider_names: Optional[Iterable[str]] = None,
    ) -> EventLogChannel:
        """
        Collect log configurations and provider metadata into one record.

        Raises:
            CommandError: If enumerating logs or providers fails, or reading a
                single entry fails while `skip_inaccessible` is off
        """
        logger.info(f"Collecting event log channels from {self.computer_name}")
        channel = EventLogChannel(
            ps_computer_name=self.computer_name,
            win_event_log=self.collect_logs(log_names),
            provider=self.collect_providers(provider_names),
        )
        logger.info(
            f"Collected {len(channel.win_event_log)} logs and "
            f"{len(channel.provider)} providers from {channel.ps_computer_name}"
        )
        return channel
