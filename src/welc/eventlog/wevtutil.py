"""
Parsers for `wevtutil` text output.

`wevtutil gl <log>` and `wevtutil gp <provider>` print an indented
``key: value`` tree::

    name: Security
    enabled: true
    type: Admin
    logging:
      logFileName: %SystemRoot%\\System32\\Winevt\\Logs\\Security.evtx
      retention: false
      autoBackup: false
      maxSize: 20971520

Blocks are opened by a key with no value and indented by two spaces. Keys
repeated inside one block (``channel:`` under ``channels:``) are collected
into a list. `wevtutil el` and `wevtutil ep` print one name per line.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from ..models.eventlog import (
    EventLogConfiguration,
    EventLogIsolation,
    EventLogLink,
    EventLogMode,
    EventLogType,
    ProviderMetadata,
)
from ..validation import WevtutilParseError

logger = logging.getLogger(__name__)

Node = Union[str, Dict[str, Any], List[Any]]

# Channel reference flag marking a channel imported from another manifest.
CHANNEL_REFERENCE_IMPORTED = 0x1

_LOG_TYPES = {
    "admin": EventLogType.ADMINISTRATIVE,
    "administrative": EventLogType.ADMINISTRATIVE,
    "operational": EventLogType.OPERATIONAL,
    "analytic": EventLogType.ANALYTICAL,
    "analytical": EventLogType.ANALYTICAL,
    "debug": EventLogType.DEBUG,
}

_ISOLATIONS = {isolation.value.lower(): isolation for isolation in EventLogIsolation}


def parse_wevtutil_tree(text: str) -> Dict[str, Any]:
    """
    Parse indented ``key: value`` output into nested dictionaries.

    Scalars stay strings; a block with no children becomes an empty dict.
    A line without a colon continues the previous scalar value (multi-line
    message strings).

    Raises:
        WevtutilParseError: If the first non-blank line is not a key
    """
    root: Dict[str, Any] = {}
    stack = [(-1, root)]
    last = None  # (container, key) of the most recent scalar

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.rstrip()
        if not line.strip():
            continue

        stripped = line.lstrip(" ")
        indent = len(line) - len(stripped)
        key, sep, value = stripped.partition(":")

        if not sep or not key.strip():
            if not root:
                raise WevtutilParseError(f"expected 'key: value', got {stripped!r}", line_number)
            if last is None:
                logger.debug(f"Ignoring stray line {line_number}: {stripped!r}")
                continue
            container, last_key = last
            if isinstance(container[last_key], list):
                container[last_key][-1] += "\n" + stripped
            else:
                container[last_key] += "\n" + stripped
            continue

        while stack[-1][0] >= indent:
            stack.pop()
        parent = stack[-1][1]

        key = key.strip()
        value = value.strip()
        node: Node = value if value else {}

        if key in parent:
            if isinstance(parent[key], list):
                parent[key].append(node)
            else:
                parent[key] = [parent[key], node]
        else:
            parent[key] = node

        if isinstance(node, dict):
            stack.append((indent, node))
            last = None
        else:
            last = (parent, key)

    return root


def parse_name_list(text: str) -> List[str]:
    """Parse `wevtutil el` / `wevtutil ep` output: one name per line."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def _text(node: Dict[str, Any], key: str) -> Optional[str]:
    value = node.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def _block(node: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = node.get(key)
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def _bool(value: Optional[str], field_name: str, default: bool = False) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise WevtutilParseError(f"{field_name} is not a boolean: {value!r}")


def _int(value: Optional[str], field_name: str, default: Optional[int] = 0) -> Optional[int]:
    if value is None:
        return default
    value = value.strip()
    try:
        if value.lower().startswith("0x"):
            return int(value, 16)
        return int(value)
    except ValueError:
        raise WevtutilParseError(f"{field_name} is not an integer: {value!r}")


def derive_log_mode(retention: bool, auto_backup: bool) -> EventLogMode:
    """
    Map the `retention`/`autoBackup` flags to a log mode.

    Without retention the log overwrites its oldest events. With retention
    it either archives itself when full or stops accepting events.
    """
    if not retention:
        return EventLogMode.CIRCULAR
    if auto_backup:
        return EventLogMode.AUTO_BACKUP
    return EventLogMode.RETAIN


def parse_log_configuration(text: str) -> EventLogConfiguration:
    """
    Parse `wevtutil gl <log>` output.

    Raises:
        WevtutilParseError: If the output has no log name or malformed values
    """
    tree = parse_wevtutil_tree(text)
    name = _text(tree, "name")
    if name is None:
        raise WevtutilParseError("log configuration has no 'name'")

    log_type = None
    type_text = _text(tree, "type")
    if type_text is not None:
        log_type = _LOG_TYPES.get(type_text.lower())
        if log_type is None:
            logger.warning(f"Unknown channel type '{type_text}' for log '{name}'")

    isolation = None
    isolation_text = _text(tree, "isolation")
    if isolation_text is not None:
        isolation = _ISOLATIONS.get(isolation_text.lower())
        if isolation is None:
            logger.warning(f"Unknown isolation '{isolation_text}' for log '{name}'")

    logging_block = _block(tree, "logging")
    retention = _bool(_text(logging_block, "retention"), "logging.retention")
    auto_backup = _bool(_text(logging_block, "autoBackup"), "logging.autoBackup")

    return EventLogConfiguration(
        log_name=name,
        is_enabled=_bool(_text(tree, "enabled"), "enabled"),
        log_type=log_type,
        log_isolation=isolation,
        owning_provider_name=_text(tree, "owningPublisher"),
        log_file_path=_text(logging_block, "logFileName"),
        maximum_size_in_bytes=_int(_text(logging_block, "maxSize"), "logging.maxSize"),
        log_mode=derive_log_mode(retention, auto_backup),
        is_classic_log=_bool(_text(tree, "classicEventlog"), "classicEventlog"),
        security_descriptor=_text(tree, "channelAccess"),
    )


def parse_provider_metadata(text: str) -> ProviderMetadata:
    """
    Parse `wevtutil gp <provider>` output.

    Raises:
        WevtutilParseError: If the output has no provider name or malformed values
    """
    tree = parse_wevtutil_tree(text)
    name = _text(tree, "name")
    if name is None:
        raise WevtutilParseError("provider metadata has no 'name'")

    guid = _text(tree, "guid")
    if guid is not None:
        guid = guid.strip("{}").lower()

    log_links = []
    for channel in _as_list(_block(tree, "channels").get("channel")):
        if not isinstance(channel, dict):
            continue
        log_name = _text(channel, "name")
        if log_name is None:
            logger.debug(f"Skipping unnamed channel reference of provider '{name}'")
            continue
        flags = _int(_text(channel, "flags"), "channel.flags")
        log_links.append(
            EventLogLink(
                log_name=log_name,
                channel_id=_int(_text(channel, "id"), "channel.id", default=None),
                is_imported=bool(flags & CHANNEL_REFERENCE_IMPORTED),
                display_name=_text(channel, "message"),
            )
        )

    return ProviderMetadata(
        name=name,
        id=guid,
        message_file_path=_text(tree, "messageFileName"),
        resource_file_path=_text(tree, "resourceFileName"),
        parameter_file_path=_text(tree, "parameterFileName"),
        help_link=_text(tree, "helpLink"),
        log_links=log_links,
    )
