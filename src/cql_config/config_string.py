"""
Config string serialization.

A config string carries a whole ``ClusterConfig`` as one value, for example
in an environment variable::

    10.0.0.1,10.0.0.2?consistency=localQuorum&timeout=5s&keyspace=app

Hosts come first, comma separated, followed by ``?`` and ``&`` separated
``key=value`` pairs. Only fields that differ from the defaults are written,
always in the order of ``CONFIG_KEYS``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import timedelta
from urllib.parse import quote_plus, unquote_plus

from .cluster_config import ClusterConfig, PasswordAuthenticator, SslOptions, new_cluster_config
from .consistency import CONSISTENCY_LEVELS, consistency_name
from .duration import format_duration, parse_duration
from .exceptions import (
    ConfigValueError,
    DurationError,
    InvalidKeyError,
    MissingSeparatorError,
)

logger = logging.getLogger(__name__)

# Wire keys, in the order they are written.
CONFIG_KEYS: tuple[str, ...] = (
    "consistency",
    "timeout",
    "connectTimeout",
    "keyspace",
    "numConns",
    "ignorePeerAddr",
    "disableInitialHostLookup",
    "writeCoalesceWaitTime",
    "username",
    "password",
    "enableHostVerification",
    "keyPath",
    "certPath",
    "caPath",
)

_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_INT64_MAX_DIGITS = 19

# A "%" not followed by two hex digits.
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def escape(value: str) -> str:
    """Query-escape a value: space becomes ``+``, anything outside ``A-Za-z0-9-_.~`` is percent-encoded."""
    return quote_plus(value, safe="")


def unescape(value: str) -> str:
    """
    Reverse ``escape``.

    Raises:
        ValueError: On a malformed ``%`` escape or bytes that are not UTF-8
    """
    if _BAD_ESCAPE_RE.search(value):
        raise ValueError(f"invalid escape in {value!r}")
    return unquote_plus(value, errors="strict")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


# ---------------------------------------------------------------------------
# Serializer
# ---------------------------------------------------------------------------


def to_config_string(config: ClusterConfig, default: ClusterConfig | None = None) -> str:
    """
    Convert a ClusterConfig to a config string.

    Args:
        config: The configuration to serialize
        default: Reference record; fields equal to it are omitted.
            Defaults to ``new_cluster_config()``.

    Returns:
        The config string. With no pairs to write it still ends in ``?``.

    Raises:
        ConsistencyTableError: If ``config.consistency`` has no wire name
        DurationError: If a duration to be written does not fit in a signed
            64-bit nanosecond count
    """
    if default is None:
        default = new_cluster_config()

    pairs: list[tuple[str, str]] = []

    if config.consistency != default.consistency:
        pairs.append(("consistency", consistency_name(config.consistency)))
    if config.timeout != default.timeout and config.timeout >= timedelta(0):
        pairs.append(("timeout", format_duration(config.timeout)))
    if config.connect_timeout != default.connect_timeout and config.connect_timeout >= timedelta(0):
        pairs.append(("connectTimeout", format_duration(config.connect_timeout)))
    if config.keyspace:
        pairs.append(("keyspace", config.keyspace))
    if config.num_conns != default.num_conns and config.num_conns > 0:
        pairs.append(("numConns", str(config.num_conns)))
    if config.ignore_peer_addr != default.ignore_peer_addr:
        pairs.append(("ignorePeerAddr", _format_bool(config.ignore_peer_addr)))
    if config.disable_initial_host_lookup != default.disable_initial_host_lookup:
        pairs.append(("disableInitialHostLookup", _format_bool(config.disable_initial_host_lookup)))
    if config.write_coalesce_wait_time != default.write_coalesce_wait_time:
        pairs.append(("writeCoalesceWaitTime", format_duration(config.write_coalesce_wait_time)))

    if isinstance(config.authenticator, PasswordAuthenticator):
        if config.authenticator.username:
            pairs.append(("username", escape(config.authenticator.username)))
        if config.authenticator.password:
            pairs.append(("password", escape(config.authenticator.password)))

    if config.ssl_opts is not None:
        ssl_opts, ssl_default = config.ssl_opts, SslOptions()
        if ssl_opts.enable_host_verification != ssl_default.enable_host_verification:
            pairs.append(("enableHostVerification", _format_bool(ssl_opts.enable_host_verification)))
        if ssl_opts.key_path != ssl_default.key_path:
            pairs.append(("keyPath", escape(ssl_opts.key_path)))
        if ssl_opts.cert_path != ssl_default.cert_path:
            pairs.append(("certPath", escape(ssl_opts.cert_path)))
        if ssl_opts.ca_path != ssl_default.ca_path:
            pairs.append(("caPath", escape(ssl_opts.ca_path)))

    return ",".join(config.hosts) + "?" + "&".join(f"{key}={value}" for key, value in pairs)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _parse_bool(key: str, value: str) -> bool:
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigValueError(key, value)


def _parse_int(key: str, value: str) -> int:
    if not _INT_RE.fullmatch(value) or len(value.lstrip("+-").lstrip("0")) > _INT64_MAX_DIGITS:
        raise ConfigValueError(key, value)
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ConfigValueError(key, value)
    return number


def _parse_duration(key: str, value: str) -> timedelta:
    try:
        return parse_duration(value)
    except DurationError:
        raise ConfigValueError(key, value) from None


def _unescape(key: str, value: str) -> str:
    try:
        return unescape(value)
    except ValueError:
        raise ConfigValueError(key, value) from None


def _authenticator(config: ClusterConfig) -> PasswordAuthenticator:
    if config.authenticator is None:
        config.authenticator = PasswordAuthenticator()
    return config.authenticator


def _ssl_opts(config: ClusterConfig) -> SslOptions:
    if config.ssl_opts is None:
        config.ssl_opts = SslOptions()
    return config.ssl_opts


def _set_consistency(config: ClusterConfig, key: str, value: str) -> None:
    consistency = CONSISTENCY_LEVELS.get(value)
    if consistency is None:
        raise ConfigValueError(key, value)
    config.consistency = consistency


def _set_keyspace(config: ClusterConfig, key: str, value: str) -> None:
    if value == "":
        raise ConfigValueError(key, value)
    config.keyspace = value


def _set_timeout(config: ClusterConfig, key: str, value: str) -> None:
    timeout = _parse_duration(key, value)
    # Known quirk: negative timeouts parse but are not applied.
    if timeout < timedelta(0):
        logger.debug("Ignoring negative %s: %s", key, value)
        return
    if key == "timeout":
        config.timeout = timeout
    else:
        config.connect_timeout = timeout


def _set_num_conns(config: ClusterConfig, key: str, value: str) -> None:
    num_conns = _parse_int(key, value)
    # Known quirk: non-positive values parse but are not applied.
    if num_conns <= 0:
        logger.debug("Ignoring non-positive %s: %s", key, value)
        return
    config.num_conns = num_conns


def _set_ignore_peer_addr(config: ClusterConfig, key: str, value: str) -> None:
    config.ignore_peer_addr = _parse_bool(key, value)


def _set_disable_initial_host_lookup(config: ClusterConfig, key: str, value: str) -> None:
    config.disable_initial_host_lookup = _parse_bool(key, value)


def _set_write_coalesce_wait_time(config: ClusterConfig, key: str, value: str) -> None:
    config.write_coalesce_wait_time = _parse_duration(key, value)


def _set_username(config: ClusterConfig, key: str, value: str) -> None:
    _authenticator(config).username = _unescape(key, value)


def _set_password(config: ClusterConfig, key: str, value: str) -> None:
    _authenticator(config).password = _unescape(key, value)


def _set_enable_host_verification(config: ClusterConfig, key: str, value: str) -> None:
    _ssl_opts(config).enable_host_verification = _parse_bool(key, value)


def _set_key_path(config: ClusterConfig, key: str, value: str) -> None:
    _ssl_opts(config).key_path = _unescape(key, value)


def _set_cert_path(config: ClusterConfig, key: str, value: str) -> None:
    _ssl_opts(config).cert_path = _unescape(key, value)


def _set_ca_path(config: ClusterConfig, key: str, value: str) -> None:
    _ssl_opts(config).ca_path = _unescape(key, value)


_SETTERS: dict[str, Callable[[ClusterConfig, str, str], None]] = {
    "consistency": _set_consistency,
    "timeout": _set_timeout,
    "connectTimeout": _set_timeout,
    "keyspace": _set_keyspace,
    "numConns": _set_num_conns,
    "ignorePeerAddr": _set_ignore_peer_addr,
    "disableInitialHostLookup": _set_disable_initial_host_lookup,
    "writeCoalesceWaitTime": _set_write_coalesce_wait_time,
    "username": _set_username,
    "password": _set_password,
    "enableHostVerification": _set_enable_host_verification,
    "keyPath": _set_key_path,
    "certPath": _set_cert_path,
    "caPath": _set_ca_path,
}


def from_config_string(value: str) -> ClusterConfig:
    """
    Convert a config string to a ClusterConfig.

    Pairs are applied left to right on top of ``new_cluster_config()``; the
    first bad pair aborts the whole parse.

    Args:
        value: The config string

    Returns:
        A new ClusterConfig

    Raises:
        MissingSeparatorError: If a pair has no ``=``
        InvalidKeyError: If a key is not in ``CONFIG_KEYS``
        ConfigValueError: If a value cannot be parsed for its key
    """
    config = new_cluster_config()
    host_segment, separator, params = value.partition("?")

    # Segments of one character or less are ignored.
    if len(host_segment) > 1:
        config.hosts = [host.strip() for host in host_segment.split(",")]
        logger.debug("Parsed %d host(s) from config string", len(config.hosts))

    if separator and len(params) > 1:
        for pair in params.split("&"):
            raw_key, equals, raw_value = pair.partition("=")
            if not equals:
                raise MissingSeparatorError(pair)
            key = raw_key.strip()
            setter = _SETTERS.get(key)
            if setter is None:
                raise InvalidKeyError(key)
            setter(config, key, raw_value)

    return config


__all__ = [
    "CONFIG_KEYS",
    "to_config_string",
    "from_config_string",
    "escape",
    "unescape",
]
