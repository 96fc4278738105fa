"""
cql-config - Cluster connection settings as a single string.

Serializes a cluster configuration (hosts, consistency, timeouts,
credentials, TLS options) to one URL-like string and parses it back, so
the whole configuration fits in one environment variable.

Usage:
    from datetime import timedelta

    from cql_config import from_config_string, to_config_string

    config = from_config_string("10.0.0.1,10.0.0.2?consistency=localQuorum&keyspace=app")
    config.timeout = timedelta(seconds=5)
    to_config_string(config)
    # '10.0.0.1,10.0.0.2?consistency=localQuorum&timeout=5s&keyspace=app'
"""

from .cluster_config import (
    ClusterConfig,
    PasswordAuthenticator,
    SslOptions,
    new_cluster_config,
    DEFAULT_HOST,
    DEFAULT_CONSISTENCY,
    DEFAULT_TIMEOUT,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_NUM_CONNS,
    DEFAULT_WRITE_COALESCE_WAIT_TIME,
)
from .config_string import CONFIG_KEYS, from_config_string, to_config_string
from .consistency import CONSISTENCY_LEVELS, CONSISTENCY_NAMES, Consistency
from .duration import format_duration, parse_duration
from .schema import config_from_dict, config_to_dict
from .exceptions import (
    ClusterConfigError,
    ConfigStringError,
    MissingSeparatorError,
    InvalidKeyError,
    ConfigValueError,
    ConfigSchemaError,
    ConsistencyTableError,
    DurationError,
)

__version__ = "0.1.0"
__all__ = [
    # Records
    "ClusterConfig",
    "PasswordAuthenticator",
    "SslOptions",
    "new_cluster_config",
    # Defaults
    "DEFAULT_HOST",
    "DEFAULT_CONSISTENCY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_NUM_CONNS",
    "DEFAULT_WRITE_COALESCE_WAIT_TIME",
    # Config strings
    "CONFIG_KEYS",
    "to_config_string",
    "from_config_string",
    # Consistency
    "Consistency",
    "CONSISTENCY_NAMES",
    "CONSISTENCY_LEVELS",
    # Durations
    "parse_duration",
    "format_duration",
    # JSON form
    "config_to_dict",
    "config_from_dict",
    # Exceptions
    "ClusterConfigError",
    "ConfigStringError",
    "MissingSeparatorError",
    "InvalidKeyError",
    "ConfigValueError",
    "ConfigSchemaError",
    "ConsistencyTableError",
    "DurationError",
]
