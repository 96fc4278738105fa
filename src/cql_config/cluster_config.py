"""
Cluster configuration records.

Provides the configuration container that config strings are read into and
written from, together with the compiled-in defaults used to decide which
fields a config string has to carry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from .consistency import Consistency

DEFAULT_HOST = "127.0.0.1"
DEFAULT_CONSISTENCY = Consistency.QUORUM
DEFAULT_TIMEOUT = timedelta(seconds=11)
DEFAULT_CONNECT_TIMEOUT = timedelta(seconds=11)
DEFAULT_NUM_CONNS = 2
DEFAULT_WRITE_COALESCE_WAIT_TIME = timedelta(microseconds=200)


@dataclass
class PasswordAuthenticator:
    """
    Username/password credentials for a cluster.

    An empty string means the field is unset.
    """

    username: str = ""
    password: str = ""


@dataclass
class SslOptions:
    """
    TLS settings for a cluster.

    Attributes:
        enable_host_verification: Verify the server certificate host name.
        key_path: Path to the client private key.
        cert_path: Path to the client certificate.
        ca_path: Path to the CA certificate.
    """

    enable_host_verification: bool = False
    key_path: str = ""
    cert_path: str = ""
    ca_path: str = ""


@dataclass
class ClusterConfig:
    """
    Configuration for connecting to a cluster.

    ``authenticator`` and ``ssl_opts`` are ``None`` when absent; a present
    sub-record may still hold nothing but default values.

    Attributes:
        hosts: Contact points, in order.
        consistency: Default consistency level for queries.
        timeout: Query timeout.
        connect_timeout: Initial connection timeout.
        keyspace: Initial keyspace, empty for none.
        num_conns: Connections per host.
        ignore_peer_addr: Use the contact address instead of the peer address.
        disable_initial_host_lookup: Skip ring discovery at startup.
        write_coalesce_wait_time: How long writes wait to be coalesced.
        authenticator: Credentials, if any.
        ssl_opts: TLS settings, if any.
    """

    hosts: list[str] = field(default_factory=lambda: [DEFAULT_HOST])
    consistency: Consistency = DEFAULT_CONSISTENCY
    timeout: timedelta = DEFAULT_TIMEOUT
    connect_timeout: timedelta = DEFAULT_CONNECT_TIMEOUT
    keyspace: str = ""
    num_conns: int = DEFAULT_NUM_CONNS
    ignore_peer_addr: bool = False
    disable_initial_host_lookup: bool = False
    write_coalesce_wait_time: timedelta = DEFAULT_WRITE_COALESCE_WAIT_TIME
    authenticator: PasswordAuthenticator | None = None
    ssl_opts: SslOptions | None = None


def new_cluster_config(*hosts: str) -> ClusterConfig:
    """
    Create a ClusterConfig populated with the compiled-in defaults.

    Args:
        *hosts: Contact points. Falls back to the loopback address when empty.

    Returns:
        A fresh ClusterConfig
    """
    return ClusterConfig(hosts=list(hosts) if hosts else [DEFAULT_HOST])


__all__ = [
    "ClusterConfig",
    "PasswordAuthenticator",
    "SslOptions",
    "new_cluster_config",
    "DEFAULT_HOST",
    "DEFAULT_CONSISTENCY",
    "DEFAULT_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_NUM_CONNS",
    "DEFAULT_WRITE_COALESCE_WAIT_TIME",
]
