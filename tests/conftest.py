"""
Pytest configuration for cql-config tests.

Shared config fixtures are defined here so every test file can use them
instead of rebuilding the same records.
"""

import os
from collections.abc import Iterator
from datetime import timedelta

import pytest

from cql_config.cluster_config import (
    ClusterConfig,
    PasswordAuthenticator,
    SslOptions,
)
from cql_config.consistency import Consistency

CONFIG_ENVVAR = "CQL_CONFIG"

# Every field moved away from its default, in config string form.
FULL_CONFIG_STRING = (
    "10.0.0.1,10.0.0.2?"
    "consistency=localQuorum"
    "&timeout=5s"
    "&connectTimeout=1.5s"
    "&keyspace=app"
    "&numConns=4"
    "&ignorePeerAddr=true"
    "&disableInitialHostLookup=true"
    "&writeCoalesceWaitTime=1ms"
    "&username=alice"
    "&password=p%40ss+word"
    "&enableHostVerification=true"
    "&keyPath=%2Fetc%2Fssl%2Fclient.key"
    "&certPath=%2Fetc%2Fssl%2Fclient.crt"
    "&caPath=%2Fetc%2Fssl%2Fca.crt"
)


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep CQL_CONFIG (which the CLI may load from .env) from leaking between tests."""
    monkeypatch.delenv(CONFIG_ENVVAR, raising=False)
    yield
    # load_dotenv writes os.environ directly, which monkeypatch does not track.
    os.environ.pop(CONFIG_ENVVAR, None)


@pytest.fixture
def full_config() -> ClusterConfig:
    """A ClusterConfig matching FULL_CONFIG_STRING."""
    return ClusterConfig(
        hosts=["10.0.0.1", "10.0.0.2"],
        consistency=Consistency.LOCAL_QUORUM,
        timeout=timedelta(seconds=5),
        connect_timeout=timedelta(seconds=1.5),
        keyspace="app",
        num_conns=4,
        ignore_peer_addr=True,
        disable_initial_host_lookup=True,
        write_coalesce_wait_time=timedelta(milliseconds=1),
        authenticator=PasswordAuthenticator(username="alice", password="p@ss word"),
        ssl_opts=SslOptions(
            enable_host_verification=True,
            key_path="/etc/ssl/client.key",
            cert_path="/etc/ssl/client.crt",
            ca_path="/etc/ssl/ca.crt",
        ),
    )


@pytest.fixture
def full_config_string() -> str:
    return FULL_CONFIG_STRING
