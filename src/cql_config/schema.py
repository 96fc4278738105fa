"""
JSON form of a ClusterConfig.

The JSON form mirrors the dataclass fields, with durations written as
duration text and the consistency level written by its config string name::

    {
        "hosts": ["10.0.0.1"],
        "consistency": "localQuorum",
        "timeout": "5s",
        "authenticator": {"username": "app", "password": "secret"},
        "ssl_opts": null,
        ...
    }

Validation is done with pydantic against the dataclasses themselves.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .cluster_config import ClusterConfig
from .consistency import CONSISTENCY_LEVELS, consistency_name
from .duration import format_duration, parse_duration
from .exceptions import ConfigSchemaError, DurationError

_ADAPTER: TypeAdapter[ClusterConfig] = TypeAdapter(ClusterConfig)

DURATION_FIELDS = ("timeout", "connect_timeout", "write_coalesce_wait_time")
FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(ClusterConfig))


def config_to_dict(config: ClusterConfig) -> dict[str, Any]:
    """
    Convert a ClusterConfig to its JSON form.

    Raises:
        ConsistencyTableError: If ``config.consistency`` has no wire name
    """
    data: dict[str, Any] = _ADAPTER.dump_python(config)
    data["consistency"] = consistency_name(config.consistency)
    for name in DURATION_FIELDS:
        data[name] = format_duration(getattr(config, name))
    return data


def _prepare(data: Mapping[str, Any]) -> dict[str, Any]:
    """Convert names and duration text into values pydantic can validate."""
    unknown = sorted(set(data) - FIELD_NAMES)
    if unknown:
        raise ConfigSchemaError(f"Unknown config field(s): {', '.join(unknown)}")

    prepared = dict(data)

    consistency = prepared.get("consistency")
    if isinstance(consistency, str):
        if consistency not in CONSISTENCY_LEVELS:
            raise ConfigSchemaError(f"Unknown consistency: {consistency!r}")
        prepared["consistency"] = CONSISTENCY_LEVELS[consistency]

    for name in DURATION_FIELDS:
        value = prepared.get(name)
        if isinstance(value, str):
            try:
                prepared[name] = parse_duration(value)
            except DurationError as e:
                raise ConfigSchemaError(f"Invalid {name}: {e}") from e

    return prepared


def config_from_dict(data: Mapping[str, Any]) -> ClusterConfig:
    """
    Build a ClusterConfig from its JSON form.

    Missing fields take the compiled-in defaults.

    Raises:
        ConfigSchemaError: If a field is unknown or fails validation
    """
    prepared = _prepare(data)
    try:
        config = _ADAPTER.validate_python(prepared)
    except ValidationError as e:
        raise ConfigSchemaError(str(e), errors=e.errors()) from e

    if not config.hosts:
        raise ConfigSchemaError("hosts must not be empty")
    return config


__all__ = ["config_to_dict", "config_from_dict"]
