"""
Consistency levels and their config string names.

``CONSISTENCY_NAMES`` is used when writing a config string,
``CONSISTENCY_LEVELS`` when reading one. Both are read-only.
"""

import logging
from collections.abc import Mapping
from enum import IntEnum
from types import MappingProxyType

from .exceptions import ConsistencyTableError

logger = logging.getLogger(__name__)


class Consistency(IntEnum):
    """Consistency levels, valued by their native protocol codes."""

    ANY = 0x00
    ONE = 0x01
    TWO = 0x02
    THREE = 0x03
    QUORUM = 0x04
    ALL = 0x05
    LOCAL_QUORUM = 0x06
    EACH_QUORUM = 0x07
    LOCAL_ONE = 0x0A


CONSISTENCY_NAMES: Mapping[Consistency, str] = MappingProxyType(
    {
        Consistency.ANY: "any",
        Consistency.ONE: "one",
        Consistency.TWO: "two",
        Consistency.THREE: "three",
        Consistency.QUORUM: "quorum",
        Consistency.ALL: "all",
        Consistency.LOCAL_QUORUM: "localQuorum",
        Consistency.EACH_QUORUM: "eachQuorum",
        Consistency.LOCAL_ONE: "localOne",
    }
)

CONSISTENCY_LEVELS: Mapping[str, Consistency] = MappingProxyType(
    {name: level for level, name in CONSISTENCY_NAMES.items()}
)


def consistency_name(level: int) -> str:
    """
    Get the config string name of a consistency level.

    Raises:
        ConsistencyTableError: If ``level`` has no name in ``CONSISTENCY_NAMES``
    """
    try:
        return CONSISTENCY_NAMES[level]  # type: ignore[index]
    except KeyError:
        logger.critical("Consistency %r has no entry in CONSISTENCY_NAMES", level)
        raise ConsistencyTableError(level) from None


def _check_tables() -> None:
    for level in Consistency:
        name = consistency_name(level)
        if CONSISTENCY_LEVELS.get(name) is not level:
            raise ConsistencyTableError(level)


_check_tables()


__all__ = ["Consistency", "CONSISTENCY_NAMES", "CONSISTENCY_LEVELS", "consistency_name"]
