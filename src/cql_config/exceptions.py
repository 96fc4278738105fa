"""
cql-config Exceptions.

Custom exception hierarchy for config string parsing and serialization.
"""


class ClusterConfigError(Exception):
    """Base exception for all cql-config errors."""

    def __init__(self, message: str, key: str | None = None, value: str | None = None):
        self.message = message
        self.key = key
        self.value = value
        super().__init__(message)


class ConfigStringError(ClusterConfigError):
    """Raised when a config string cannot be parsed."""

    pass


class MissingSeparatorError(ConfigStringError):
    """Raised when a key/value pair has no ``=``."""

    def __init__(self, pair: str):
        self.pair = pair
        super().__init__("missing =")


class InvalidKeyError(ConfigStringError):
    """Raised when a key is not one of the recognized config keys."""

    def __init__(self, key: str):
        super().__init__(f"invalid key: {key}", key=key)


class ConfigValueError(ConfigStringError):
    """Raised when a value fails the parsing rules of its key."""

    def __init__(self, key: str, value: str):
        super().__init__(f"failed for: {key} = {value}", key=key, value=value)


class ConfigSchemaError(ClusterConfigError):
    """Raised when the JSON form of a config fails validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class ConsistencyTableError(RuntimeError):
    """Raised when a consistency level has no wire name.

    Signals that the lookup tables are out of sync with ``Consistency``.
    No caller input can produce it.
    """

    def __init__(self, consistency: object):
        self.consistency = consistency
        super().__init__(f"consistency value not found in CONSISTENCY_NAMES: {consistency!r}")


class DurationError(ValueError):
    """Raised when duration text is malformed or out of range."""

    def __init__(self, message: str, text: str):
        self.text = text
        super().__init__(f"{message}: {text!r}")
