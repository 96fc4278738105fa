"""
cql-config Command Line Interface.

Provides commands for working with config strings:
- decode: Parse a config string and print it as JSON
- encode: Build a config string from JSON
- check: Validate a config string and print its canonical form
"""

from .commands import cli

__all__ = ["cli"]
