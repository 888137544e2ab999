"""
Exceptions raised by the generator pipeline.
"""

from __future__ import annotations


class MicrowebError(Exception):
    """Base class for errors reported back to protoc."""

    pass


class SchemaError(MicrowebError):
    """Raised when the request describes a schema the plugin cannot use.

    This can happen when:
    - A method references a message type missing from the request
    - A file listed in `file_to_generate` has no descriptor
    """

    pass


class ConfigError(MicrowebError, ValueError):
    """Raised when the plugin parameter string cannot be parsed."""

    pass
