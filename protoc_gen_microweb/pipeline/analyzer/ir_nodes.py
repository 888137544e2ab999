"""
IR (Intermediate Representation) node definitions.

These nodes describe one generated Go file: bindings are extracted, foreign
types are qualified with their import alias, and nothing is left to look
up while rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .bindings import Binding


@dataclass
class GoType:
    """A Go message type as written in the generated file."""

    name: str = ""  # Go type name, e.g. "HelloRequest"
    alias: str = ""  # Import alias, empty for types of the same package
    is_empty: bool = False  # google.protobuf.Empty

    @property
    def qualified(self) -> str:
        """Type name with its package alias, e.g. "ptypesempty.Empty"."""
        return f"{self.alias}.{self.name}" if self.alias else self.name


@dataclass
class HandlerDef:
    """An HTTP handler for one routed RPC method."""

    method_name: str = ""  # Go name of the RPC method
    binding: Binding | None = None
    input: GoType = field(default_factory=GoType)
    output: GoType = field(default_factory=GoType)

    @property
    def decodes_request(self) -> bool:
        return not self.input.is_empty

    @property
    def returns_content(self) -> bool:
        return not self.output.is_empty


@dataclass
class ServiceDef:
    """Router glue for one service."""

    name: str = ""  # Go name of the service
    handlers: list[HandlerDef] = field(default_factory=list)


@dataclass
class AdapterDef:
    """JSON marshal/unmarshal adapter pair for one message."""

    message_name: str = ""  # Go type name

    @property
    def marshaler(self) -> str:
        return f"{self.message_name}JSONMarshaler"

    @property
    def unmarshaler(self) -> str:
        return f"{self.message_name}JSONUnmarshaler"


@dataclass
class FileIR:
    """The complete Intermediate Representation of one output file."""

    source: str = ""  # Proto file name
    output_path: str = ""
    go_package: str = ""

    services: list[ServiceDef] = field(default_factory=list)
    adapters: list[AdapterDef] = field(default_factory=list)

    # Foreign imports, {canonical import path: alias}
    imports: dict[str, str] = field(default_factory=dict)

    @property
    def handlers(self) -> list[HandlerDef]:
        return [handler for service in self.services for handler in service.handlers]
