"""
Schema model node definitions.

These nodes are a plain view over the protobuf descriptors received from
protoc, with the Go naming already applied. They carry no HTTP specific
information: bindings are extracted later by the analyzer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

EMPTY_MESSAGE = "google.protobuf.Empty"


@dataclass
class TypeRef:
    """A reference to a message type, possibly declared in another file."""

    full_name: str = ""  # Fully-qualified proto name, without leading dot
    go_name: str = ""  # Go type name inside its package
    file_name: str = ""  # Proto file declaring the type
    import_path: str = ""  # Go import path of the declaring file

    @property
    def is_empty(self) -> bool:
        """Whether this is the well-known `google.protobuf.Empty` marker."""
        return self.full_name == EMPTY_MESSAGE


@dataclass
class ProtoMessage:
    """A message declared in a file (top-level or nested)."""

    name: str = ""
    full_name: str = ""
    go_name: str = ""


@dataclass
class ProtoMethod:
    """An RPC method of a service."""

    name: str = ""
    go_name: str = ""
    input: TypeRef = field(default_factory=TypeRef)
    output: TypeRef = field(default_factory=TypeRef)
    client_streaming: bool = False
    server_streaming: bool = False

    # Serialized MethodOptions, custom options included
    options: bytes = b""


@dataclass
class ProtoService:
    """A service and its methods, in declaration order."""

    name: str = ""
    go_name: str = ""
    methods: list[ProtoMethod] = field(default_factory=list)


@dataclass
class ProtoFile:
    """A proto file with everything needed to render its Go companion."""

    name: str = ""  # e.g. "greeter/v1/greeter.proto"
    package: str = ""  # proto package, e.g. "greeter.v1"
    import_path: str = ""  # Go import path
    go_package: str = ""  # Go package name
    output_path: str = ""  # Path of the generated file

    services: list[ProtoService] = field(default_factory=list)

    # All messages, nested ones included, in pre-order
    messages: list[ProtoMessage] = field(default_factory=list)
