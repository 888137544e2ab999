"""
Descriptor loader that builds the schema model.

Phase 1 of the pipeline: turn the FileDescriptorProtos of a
CodeGeneratorRequest into ProtoFile nodes, resolving every method's
input and output type to the file (and Go import path) declaring it.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterable, Iterator

from google.protobuf import descriptor_pb2
from google.protobuf.compiler import plugin_pb2

from ...utils import go_camel_case, go_package_name, go_sanitized, replace_extension
from ..config import GeneratorConfig, PathsMode
from ..errors import SchemaError
from .nodes import ProtoFile, ProtoMessage, ProtoMethod, ProtoService, TypeRef

logger = logging.getLogger(__name__)

OUTPUT_EXTENSION = ".web.go"


class DescriptorLoader:
    """Loads the files of a CodeGeneratorRequest into the schema model."""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the loader.

        Args:
            config: Code generation configuration (import path overrides, paths mode)
        """
        self.config = config
        self.files: dict[str, ProtoFile] = {}
        self._type_cache: dict[str, TypeRef] = {}

    def load_request(self, request: plugin_pb2.CodeGeneratorRequest) -> list[ProtoFile]:
        """
        Load every file of a request.

        Args:
            request: The request received from protoc

        Returns:
            The files listed in `file_to_generate`, in request order

        Raises:
            SchemaError: If a file to generate is missing from the request
        """
        self.load(request.proto_file)

        targets = []
        for file_name in request.file_to_generate:
            if file_name not in self.files:
                raise SchemaError(f"file to generate {file_name!r} is missing from the request")
            targets.append(self.files[file_name])
        return targets

    def load(self, descriptors: Iterable[descriptor_pb2.FileDescriptorProto]) -> dict[str, ProtoFile]:
        """
        Load file descriptors.

        Dependencies must be passed along with the files using them, as
        protoc does, so cross-file type references can be resolved.

        Args:
            descriptors: File descriptors in dependency order

        Returns:
            Mapping from proto file name to loaded file
        """
        descriptors = list(descriptors)

        # First pass: naming and type index for every file
        for fdp in descriptors:
            proto_file = self._load_file_header(fdp)
            self.files[fdp.name] = proto_file
            for message in self._walk_messages(fdp.package, fdp.message_type, []):
                proto_file.messages.append(message)
                self._type_cache[message.full_name] = TypeRef(
                    full_name=message.full_name,
                    go_name=message.go_name,
                    file_name=fdp.name,
                    import_path=proto_file.import_path,
                )

        # Second pass: services, now that every type is known
        for fdp in descriptors:
            proto_file = self.files[fdp.name]
            proto_file.services = [self._load_service(fdp.name, svc) for svc in fdp.service]
            logger.debug(
                "Loaded %s: %d service(s), %d message(s)",
                fdp.name,
                len(proto_file.services),
                len(proto_file.messages),
            )

        return self.files

    def resolve_type(self, type_name: str, context: str = "") -> TypeRef:
        """
        Resolve a fully-qualified type name (".pkg.Msg") to its TypeRef.

        Args:
            type_name: Type name as found in a MethodDescriptorProto
            context: Where the reference appears (for error messages)

        Returns:
            The resolved type reference

        Raises:
            SchemaError: If the type is not declared in any loaded file
        """
        full_name = type_name.lstrip(".")
        type_ref = self._type_cache.get(full_name)
        if type_ref is None:
            where = f" (referenced by {context})" if context else ""
            raise SchemaError(f"unknown message type {type_name!r}{where}")
        return type_ref

    def _load_file_header(self, fdp: descriptor_pb2.FileDescriptorProto) -> ProtoFile:
        import_path, package_name = self._go_import(fdp)
        return ProtoFile(
            name=fdp.name,
            package=fdp.package,
            import_path=import_path,
            go_package=package_name,
            output_path=self._output_path(fdp.name, import_path),
        )

    def _go_import(self, fdp: descriptor_pb2.FileDescriptorProto) -> tuple[str, str]:
        """Determine the Go import path and package name of a file."""
        # M<file>=<path> overrides go_package
        go_package = self.config.import_map.get(fdp.name) or fdp.options.go_package

        if go_package:
            import_path, _, package_name = go_package.partition(";")
            return import_path, package_name or go_package_name(import_path)

        import_path = posixpath.dirname(fdp.name) or "."
        if fdp.package:
            return import_path, go_sanitized(fdp.package.replace(".", "_"))
        stem = posixpath.basename(replace_extension(fdp.name, ""))
        return import_path, go_sanitized(stem)

    def _output_path(self, file_name: str, import_path: str) -> str:
        """Derive the generated file name for a proto file."""
        if self.config.paths == PathsMode.SOURCE_RELATIVE:
            return replace_extension(file_name, OUTPUT_EXTENSION)

        base = posixpath.basename(replace_extension(file_name, OUTPUT_EXTENSION))
        path = posixpath.join(import_path, base)
        if self.config.module:
            prefix = self.config.module.rstrip("/") + "/"
            if path.startswith(prefix):
                path = path[len(prefix) :]
        return path

    def _walk_messages(
        self,
        scope: str,
        messages: Iterable[descriptor_pb2.DescriptorProto],
        parents: list[str],
    ) -> Iterator[ProtoMessage]:
        """Yield messages and their nested messages, parents first."""
        for message in messages:
            # Map entries are synthetic; protoc-gen-go emits no type for them
            if message.options.map_entry:
                continue

            path = parents + [message.name]
            full_name = ".".join(filter(None, [scope] + path))
            yield ProtoMessage(
                name=message.name,
                full_name=full_name,
                go_name=go_camel_case(".".join(path)),
            )
            yield from self._walk_messages(scope, message.nested_type, path)

    def _load_service(self, file_name: str, svc: descriptor_pb2.ServiceDescriptorProto) -> ProtoService:
        service = ProtoService(name=svc.name, go_name=go_camel_case(svc.name))
        for method in svc.method:
            context = f"{svc.name}.{method.name} in {file_name}"
            service.methods.append(
                ProtoMethod(
                    name=method.name,
                    go_name=go_camel_case(method.name),
                    input=self.resolve_type(method.input_type, context),
                    output=self.resolve_type(method.output_type, context),
                    client_streaming=method.client_streaming,
                    server_streaming=method.server_streaming,
                    options=method.options.SerializeToString(),
                )
            )
        return service
