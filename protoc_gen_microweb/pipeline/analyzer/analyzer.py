"""
File analyzer that transforms the schema model to IR.

Phase 2 of the pipeline: extract HTTP bindings, qualify foreign types with
their import alias and collect the JSON adapters of one file.
"""

from __future__ import annotations

import logging

from ..schema.nodes import ProtoFile, ProtoMethod, ProtoService, TypeRef
from .bindings import extract_binding
from .import_resolver import ImportResolver
from .ir_nodes import AdapterDef, FileIR, GoType, HandlerDef, ServiceDef

logger = logging.getLogger(__name__)


class FileAnalyzer:
    """Analyzes one proto file and builds the IR of its Go companion."""

    def analyze(self, proto_file: ProtoFile, resolver: ImportResolver | None = None) -> FileIR:
        """
        Analyze a file.

        Args:
            proto_file: The loaded proto file
            resolver: Alias table for this file; a fresh one is used if omitted.
                It must not be shared with another file.

        Returns:
            IR ready for code generation
        """
        resolver = resolver if resolver is not None else ImportResolver()

        ir = FileIR(
            source=proto_file.name,
            output_path=proto_file.output_path,
            go_package=proto_file.go_package,
        )

        for service in proto_file.services:
            ir.services.append(self._analyze_service(proto_file, service, resolver))

        ir.adapters = [AdapterDef(message_name=message.go_name) for message in proto_file.messages]
        ir.imports = resolver.imports

        return ir

    def _analyze_service(self, proto_file: ProtoFile, service: ProtoService, resolver: ImportResolver) -> ServiceDef:
        service_def = ServiceDef(name=service.go_name)

        for method in service.methods:
            handler = self._analyze_method(proto_file, service, method, resolver)
            if handler:
                service_def.handlers.append(handler)

        return service_def

    def _analyze_method(
        self,
        proto_file: ProtoFile,
        service: ProtoService,
        method: ProtoMethod,
        resolver: ImportResolver,
    ) -> HandlerDef | None:
        """Build the handler of a method, or None if it is not routed."""
        # Streamed responses cannot be rendered as one JSON document
        if method.server_streaming:
            logger.debug("Skipping server-streaming method %s.%s", service.name, method.name)
            return None

        binding = extract_binding(method.options)
        if binding is None:
            logger.debug("Method %s.%s has no HTTP binding", service.name, method.name)
            return None

        return HandlerDef(
            method_name=method.go_name,
            binding=binding,
            input=self._go_type(proto_file, method.input, resolver),
            output=self._go_type(proto_file, method.output, resolver),
        )

    def _go_type(self, proto_file: ProtoFile, type_ref: TypeRef, resolver: ImportResolver) -> GoType:
        """Qualify a message type for use in the given file."""
        alias = ""
        if type_ref.import_path != proto_file.import_path:
            alias = resolver.register(type_ref.import_path)

        return GoType(name=type_ref.go_name, alias=alias, is_empty=type_ref.is_empty)
