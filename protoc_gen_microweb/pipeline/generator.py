"""
Pipeline generator.

Runs the phases for each file of a request:

1. Loader: descriptors -> schema model
2. Analyzer: bindings and import aliases -> IR (fresh alias table per file)
3. Backend: IR -> Go source
4. Formatter: optional gofmt pass
5. Emitter: CodeGeneratorResponse files
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from google.protobuf.compiler import plugin_pb2

from .analyzer import FileAnalyzer, ImportResolver
from .backends import CodeBackend, GoBackend
from .config import GeneratorConfig
from .errors import MicrowebError
from .formatters import Formatter, GofmtFormatter
from .schema import DescriptorLoader, ProtoFile

logger = logging.getLogger(__name__)


@dataclass
class GeneratedFile:
    """A rendered output file."""

    name: str
    content: str


class PipelineGenerator:
    """Generates the Go HTTP glue of proto files."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        backend: CodeBackend | None = None,
        formatter: Formatter | None = None,
    ):
        """
        Initialize the generator.

        Args:
            config: Code generation configuration
            backend: Target language backend, Go by default
            formatter: Post-processing formatter; defaults to gofmt when
                `config.gofmt` is set
        """
        self.config = config or GeneratorConfig()
        self.backend = backend or GoBackend()
        if formatter is None and self.config.gofmt:
            formatter = GofmtFormatter()
        self.formatter = formatter
        self.analyzer = FileAnalyzer()

    def should_generate(self, proto_file: ProtoFile) -> bool:
        """Whether a file produces an output file at all."""
        if self.config.is_ignored(proto_file.package):
            logger.debug(
                "Ignoring filename %s because it belongs to the ignored package %s",
                proto_file.name,
                proto_file.package,
            )
            return False

        if not proto_file.messages:
            logger.debug("Skipping %s: no messages", proto_file.name)
            return False

        return True

    def generate_file(self, proto_file: ProtoFile) -> GeneratedFile | None:
        """
        Generate the output of one file.

        Args:
            proto_file: The loaded proto file

        Returns:
            The generated file, or None if the file is skipped
        """
        if not self.should_generate(proto_file):
            return None

        ir = self.analyzer.analyze(proto_file, ImportResolver())
        code = self.backend.generate(ir)
        if self.formatter is not None:
            code = self.formatter.format(code)

        logger.info(
            "Generated %s (%d handler(s), %d adapter(s))",
            ir.output_path,
            len(ir.handlers),
            len(ir.adapters),
        )
        return GeneratedFile(name=ir.output_path, content=code)

    def generate(self, proto_files: Iterable[ProtoFile]) -> list[GeneratedFile]:
        """Generate the outputs of several files, in order."""
        generated = []
        for proto_file in proto_files:
            output = self.generate_file(proto_file)
            if output is not None:
                generated.append(output)
        return generated


def generate_response(
    request: plugin_pb2.CodeGeneratorRequest,
    formatter: Formatter | None = None,
) -> plugin_pb2.CodeGeneratorResponse:
    """
    Run the plugin on a request.

    Errors caused by the request or its parameters are reported through
    `CodeGeneratorResponse.error`, which protoc prints before failing.

    Args:
        request: The request read from protoc
        formatter: Formatter override, mostly for tests

    Returns:
        The response to write back to protoc
    """
    response = plugin_pb2.CodeGeneratorResponse()
    response.supported_features = plugin_pb2.CodeGeneratorResponse.FEATURE_PROTO3_OPTIONAL

    try:
        config = GeneratorConfig.from_parameter(request.parameter)
        targets = DescriptorLoader(config).load_request(request)
        generated = PipelineGenerator(config, formatter=formatter).generate(targets)
    except MicrowebError as e:
        logger.error("%s", e)
        response.error = str(e)
        return response

    for output in generated:
        response_file = response.file.add()
        response_file.name = output.name
        response_file.content = output.content

    return response
