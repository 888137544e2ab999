"""protoc-gen-microweb

A protoc plugin generating HTTP handlers for go-micro services.
RPC methods annotated with `google.api.http` are exposed through a chi
router with JSON and form request decoding, and every message gets
jsonpb-backed JSON marshalling.
"""

__version__ = "1.0.1"

from .pipeline import (
    ConfigError,
    GeneratedFile,
    GeneratorConfig,
    MicrowebError,
    PathsMode,
    PipelineGenerator,
    SchemaError,
    generate_response,
)

__all__ = [
    "PipelineGenerator",
    "GeneratedFile",
    "GeneratorConfig",
    "PathsMode",
    "generate_response",
    "MicrowebError",
    "SchemaError",
    "ConfigError",
]
