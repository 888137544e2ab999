"""
Pipeline - protobuf descriptors to Go HTTP glue.

This module provides a multi-phase architecture for generating Go code
from a protoc CodeGeneratorRequest:

1. Phase 1 (Loader): Load file descriptors into the schema model
2. Phase 2 (Analyzer): Extract HTTP bindings, alias foreign imports, build IR
3. Phase 3 (Backend): Render Go source from IR with Jinja2 templates
4. Phase 4 (Formatter): Optional post-processing with gofmt
5. Phase 5 (Emitter): Collect the files into a CodeGeneratorResponse
"""

from __future__ import annotations

from .config import GeneratorConfig, PathsMode
from .errors import ConfigError, MicrowebError, SchemaError
from .generator import GeneratedFile, PipelineGenerator, generate_response

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
