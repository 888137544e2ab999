"""
Configuration for the code generator pipeline.

The plugin is configured through the protoc parameter string, e.g.::

    protoc --microweb_out=ignore_packages=google.protobuf;grpc.health.v1,paths=import:. foo.proto
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import ConfigError


class PathsMode(str, Enum):
    """Where generated files are placed relative to the output directory."""

    SOURCE_RELATIVE = "source_relative"  # next to the .proto file
    IMPORT = "import"  # under the Go import path


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Proto packages whose files never produce output
    ignore_packages: set[str] = field(default_factory=set)

    # Output path layout
    paths: PathsMode = PathsMode.SOURCE_RELATIVE

    # Import path prefix stripped from output paths (paths=import only)
    module: str = ""

    # Per-file Go import path overrides (M<file>=<import path>)
    import_map: dict[str, str] = field(default_factory=dict)

    # Run gofmt over the rendered code when it is installed
    gofmt: bool = True

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if not hasattr(config, k):
                continue
            if k == "ignore_packages":
                v = set(v)
            elif k == "paths":
                v = _parse_paths(v)
            setattr(config, k, v)
        return config

    @staticmethod
    def from_parameter(parameter: str) -> GeneratorConfig:
        """
        Create a config from a protoc plugin parameter string.

        Pairs are separated by commas; `ignore_packages` takes a semicolon
        separated list. Unknown keys are ignored.

        Args:
            parameter: The raw `CodeGeneratorRequest.parameter` value

        Returns:
            The parsed configuration

        Raises:
            ConfigError: If `paths` or `gofmt` has an unsupported value
        """
        config = GeneratorConfig()
        for chunk in parameter.split(","):
            key, _, value = chunk.partition("=")
            key = key.strip()
            value = value.strip()
            if not key:
                continue

            if key == "ignore_packages":
                config.ignore_packages = {pkg for pkg in value.split(";") if pkg}
            elif key == "paths":
                config.paths = _parse_paths(value)
            elif key == "module":
                config.module = value
            elif key == "gofmt":
                config.gofmt = _parse_bool(value)
            elif key.startswith("M"):
                config.import_map[key[1:]] = value
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ignore_packages": sorted(self.ignore_packages),
            "paths": self.paths.value,
            "module": self.module,
            "import_map": dict(self.import_map),
            "gofmt": self.gofmt,
        }

    def is_ignored(self, package: str) -> bool:
        return package in self.ignore_packages


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in ("", "1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"invalid boolean value: {value!r}")


def _parse_paths(value: str) -> PathsMode:
    try:
        return PathsMode(value)
    except ValueError:
        choices = ", ".join(mode.value for mode in PathsMode)
        raise ConfigError(f"invalid paths value {value!r}, expected one of: {choices}") from None
