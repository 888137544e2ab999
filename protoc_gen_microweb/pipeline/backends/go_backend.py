"""
Go code generation backend.

Renders chi routing glue and jsonpb JSON adapters from IR.
"""

from __future__ import annotations

import json

import jinja2

from ..analyzer.ir_nodes import FileIR
from .base import CodeBackend

# Runtime packages referenced by the templates
JSONPB_IMPORT = "github.com/golang/protobuf/jsonpb"
CHI_IMPORT = "github.com/go-chi/chi/v5"
ERRORS_IMPORT = "go-micro.dev/v4/errors"
RENDER_IMPORT = "github.com/cinience/render"
MAPSTRUCTURE_IMPORT = "github.com/mitchellh/mapstructure"


def go_quote(value: str) -> str:
    """Quote a string as a Go interpreted string literal."""
    return json.dumps(value)


class GoBackend(CodeBackend):
    """Go code generation backend."""

    TEMPLATE_LANG = "go"
    FILE_EXTENSION = "go"

    def _add_filters(self, env: jinja2.Environment) -> None:
        env.filters["go_quote"] = go_quote

    def generate(self, ir: FileIR) -> str:
        """Generate Go code from IR."""
        std_imports, runtime_imports = self._assemble_imports(ir)

        output = self.prefix_template.render(
            source=ir.source,
            package=ir.go_package,
            std_imports=std_imports,
            runtime_imports=runtime_imports,
            foreign_imports=sorted(ir.imports.items()),
        )

        for service in ir.services:
            output += self.service_template.render(service=service)

        for adapter in ir.adapters:
            output += self.message_template.render(adapter=adapter)

        return output

    def _assemble_imports(self, ir: FileIR) -> tuple[list[str], list[str]]:
        """
        Work out which standard and runtime packages the file uses.

        Go refuses unused imports, so each package is only imported when
        some rendered section needs it.

        Args:
            ir: The file IR

        Returns:
            (standard library imports, runtime imports), each sorted
        """
        # JSON adapters are always present
        std_imports = {"bytes", "encoding/json"}
        runtime_imports = {JSONPB_IMPORT}

        if ir.services:
            std_imports.add("net/http")
            runtime_imports.add(CHI_IMPORT)

        handlers = ir.handlers
        if handlers:
            runtime_imports.update({ERRORS_IMPORT, RENDER_IMPORT})

        if any(handler.decodes_request for handler in handlers):
            std_imports.add("strings")
            runtime_imports.add(MAPSTRUCTURE_IMPORT)

        return sorted(std_imports), sorted(runtime_imports)
