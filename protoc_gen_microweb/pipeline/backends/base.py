"""
Base class for code generation backends.

Defines the interface that all target-language backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import FileIR


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self):
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )
        self._add_filters(self.jinja_env)

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.service_template = self.jinja_env.get_template(f"service.{self.FILE_EXTENSION}.jinja2")
        self.message_template = self.jinja_env.get_template(f"message.{self.FILE_EXTENSION}.jinja2")

    def _add_filters(self, env: jinja2.Environment) -> None:
        """Register language specific template filters."""

    @abstractmethod
    def generate(self, ir: FileIR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation of one file

        Returns:
            Generated code as a string
        """
