"""
gofmt formatter for Go code.
"""

from __future__ import annotations

import logging
import subprocess

from .base import Formatter

logger = logging.getLogger(__name__)


class GofmtFormatter(Formatter):
    """Formatter using gofmt for Go code."""

    def __init__(self, executable: str = "gofmt"):
        self.executable = executable
        self._available: bool | None = None

    def is_available(self) -> bool:
        """Check if gofmt is installed."""
        if self._available is None:
            try:
                # gofmt has no --version flag; formatting an empty input is enough
                result = subprocess.run(
                    [self.executable],
                    input="",
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
            if not self._available:
                logger.debug("%s not found, generated code is left unformatted", self.executable)
        return self._available

    def format(self, code: str) -> str:
        """
        Format Go code using gofmt.

        Args:
            code: Go source code to format

        Returns:
            Formatted code, or the original code if gofmt is missing or fails
        """
        if not self.is_available():
            return code

        try:
            result = subprocess.run(
                [self.executable],
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            logger.warning("%s failed: %s", self.executable, e)
            return code

        if result.returncode != 0:
            logger.warning("%s rejected generated code: %s", self.executable, result.stderr.strip())
            return code
        return result.stdout
