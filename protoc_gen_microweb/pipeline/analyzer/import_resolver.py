"""
Import resolver for foreign Go packages.

Assigns each Go import path referenced by a generated file a short alias.
One resolver lives for exactly one output file, so every file gets a single
consistent import block.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

# Modern well-known type packages and the legacy packages they alias.
# Generated go-micro code still refers to the legacy ones.
CANONICAL_IMPORTS: Mapping[str, str] = MappingProxyType(
    {
        "google.golang.org/protobuf/types/known/emptypb": "github.com/golang/protobuf/ptypes/empty",
    }
)


def canonicalize(path: str) -> str:
    """Rewrite an import path to its legacy equivalent, if it has one."""
    return CANONICAL_IMPORTS.get(path, path)


def derive_alias(path: str) -> str:
    """
    Compute the alias of a canonical import path.

    The alias joins the last two path segments:
    "github.com/golang/protobuf/ptypes/empty" -> "ptypesempty".
    Distinct paths ending in the same two segments get the same alias.

    Args:
        path: Canonical import path

    Returns:
        The alias
    """
    parts = path.split("/")
    if len(parts) < 2:
        return path
    return "".join(parts[-2:])


class ImportResolver:
    """Alias table for the foreign imports of one generated file."""

    def __init__(self):
        self._aliases: dict[str, str] = {}

    def register(self, path: str) -> str:
        """
        Register an import path and return its alias.

        Registering the same path again returns the existing alias.

        Args:
            path: Go import path, as declared by the proto file

        Returns:
            The alias to qualify types from that package with
        """
        path = canonicalize(path)
        alias = self._aliases.get(path)
        if alias is None:
            alias = derive_alias(path)
            self._aliases[path] = alias
        return alias

    def lookup(self, path: str) -> str:
        """
        Get the alias of a previously registered import path.

        Raises:
            KeyError: If the path was never registered
        """
        return self._aliases[canonicalize(path)]

    @property
    def imports(self) -> dict[str, str]:
        """Registered imports as {canonical path: alias}, in registration order."""
        return dict(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, path: str) -> bool:
        return canonicalize(path) in self._aliases
