"""
Schema model module.

Contains the descriptor loader and the schema nodes it produces.
"""

from __future__ import annotations

from .loader import DescriptorLoader
from .nodes import (
    EMPTY_MESSAGE,
    ProtoFile,
    ProtoMessage,
    ProtoMethod,
    ProtoService,
    TypeRef,
)

__all__ = [
    "DescriptorLoader",
    "EMPTY_MESSAGE",
    "ProtoFile",
    "ProtoMessage",
    "ProtoMethod",
    "ProtoService",
    "TypeRef",
]
