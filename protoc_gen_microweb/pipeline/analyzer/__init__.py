"""
Analyzer module.

Contains binding extraction, import aliasing, and IR building.
"""

from __future__ import annotations

from .analyzer import FileAnalyzer
from .bindings import Binding, RuleSlots, Verb, extract_binding, select_binding
from .import_resolver import CANONICAL_IMPORTS, ImportResolver, canonicalize, derive_alias
from .ir_nodes import AdapterDef, FileIR, GoType, HandlerDef, ServiceDef

__all__ = [
    "AdapterDef",
    "Binding",
    "CANONICAL_IMPORTS",
    "FileAnalyzer",
    "FileIR",
    "GoType",
    "HandlerDef",
    "ImportResolver",
    "RuleSlots",
    "ServiceDef",
    "Verb",
    "canonicalize",
    "derive_alias",
    "extract_binding",
    "select_binding",
]
