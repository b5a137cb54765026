"""Semantic engine surface consumed by the extractor.

Protocols describe the read-only queries the extractor makes; MemoryProgram
implements them over trees assembled with the builder module.
"""

from tsdoc_extractor.semantic.memory import (
    CALL_SIGNATURE_NAME,
    CONSTRUCT_SIGNATURE_NAME,
    CONSTRUCTOR_NAME,
    MemoryProgram,
    MemoryProgramFactory,
    MemoryTypeChecker,
)
from tsdoc_extractor.semantic.nodes import (
    PARAMETER_PROPERTY_MODIFIERS,
    Modifier,
    Node,
    SourceFile,
    Symbol,
    SymbolFlags,
    SyntaxKind,
)
from tsdoc_extractor.semantic.protocol import ProgramFactory, SemanticProgram, TypeChecker

__all__ = [
    "CALL_SIGNATURE_NAME",
    "CONSTRUCTOR_NAME",
    "CONSTRUCT_SIGNATURE_NAME",
    "PARAMETER_PROPERTY_MODIFIERS",
    "MemoryProgram",
    "MemoryProgramFactory",
    "MemoryTypeChecker",
    "Modifier",
    "Node",
    "ProgramFactory",
    "SemanticProgram",
    "SourceFile",
    "Symbol",
    "SymbolFlags",
    "SyntaxKind",
    "TypeChecker",
]
