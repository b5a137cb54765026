"""tsdoc-extractor - documentation model extraction from TypeScript semantics.

Turns the symbol and type information of a TypeScript semantic program into
a language-agnostic document graph: modules, their exports, and class,
interface and enum members, with rendered types and signatures.

Quick Start:
    >>> from tsdoc_extractor import ExtractorSettings, read_typescript_modules
    >>> from tsdoc_extractor.semantic import MemoryProgramFactory
    >>> from tsdoc_extractor.semantic import builder as ts
    >>>
    >>> factory = MemoryProgramFactory([
    ...     ts.source_file("shapes.ts", ts.class_decl("Circle", ts.property_decl("radius", "number"), export=True)),
    ... ])
    >>> docs = read_typescript_modules(["shapes.ts"], "/src", factory)
    >>> [(doc.doc_type, doc.name) for doc in docs]
    [('module', 'shapes'), ('class', 'Circle'), ('member', 'radius')]

Environment Variables:
    - TSDOC_IGNORE_EXPORTS_MATCHING, TSDOC_IGNORE_TYPESCRIPT_NAMESPACES,
      TSDOC_SORT_CLASS_MEMBERS: see tsdoc_extractor.settings
    - TSDOC_LOGGING_CONFIG, TSDOC_LOG_LEVEL: see tsdoc_extractor.logging
"""

from .exceptions import InvalidPatternError, LoggingConfigError, SourceFileNotFoundError, TsDocError
from .extractor import (
    Access,
    ClassDoc,
    ConstDoc,
    Doc,
    EnumDoc,
    ExportDoc,
    FunctionDoc,
    InterfaceDoc,
    MemberDoc,
    MemberKind,
    ModuleDoc,
    ParameterDoc,
    TypeAliasDoc,
    TypeScriptModuleReader,
    TypeScriptParser,
    UnresolvedExportDoc,
    VariableDoc,
    read_typescript_modules,
)
from .logging import get_extractor_logger, setup_logging
from .settings import ExtractorSettings

__version__ = "0.1.0"

__all__ = [
    "Access",
    "ClassDoc",
    "ConstDoc",
    "Doc",
    "EnumDoc",
    "ExportDoc",
    "ExtractorSettings",
    "FunctionDoc",
    "InterfaceDoc",
    "InvalidPatternError",
    "LoggingConfigError",
    "MemberDoc",
    "MemberKind",
    "ModuleDoc",
    "ParameterDoc",
    "SourceFileNotFoundError",
    "TsDocError",
    "TypeAliasDoc",
    "TypeScriptModuleReader",
    "TypeScriptParser",
    "UnresolvedExportDoc",
    "VariableDoc",
    "get_extractor_logger",
    "read_typescript_modules",
    "setup_logging",
]
