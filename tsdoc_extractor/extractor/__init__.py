"""Semantic extraction of TypeScript modules into a document model."""

from tsdoc_extractor.extractor.collector import closest_exporting_symbols, collect_module_symbols
from tsdoc_extractor.extractor.exports import ResolvedExport, resolve_export, resolve_module_exports
from tsdoc_extractor.extractor.filters import ExportFilter
from tsdoc_extractor.extractor.members import MemberBuilder, access_of
from tsdoc_extractor.extractor.models import (
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
    UnresolvedExportDoc,
    VariableDoc,
)
from tsdoc_extractor.extractor.parser import ParsedModule, ParseResult, TypeScriptParser
from tsdoc_extractor.extractor.reader import TypeScriptModuleReader, read_typescript_modules
from tsdoc_extractor.extractor.signatures import Signature, SignatureRenderer
from tsdoc_extractor.extractor.type_renderer import TypeRenderer, strip_namespaces
from tsdoc_extractor.extractor.unifier import ModuleUnifier

__all__ = [
    "Access",
    "ClassDoc",
    "ConstDoc",
    "Doc",
    "EnumDoc",
    "ExportDoc",
    "ExportFilter",
    "FunctionDoc",
    "InterfaceDoc",
    "MemberBuilder",
    "MemberDoc",
    "MemberKind",
    "ModuleDoc",
    "ModuleUnifier",
    "ParameterDoc",
    "ParseResult",
    "ParsedModule",
    "ResolvedExport",
    "Signature",
    "SignatureRenderer",
    "TypeAliasDoc",
    "TypeRenderer",
    "TypeScriptModuleReader",
    "TypeScriptParser",
    "UnresolvedExportDoc",
    "VariableDoc",
    "access_of",
    "closest_exporting_symbols",
    "collect_module_symbols",
    "read_typescript_modules",
    "resolve_export",
    "resolve_module_exports",
    "strip_namespaces",
]
