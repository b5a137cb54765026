"""Reads TypeScript modules into a flat, ordered list of documents.

Pipeline per run: build the program and collect modules (TypeScriptParser),
filter exports, build export and member documents, and unify modules that
share an id. Output order follows file-processing order, then export order
within each module; each export document is followed by its members.
"""

from collections.abc import Sequence
from pathlib import Path

from tsdoc_extractor.extractor import naming
from tsdoc_extractor.extractor.builders import ExportDocBuilder
from tsdoc_extractor.extractor.exports import ResolvedExport, resolve_module_exports
from tsdoc_extractor.extractor.filters import ExportFilter
from tsdoc_extractor.extractor.members import MemberBuilder
from tsdoc_extractor.extractor.models import ClassDoc, Doc, EnumDoc, ExportDoc, InterfaceDoc, MemberDoc, ModuleDoc
from tsdoc_extractor.extractor.parser import TypeScriptParser
from tsdoc_extractor.extractor.signatures import SignatureRenderer
from tsdoc_extractor.extractor.type_renderer import TypeRenderer
from tsdoc_extractor.extractor.unifier import ModuleUnifier
from tsdoc_extractor.logging import get_extractor_logger
from tsdoc_extractor.semantic import ProgramFactory, Symbol, SyntaxKind, TypeChecker
from tsdoc_extractor.settings import ExtractorSettings

logger = get_extractor_logger(__name__)


def _is_namespace(symbol: Symbol) -> bool:
    return bool(symbol.declarations) and all(declaration.kind is SyntaxKind.MODULE_DECLARATION for declaration in symbol.declarations)


def _members_of(doc: ExportDoc) -> tuple[MemberDoc, ...]:
    if isinstance(doc, (ClassDoc, InterfaceDoc, EnumDoc)):
        return doc.members
    return ()


class _ExtractionRun:
    """State for a single read; never shared between runs."""

    def __init__(self, checker: TypeChecker, settings: ExtractorSettings, base_dir: Path) -> None:
        self._checker = checker
        self._base_dir = base_dir
        self._filter = ExportFilter(settings.ignore_exports_matching)
        types = TypeRenderer(checker, settings.ignore_typescript_namespaces)
        signatures = SignatureRenderer(types)
        members = MemberBuilder(types, signatures, sort_class_members=settings.sort_class_members)
        self._builder = ExportDocBuilder(types, signatures, members, base_dir)
        self._unifier = ModuleUnifier()
        self.docs: list[Doc] = []

    def add_module(
        self,
        symbol: Symbol,
        exports: Sequence[ResolvedExport],
        *,
        file_name: str | None = None,
        module_id: str | None = None,
        name: str | None = None,
    ) -> ModuleDoc:
        module_id = module_id or naming.module_id(symbol, self._base_dir)
        name = name or naming.module_display_name(symbol, self._base_dir)
        module_doc, created = self._unifier.get_or_create(module_id, name, file_name)
        if created:
            self.docs.append(module_doc)

        for export in self._filter.apply(exports):
            if not self._unifier.claim(module_doc, export.export_symbol):
                continue
            if _is_namespace(export.symbol):
                nested = self.add_module(
                    export.symbol,
                    resolve_module_exports(self._checker, export.symbol),
                    file_name=file_name,
                    module_id=f"{module_id}/{export.name}",
                    name=export.name,
                )
                self._unifier.attach(module_doc, nested)
                continue
            doc = self._builder.build(export, module_id)
            self._unifier.attach(module_doc, doc)
            self.docs.append(doc)
            self.docs.extend(_members_of(doc))
        return module_doc


class TypeScriptModuleReader:
    """Extracts documents from TypeScript sources through a semantic program.

    Example:
        >>> reader = TypeScriptModuleReader(MemoryProgramFactory(files))
        >>> docs = reader.read(["publicModule.ts"], base_dir="/src")
        >>> [doc.name for doc in docs if doc.doc_type == "module"]
        ['publicModule']
    """

    def __init__(self, program_factory: ProgramFactory, settings: ExtractorSettings | None = None) -> None:
        self._parser = TypeScriptParser(program_factory)
        self.settings = settings or ExtractorSettings()

    def read(self, file_names: Sequence[str], base_dir: Path | str) -> list[Doc]:
        """Extract documents for file_names, resolved against base_dir.

        Raises:
            SourceFileNotFoundError: A requested file is not in the program.
        """
        base_dir = Path(base_dir)
        result = self._parser.parse(file_names, base_dir)
        run = _ExtractionRun(result.type_checker, self.settings, base_dir)
        for parsed in result.modules:
            run.add_module(parsed.symbol, parsed.exports, file_name=parsed.file_name)
        logger.debug("Extracted %d documents from %d files", len(run.docs), len(file_names))
        return run.docs


def read_typescript_modules(
    file_names: Sequence[str],
    base_dir: Path | str,
    program_factory: ProgramFactory,
    settings: ExtractorSettings | None = None,
) -> list[Doc]:
    """Convenience wrapper around TypeScriptModuleReader.read."""
    return TypeScriptModuleReader(program_factory, settings).read(file_names, base_dir)
