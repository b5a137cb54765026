"""Unification of module documents that share a dotted identity."""

from tsdoc_extractor.extractor.models import ExportDoc, ModuleDoc
from tsdoc_extractor.semantic import Symbol


class ModuleUnifier:
    """One ModuleDoc per module id for the lifetime of an extraction run.

    A namespace declared across several files maps to a single document;
    every file's exports are appended to it in processing order. Each export
    symbol contributes at most once per module, so an engine that merges the
    split declarations into one symbol does not double the export list.
    """

    def __init__(self) -> None:
        self._modules: dict[str, ModuleDoc] = {}
        self._contributed: dict[str, set[Symbol]] = {}

    def get_or_create(self, module_id: str, name: str, file_name: str | None = None) -> tuple[ModuleDoc, bool]:
        """Return the document for module_id and whether it was created by this call."""
        existing = self._modules.get(module_id)
        if existing is not None:
            return existing, False
        module_doc = ModuleDoc(id=module_id, name=name, file_name=file_name)
        self._modules[module_id] = module_doc
        self._contributed[module_id] = set()
        return module_doc, True

    def claim(self, module_doc: ModuleDoc, export_symbol: Symbol) -> bool:
        """Record that export_symbol contributes to module_doc. False if it already did."""
        contributed = self._contributed.setdefault(module_doc.id, set())
        if export_symbol in contributed:
            return False
        contributed.add(export_symbol)
        return True

    @staticmethod
    def attach(module_doc: ModuleDoc, doc: ExportDoc | ModuleDoc) -> None:
        """Append doc to the module's exports unless that same document is already there."""
        if not any(existing is doc for existing in module_doc.exports):
            module_doc.exports.append(doc)
