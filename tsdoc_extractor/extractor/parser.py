"""Program construction and per-file module/export collection."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from tsdoc_extractor.exceptions import SourceFileNotFoundError
from tsdoc_extractor.extractor.collector import collect_module_symbols
from tsdoc_extractor.extractor.exports import ResolvedExport, resolve_module_exports
from tsdoc_extractor.logging import get_extractor_logger
from tsdoc_extractor.semantic import ProgramFactory, SemanticProgram, Symbol, TypeChecker

logger = get_extractor_logger(__name__)


@dataclass(frozen=True)
class ParsedModule:
    symbol: Symbol
    file_name: str
    exports: tuple[ResolvedExport, ...]


@dataclass(frozen=True)
class ParseResult:
    """Modules in file-processing order, plus the program they came from."""

    modules: tuple[ParsedModule, ...]
    program: SemanticProgram
    type_checker: TypeChecker


class TypeScriptParser:
    """Builds a program for the requested files and collects their modules."""

    def __init__(self, program_factory: ProgramFactory) -> None:
        self._program_factory = program_factory

    def parse(self, file_names: Sequence[str], base_dir: Path | str) -> ParseResult:
        """Collect module symbols and resolved exports for each file.

        Raises:
            SourceFileNotFoundError: A requested file is not in the program.
        """
        base_dir = Path(base_dir)
        program = self._program_factory(list(file_names), base_dir)
        checker = program.get_type_checker()

        modules: list[ParsedModule] = []
        for file_name in file_names:
            source_file = program.get_source_file(file_name)
            if source_file is None:
                raise SourceFileNotFoundError(file_name)
            for symbol in collect_module_symbols(checker, source_file):
                exports = tuple(resolve_module_exports(checker, symbol))
                logger.debug("Collected %s from %s with %d exports", symbol.name, file_name, len(exports))
                modules.append(ParsedModule(symbol=symbol, file_name=source_file.file_name, exports=exports))

        return ParseResult(modules=tuple(modules), program=program, type_checker=checker)
