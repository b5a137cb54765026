"""Module identity: slash-joined paths for files and nested namespaces."""

import os
import re
from pathlib import Path, PurePosixPath

from tsdoc_extractor.semantic import Symbol

_EXTENSION_RE = re.compile(r"(\.d)?\.(ts|tsx|js)$")


def is_file_module(symbol: Symbol) -> bool:
    """File-level module symbols carry the quoted file path as their name."""
    return len(symbol.name) > 1 and symbol.name.startswith('"') and symbol.name.endswith('"')


def module_name_from_file(file_name: str, base_dir: Path) -> str:
    """Base-relative path without extension, e.g. ``/src/lib/util.ts`` -> ``lib/util``."""
    path = _EXTENSION_RE.sub("", file_name.strip('"'))
    if os.path.isabs(path):
        path = os.path.relpath(path, base_dir)
    return PurePosixPath(path.replace("\\", "/")).as_posix()


def module_id(symbol: Symbol, base_dir: Path) -> str:
    """Slash-joined identity of a module or namespace symbol.

    Namespaces are qualified by their enclosing namespaces and, inside an
    external module, by that module's path.
    """
    segments: list[str] = []
    current: Symbol | None = symbol
    while current is not None:
        if is_file_module(current):
            segments.append(module_name_from_file(current.name, base_dir))
            break
        segments.append(current.name)
        current = current.parent
    return "/".join(reversed(segments))


def module_display_name(symbol: Symbol, base_dir: Path) -> str:
    if is_file_module(symbol):
        return module_name_from_file(symbol.name, base_dir)
    return symbol.name


def declaring_module_id(symbol: Symbol, base_dir: Path) -> str | None:
    """Id of the module a declared symbol belongs to, or None for globals."""
    if symbol.parent is None:
        return None
    return module_id(symbol.parent, base_dir)
