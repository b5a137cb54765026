"""Common test fixtures for extraction tests."""

from collections.abc import Callable
from typing import Any

import pytest

from tests.support.programs import BASE_DIR, program_factory
from tsdoc_extractor import Doc, ExtractorSettings, read_typescript_modules
from tsdoc_extractor.semantic import MemoryProgram, MemoryProgramFactory


@pytest.fixture
def factory() -> MemoryProgramFactory:
    """Program factory over every scenario tree."""
    return program_factory()


@pytest.fixture
def program(factory: MemoryProgramFactory) -> MemoryProgram:
    return factory([], BASE_DIR)


@pytest.fixture
def read(factory: MemoryProgramFactory) -> Callable[..., list[Doc]]:
    """Read the named scenario files; keyword arguments become ExtractorSettings fields."""

    def _read(*file_names: str, **options: Any) -> list[Doc]:
        settings = ExtractorSettings(**options)
        return read_typescript_modules(list(file_names), BASE_DIR, factory, settings)

    return _read
