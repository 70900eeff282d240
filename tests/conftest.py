"""Pytest configuration and fixtures for fsexplorer tests."""

from typing import Any

import pytest

from fsexplorer.core.models import File, Folder
from fsexplorer.fs.provider import FileProvider

DESKTOP = "/Users/wendyliga/Desktop"


class StubFileProvider(FileProvider):
    """FileProvider whose every call returns a fixed default.

    Tests subclass it and override only the calls they care about. Removals,
    created files and created directories are recorded for assertions.
    """

    def __init__(self) -> None:
        self.removed: list[str] = []
        self.created_files: list[str] = []
        self.created_directories: list[str] = []

    def exists(self, path: str) -> bool:
        return False

    def probe(self, path: str) -> tuple[bool, bool]:
        return False, False

    def remove(self, path: str) -> None:
        self.removed.append(path)

    def create_file(
        self,
        path: str,
        contents: bytes | None,
        attributes: dict[str, Any] | None = None,
    ) -> bool:
        return False

    def create_directory(
        self,
        path: str,
        recursive: bool,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        self.created_directories.append(path)

    def list_directory(self, path: str) -> list[str]:
        return []

    def read_attributes(self, path: str) -> dict[str, Any]:
        return {}

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return ""

    def current_directory(self) -> str:
        return ""


@pytest.fixture
def stub_provider() -> StubFileProvider:
    """Provider with default answers only."""
    return StubFileProvider()


@pytest.fixture
def explorer_file() -> File:
    """The explorer.swift file used across writer tests."""
    return File(name="explorer", content=None, extension="swift")


@pytest.fixture
def sample_tree() -> Folder:
    """A small nested folder tree."""
    return Folder(
        name="project",
        contents=[
            File(name="README", extension="md", content="# Project"),
            Folder(
                name="src",
                contents=[File(name="main", extension="py", content="print('hi')")],
            ),
            Folder(name="empty"),
        ],
    )
