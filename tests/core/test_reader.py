"""Tests for the recursive directory reader."""

from pathlib import Path
from typing import Any

import pytest
from conftest import StubFileProvider

from fsexplorer.core.errors import DirectoryNotValid, PathDidNotExist
from fsexplorer.core.models import File, Folder
from fsexplorer.core.reader import read_tree
from fsexplorer.fs.provider import OSFileProvider


class TreeProvider(StubFileProvider):
    """Serves a nested dict as a filesystem rooted at /root.

    A dict value is a directory, a str value is a file's content.
    """

    def __init__(self, tree: dict[str, Any]) -> None:
        super().__init__()
        self.tree = tree

    def _lookup(self, path: str) -> Any:
        node: Any = {"root": self.tree}
        for part in path.strip("/").split("/"):
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        return node

    def probe(self, path: str) -> tuple[bool, bool]:
        node = self._lookup(path)
        return node is not None, isinstance(node, dict)

    def list_directory(self, path: str) -> list[str]:
        node = self._lookup(path)
        if not isinstance(node, dict):
            raise NotADirectoryError(path)
        return list(node)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return self._lookup(path)

    def read_attributes(self, path: str) -> dict[str, Any]:
        return {"path": path}


class TestReadTreeWithFakes:
    """Test classification and recursion against a fake provider."""

    def test_reads_files_with_extension_content_and_attributes(self) -> None:
        provider = TreeProvider({"explorer.swift": "code", "LICENSE": "MIT"})

        entries = read_tree(provider, "/root")

        assert entries == [
            File(
                name="explorer",
                extension="swift",
                content="code",
                attributes={"path": "/root/explorer.swift"},
            ),
            File(name="LICENSE", content="MIT", attributes={"path": "/root/LICENSE"}),
        ]

    def test_skips_folders_when_not_included(self) -> None:
        provider = TreeProvider({"a.txt": "a", "sub": {"b.txt": "b"}})

        entries = read_tree(provider, "/root", include_folders=False, recursive=True)

        assert [entry.name for entry in entries] == ["a"]

    def test_non_recursive_folders_are_empty(self) -> None:
        provider = TreeProvider({"sub": {"b.txt": "b"}})

        entries = read_tree(provider, "/root", include_folders=True, recursive=False)

        assert entries == [
            Folder(name="sub", contents=[], attributes={"path": "/root/sub"})
        ]

    def test_recursive_folders_embed_children(self) -> None:
        provider = TreeProvider({"sub": {"deeper": {"c.md": "c"}, "b.txt": "b"}})

        entries = read_tree(provider, "/root/", include_folders=True, recursive=True)

        sub = entries[0]
        assert isinstance(sub, Folder)
        assert [entry.name for entry in sub.contents] == ["deeper", "b"]
        deeper = sub.contents[0]
        assert isinstance(deeper, Folder)
        assert deeper.contents[0] == File(
            name="c",
            extension="md",
            content="c",
            attributes={"path": "/root/sub/deeper/c.md"},
        )

    def test_unlistable_directory_raises(self) -> None:
        provider = TreeProvider({"a.txt": "a"})

        with pytest.raises(DirectoryNotValid) as exc_info:
            read_tree(provider, "/root/a.txt")

        assert exc_info.value.directory == "/root/a.txt"

    def test_missing_item_raises_path_did_not_exist(self) -> None:
        class VanishingProvider(TreeProvider):
            def probe(self, path: str) -> tuple[bool, bool]:
                return False, False

        provider = VanishingProvider({"a.txt": "a"})

        with pytest.raises(PathDidNotExist) as exc_info:
            read_tree(provider, "/root")

        assert exc_info.value.path == "/root/a.txt"

    def test_nested_failure_propagates(self) -> None:
        class BrokenSubfolder(TreeProvider):
            def list_directory(self, path: str) -> list[str]:
                if path == "/root/sub":
                    raise PermissionError(path)
                return super().list_directory(path)

        provider = BrokenSubfolder({"a.txt": "a", "sub": {}})

        with pytest.raises(DirectoryNotValid) as exc_info:
            read_tree(provider, "/root", include_folders=True, recursive=True)

        assert exc_info.value.directory == "/root/sub"


class TestBestEffortReads:
    """Unreadable content and attributes become None instead of failing."""

    def test_unreadable_content_is_none(self) -> None:
        class UnreadableContent(TreeProvider):
            def read_text(self, path: str, encoding: str = "utf-8") -> str:
                raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        entries = read_tree(UnreadableContent({"logo.png": "x"}), "/root")

        assert entries[0].name == "logo"
        assert entries[0].content is None

    def test_unreadable_attributes_are_none(self) -> None:
        class UnreadableAttributes(TreeProvider):
            def read_attributes(self, path: str) -> dict[str, Any]:
                raise PermissionError(path)

        entries = read_tree(
            UnreadableAttributes({"a.txt": "a", "sub": {}}),
            "/root",
            include_folders=True,
        )

        assert [entry.attributes for entry in entries] == [None, None]
        assert entries[0].content == "a"


class TestReadTreeOnDisk:
    """Test reading a real directory through the OS provider."""

    def test_recursive_read_of_file_and_empty_folder(self, tmp_path: Path) -> None:
        (tmp_path / "notes.txt").write_text("hello")
        (tmp_path / "empty").mkdir()

        entries = read_tree(
            OSFileProvider(), str(tmp_path), include_folders=True, recursive=True
        )

        assert len(entries) == 2
        files = [entry for entry in entries if isinstance(entry, File)]
        folders = [entry for entry in entries if isinstance(entry, Folder)]
        assert len(files) == 1
        assert files[0].name == "notes"
        assert files[0].extension == "txt"
        assert files[0].content == "hello"
        assert files[0].attributes is not None
        assert len(folders) == 1
        assert folders[0].name == "empty"
        assert folders[0].contents == []

    def test_read_leaves_directory_untouched(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("a")
        before = sorted(p.name for p in tmp_path.iterdir())

        read_tree(OSFileProvider(), str(tmp_path), include_folders=True, recursive=True)

        assert sorted(p.name for p in tmp_path.iterdir()) == before

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryNotValid):
            read_tree(OSFileProvider(), str(tmp_path / "missing"))
