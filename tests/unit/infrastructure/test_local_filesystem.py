"""Tests for LocalFilesystem."""

import os
from pathlib import Path

import pytest

from fscache.core.entities.node import NodeKind
from fscache.infrastructure.filesystems.local import LocalFilesystem


class TestLocalFilesystem:
    """Tests for LocalFilesystem."""

    @pytest.fixture
    def filesystem(self) -> LocalFilesystem:
        """Create a filesystem for testing."""
        return LocalFilesystem()

    @pytest.mark.asyncio
    async def test_write_and_read(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test basic write and read operations."""
        path = str(tmp_path / "key")
        await filesystem.write_file(path, b"value")

        assert await filesystem.file_exists(path) is True
        assert await filesystem.read_file(path) == b"value"

    @pytest.mark.asyncio
    async def test_write_overwrites(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test that writing replaces existing content."""
        path = str(tmp_path / "key")
        await filesystem.write_file(path, b"a much longer first value")
        await filesystem.write_file(path, b"short")

        assert await filesystem.read_file(path) == b"short"

    @pytest.mark.asyncio
    async def test_file_exists_ignores_directories(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test that directories are not reported as files."""
        assert await filesystem.file_exists(str(tmp_path)) is False
        assert await filesystem.file_exists(str(tmp_path / "missing")) is False

    @pytest.mark.asyncio
    async def test_read_missing(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test reading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            await filesystem.read_file(str(tmp_path / "missing"))

    @pytest.mark.asyncio
    async def test_remove_missing(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test removing a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            await filesystem.remove_file(str(tmp_path / "missing"))

    @pytest.mark.asyncio
    async def test_create_directory_recursive(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test that parents are created and existing directories rejected."""
        path = str(tmp_path / "a" / "b")
        await filesystem.create_directory_recursive(path)

        assert os.path.isdir(path)
        with pytest.raises(FileExistsError):
            await filesystem.create_directory_recursive(path)

    @pytest.mark.asyncio
    async def test_list_recursive(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test listing every node below a path."""
        (tmp_path / "dir" / "sub").mkdir(parents=True)
        (tmp_path / "dir" / "sub" / "a").write_bytes(b"1")
        (tmp_path / "b").write_bytes(b"2")

        nodes = {
            node.path: node.kind
            async for node in filesystem.list_recursive(str(tmp_path))
        }

        assert nodes == {
            str(tmp_path / "dir"): NodeKind.DIRECTORY,
            str(tmp_path / "dir" / "sub"): NodeKind.DIRECTORY,
            str(tmp_path / "dir" / "sub" / "a"): NodeKind.FILE,
            str(tmp_path / "b"): NodeKind.FILE,
        }

    @pytest.mark.asyncio
    async def test_list_missing_directory(
        self, filesystem: LocalFilesystem, tmp_path: Path
    ) -> None:
        """Test that listing a missing directory raises."""
        with pytest.raises(FileNotFoundError):
            async for _ in filesystem.list_recursive(str(tmp_path / "missing")):
                pass
