"""
Tests for the pwd and ls commands.
"""

import asyncio
import os
from unittest.mock import MagicMock

import pytest

from tinyshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from tinyshell.entities.listing import DirectoryListing
from tinyshell.exceptions import EnvironmentFailureError, FilesystemError
from tinyshell.use_cases.commands.files_commands import LsCommand, PwdCommand
from tinyshell.use_cases.files.current_directory import CurrentDirectoryUseCase
from tinyshell.use_cases.files.list_directory import ListDirectoryUseCase


@pytest.fixture
def ls_command(memory_console, mock_logger):
    fs = LocalFileSystemAdapter(mock_logger)
    return LsCommand(ListDirectoryUseCase(fs, mock_logger), memory_console)


class TestPwdCommand:
    """Test cases for the pwd command."""

    def test_prints_current_directory(
        self, temp_directory, monkeypatch, memory_console, mock_logger
    ):
        monkeypatch.chdir(temp_directory)
        command = PwdCommand(
            CurrentDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger),
            memory_console,
        )

        result = asyncio.run(command.run(["ignored", "args"]))

        assert result == os.getcwd()
        assert memory_console.lines == [os.getcwd()]

    def test_environment_failure_propagates(self, memory_console):
        use_case = MagicMock(spec=CurrentDirectoryUseCase)
        use_case.execute.side_effect = EnvironmentFailureError("cwd removed")
        command = PwdCommand(use_case, memory_console)

        with pytest.raises(EnvironmentFailureError):
            asyncio.run(command.run([]))
        assert memory_console.events == []


class TestLsCommand:
    """Test cases for the ls command."""

    def test_lists_given_directory(self, temp_directory, ls_command, memory_console):
        listing = asyncio.run(ls_command.run([temp_directory]))

        assert isinstance(listing, DirectoryListing)
        assert set(memory_console.lines) == {"test1.txt", "test2.py", "subdir"}
        assert memory_console.lines == listing.entries

    def test_no_argument_matches_literal_cwd(
        self, temp_directory, monkeypatch, ls_command, memory_console
    ):
        monkeypatch.chdir(temp_directory)

        implicit = asyncio.run(ls_command.run([]))
        explicit = asyncio.run(ls_command.run([os.getcwd()]))

        assert set(implicit.entries) == set(explicit.entries)
        assert set(implicit.entries) == {"test1.txt", "test2.py", "subdir"}

    def test_empty_argument_means_cwd(
        self, temp_directory, monkeypatch, ls_command
    ):
        monkeypatch.chdir(temp_directory)

        listing = asyncio.run(ls_command.run([""]))

        assert listing.path == os.getcwd()

    def test_nonexistent_path(self, ls_command, memory_console):
        with pytest.raises(FilesystemError, match="Directory does not exist"):
            asyncio.run(ls_command.run(["nonexistent-path-xyz"]))
        assert memory_console.lines == []

    def test_extra_arguments_ignored(self, temp_directory, ls_command, memory_console):
        asyncio.run(ls_command.run([os.path.join(temp_directory, "subdir"), "extra"]))
        assert memory_console.lines == ["test3.md"]
