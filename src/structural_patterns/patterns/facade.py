from __future__ import annotations

"""
Facade Pattern: File System Operations.

Creating, reading and deleting a file involves several subsystems
(files, folders, permissions, backups). The facade exposes three simple
calls and sequences the subsystem work behind them.
"""

import logging
from abc import ABC, abstractmethod

from structural_patterns.patterns.output import Emitter, console_emitter

logger = logging.getLogger(__name__)

DEFAULT_FOLDER: str = "DefaultFolder"


# -----------------------------------------------------------------------------
# SIMPLIFIED INTERFACE
# -----------------------------------------------------------------------------

class FileSystem(ABC):
    @abstractmethod
    def create_file(self, name: str, content: str) -> None:
        """Create a file with the given content."""

    @abstractmethod
    def read_file(self, name: str) -> None:
        """Read a file."""

    @abstractmethod
    def delete_file(self, name: str) -> None:
        """Delete a file."""


# -----------------------------------------------------------------------------
# SUBSYSTEMS
# -----------------------------------------------------------------------------

class FileOperations:
    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._emit = emit

    def create(self, name: str, content: str) -> None:
        self._emit(f'File "{name}" created with content: "{content}"')

    def read(self, name: str) -> None:
        self._emit(f'Reading file "{name}"...')

    def delete(self, name: str) -> None:
        self._emit(f'File "{name}" deleted')


class FolderOperations:
    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._emit = emit

    def create_folder(self, name: str) -> None:
        self._emit(f'Folder "{name}" created')


class Permissions:
    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._emit = emit

    def set_read_write(self, name: str) -> None:
        self._emit(f'Permissions set: "{name}" is read-write')


class Backup:
    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._emit = emit

    def backup_file(self, name: str) -> None:
        self._emit(f'Backup created for file "{name}"')


# -----------------------------------------------------------------------------
# FACADE
# -----------------------------------------------------------------------------

class FileSystemFacade(FileSystem):
    """
    Single entry point over the file, folder, permission and backup subsystems.
    """

    def __init__(self, emit: Emitter = console_emitter) -> None:
        self._emit = emit
        self._file = FileOperations(emit)
        self._folder = FolderOperations(emit)
        self._permissions = Permissions(emit)
        self._backup = Backup(emit)

    def create_file(self, name: str, content: str) -> None:
        logger.debug(f"Facade create_file('{name}').")
        self._emit("- Creating file via Facade -")
        self._folder.create_folder(DEFAULT_FOLDER)
        self._file.create(name, content)
        self._permissions.set_read_write(name)
        self._backup.backup_file(name)
        self._finish(f'File "{name}" created successfully!')

    def read_file(self, name: str) -> None:
        logger.debug(f"Facade read_file('{name}').")
        self._emit("- Reading file via Facade -")
        self._file.read(name)
        self._finish(f'File "{name}" read successfully!')

    def delete_file(self, name: str) -> None:
        logger.debug(f"Facade delete_file('{name}').")
        self._emit("- Deleting file via Facade -")
        self._file.delete(name)
        self._backup.backup_file(name)
        self._finish(f'File "{name}" deleted successfully!')

    def _finish(self, message: str) -> None:
        """Emit the success line followed by a separating blank line."""
        self._emit(message)
        self._emit("")
