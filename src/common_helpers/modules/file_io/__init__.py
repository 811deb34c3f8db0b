# src/common_helpers/modules/file_io/__init__.py
"""
Módulo de File I/O multiplataforma.
"""

from __future__ import annotations

# Application
from .application.use_cases import BuildChecksumManifest, CopyDirectoryVerified, CopyReport

# Domain
from .domain.exceptions import FileIoError, InvalidChecksumMethodError, PathNotFoundError
from .domain.path_resolver import (
    detect_operating_system,
    join_path,
    path_separator,
    to_host_path,
)
from .domain.ports.file_io import FileIo
from .domain.value_objects import ChecksumMethod, DirEntry, FileInfo, OperatingSystem

# Infrastructure
from .infrastructure.adapters import FakeFileIo, LocalFileIoAdapter
from .infrastructure.config import FileIoSettings

__all__ = [
    "BuildChecksumManifest",
    "ChecksumMethod",
    "CopyDirectoryVerified",
    "CopyReport",
    "DirEntry",
    "FakeFileIo",
    "FileInfo",
    "FileIo",
    "FileIoError",
    "FileIoSettings",
    "InvalidChecksumMethodError",
    "LocalFileIoAdapter",
    "OperatingSystem",
    "PathNotFoundError",
    "detect_operating_system",
    "join_path",
    "path_separator",
    "to_host_path",
]
