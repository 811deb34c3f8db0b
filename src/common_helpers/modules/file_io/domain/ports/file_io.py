# src/common_helpers/modules/file_io/domain/ports/file_io.py
"""
Puerto (Interface) para operaciones de archivos y directorios.

Arquitectura: Modular Monolith
Capa: Domain -> Ports
Responsabilidad: Definir el contrato sin estado que consumen los casos de uso.

Implementaciones esperadas:
- LocalFileIoAdapter (Infraestructura, disco real)
- FakeFileIo (Testing, registra argumentos de llamada)
"""

from __future__ import annotations

from typing import Protocol, Union

from common_helpers.modules.file_io.domain.value_objects import (
    ChecksumMethod,
    DirEntry,
    FileInfo,
    OperatingSystem,
)


class FileIo(Protocol):
    """
    Contrato para interactuar con el sistema de archivos.

    Reglas comunes:
    - Cada llamada es independiente: no hay caché ni sesión.
    - Rutas ausentes -> PathNotFoundError. Otros fallos -> OSError tal cual.
    - Sin reintentos.
    """

    # === Sistema Operativo y Rutas ===

    def operating_system(self) -> OperatingSystem: ...

    def path_separator(self) -> str: ...

    def to_host_path(self, path: str) -> str: ...

    def join_path(self, *parts: str) -> str: ...

    def execution_path(self) -> str: ...

    # === Archivos ===

    def exists(self, path: str) -> bool:
        """
        False solo si el SO reporta "no existe". Otros errores de stat
        (permisos, etc.) cuentan como existente.
        """
        ...

    def read(self, path: str) -> bytes: ...

    def read_range(self, path: str, start: int, end: int) -> bytes:
        """
        Lee `end - start` bytes desde `start`.
        `end == 0` o `end` mayor al tamaño -> se ajusta al tamaño del archivo.
        """
        ...

    def write(self, path: str, data: bytes, mode: int = 0o644) -> None: ...

    def write_buffered(
        self, path: str, data: bytes, chunk_size: int, mode: int = 0o644
    ) -> None: ...

    def copy(self, source: str, destination: str) -> None: ...

    def delete(self, path: str) -> None: ...

    def info(self, path: str) -> FileInfo: ...

    # === Directorios ===

    def dir_exists(self, path: str) -> bool: ...

    def create_dir(self, path: str, mode: int = 0o777) -> None: ...

    def list_dir(self, path: str) -> list[DirEntry]: ...

    def copy_dir(self, source: str, destination: str) -> None: ...

    def delete_dir(self, path: str) -> None:
        """Borrado recursivo. Si la ruta no existe, no hace nada."""
        ...

    # === Integridad ===

    def checksum(self, path: str, method: Union[ChecksumMethod, int]) -> str:
        """Digest hex en minúsculas del contenido completo del archivo."""
        ...
