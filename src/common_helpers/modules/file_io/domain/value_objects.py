# src/common_helpers/modules/file_io/domain/value_objects.py
"""
Value Objects para el Bounded Context de File I/O.

Arquitectura: Modular Monolith
Capa: Domain
Responsabilidad: Definir los tipos inmutables que viajan entre el puerto y sus adaptadores.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

# === Guía de Organización ===
# ✅ PUREZA: Solo tipos nativos.
# ❌ SIN I/O: Los metadatos (size, mode) se pasan al constructor.


class OperatingSystem(Enum):
    """
    Sistema operativo lógico usado para decidir separadores y formato de rutas.
    """

    WINDOWS = "windows"
    LINUX = "linux"
    MAC = "darwin"
    UNKNOWN = "unknown"

    @classmethod
    def from_identifier(cls, identifier: str) -> OperatingSystem:
        """
        Traduce un identificador de plataforma ("Linux", "windows", "Darwin"...)
        sin distinguir mayúsculas. Cualquier otro valor es UNKNOWN.
        """
        normalized = (identifier or "").strip().lower()
        for candidate in (cls.LINUX, cls.WINDOWS, cls.MAC):
            if candidate.value == normalized:
                return candidate
        return cls.UNKNOWN


class ChecksumMethod(Enum):
    """Algoritmo de hash para checksums de archivo completo."""

    MD5 = 0
    SHA1 = 1
    SHA256 = 2

    @property
    def hashlib_name(self) -> str:
        return self.name.lower()

    @property
    def digest_length(self) -> int:
        """Longitud en caracteres hex del digest resultante."""
        return {ChecksumMethod.MD5: 32, ChecksumMethod.SHA1: 40, ChecksumMethod.SHA256: 64}[self]


@dataclass(frozen=True)
class DirEntry:
    """Hijo inmediato de un directorio."""

    name: str
    is_dir: bool


@dataclass(frozen=True)
class FileInfo:
    """
    Metadatos de un archivo o directorio.
    `mode` contiene solo los bits de permiso (ej: 0o644).
    """

    name: str
    size: int
    mode: int
    modified_at: datetime
    is_dir: bool

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"El tamaño no puede ser negativo: {self.size}")
