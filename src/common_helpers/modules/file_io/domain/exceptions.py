"""
Excepciones del dominio de File I/O.

Arquitectura: Domain Layer
Responsabilidad: Distinguir "no existe" del resto de fallos de I/O.
Los errores del sistema operativo que no sean "no existe" se propagan tal cual
(OSError, PermissionError, ...), sin envolver.
"""

import errno
import os


class FileIoError(Exception):
    """Clase base para errores propios del módulo de File I/O."""

    pass


class PathNotFoundError(FileIoError, FileNotFoundError):
    """
    La ruta objetivo no existe.
    Sigue siendo un FileNotFoundError, así que `except OSError` también la atrapa.
    """

    @classmethod
    def for_path(cls, path: str) -> "PathNotFoundError":
        return cls(errno.ENOENT, os.strerror(errno.ENOENT), path)


class InvalidChecksumMethodError(FileIoError, ValueError):
    """El método de checksum solicitado no está soportado."""

    pass
