"""
Resolución de Sistema Operativo y Rutas.

Arquitectura: Modular Monolith
Capa: Domain (Servicio puro)
Responsabilidad: Detectar el SO lógico y reescribir strings de ruta entre
convenciones Windows y POSIX. Transformaciones de texto puras: no tocan disco
ni validan que el resultado sea una ruta válida.
"""

from __future__ import annotations

import platform
from typing import Optional

from .value_objects import OperatingSystem

WINDOWS_SEPARATOR = "\\"
POSIX_SEPARATOR = "/"


def detect_operating_system(
    override: Optional[str] = None, platform_name: Optional[str] = None
) -> OperatingSystem:
    """
    Determina el SO lógico.

    Args:
        override: Valor forzado (ej: TEST_OS_OVERRIDE). Si no está vacío, gana.
        platform_name: Identificador del host; por defecto `platform.system()`.
    """
    if override:
        return OperatingSystem.from_identifier(override)
    return OperatingSystem.from_identifier(platform_name or platform.system())


def path_separator(operating_system: OperatingSystem) -> str:
    if operating_system is OperatingSystem.WINDOWS:
        return WINDOWS_SEPARATOR
    return POSIX_SEPARATOR


def to_host_path(path: str, operating_system: OperatingSystem) -> str:
    """
    Reescribe `path` para el SO destino.

    - Windows: "/" -> "\\".
    - Linux/Mac: se descarta la unidad ("C:") y todo lo anterior al primer ":",
      luego "\\" -> "/".
    - Unknown: sin cambios.
    """
    if operating_system is OperatingSystem.WINDOWS:
        return path.replace(POSIX_SEPARATOR, WINDOWS_SEPARATOR)

    if operating_system in (OperatingSystem.LINUX, OperatingSystem.MAC):
        if ":" in path:
            _, _, path = path.partition(":")
        return path.replace(WINDOWS_SEPARATOR, POSIX_SEPARATOR)

    return path


def join_path(*parts: str, operating_system: OperatingSystem) -> str:
    """
    Une las partes con el separador del SO.

    Ojo: se eliminan TODAS las barras de cada parte, no solo las de los
    extremos. "a/b" se convierte en "ab", no en dos segmentos.
    """
    cleaned = [
        part.replace(WINDOWS_SEPARATOR, "").replace(POSIX_SEPARATOR, "")
        for part in parts
    ]
    return path_separator(operating_system).join(cleaned)
