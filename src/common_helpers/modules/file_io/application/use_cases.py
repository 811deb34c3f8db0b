"""
Casos de Uso sobre el puerto FileIo.

Arquitectura: Modular Monolith
Capa: Application
Responsabilidad: Componer operaciones del puerto (listar, copiar, checksum)
en flujos de integridad de directorios.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Union

from common_helpers.modules.file_io.domain.ports.file_io import FileIo
from common_helpers.modules.file_io.domain.value_objects import ChecksumMethod
from common_helpers.modules.file_io.infrastructure.observability import (
    ObservabilityService,
)

logger = logging.getLogger("file_io.app")


@dataclass(frozen=True)
class CopyReport:
    """Resultado de una copia verificada de directorio."""

    copied: int
    mismatched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatched and not self.missing


class BuildChecksumManifest:
    """
    Caso de Uso: Calcular el checksum de cada archivo bajo un directorio.

    Las claves del manifiesto son rutas relativas con "/" como separador,
    independientes del SO, para poder comparar árboles entre sí.
    """

    def __init__(self, file_io: FileIo):
        # Inyección de Dependencias (DIP)
        self._fs = file_io

    @ObservabilityService.measure_latency(operation_name="checksum_manifest")
    def execute(
        self, root: str, method: Union[ChecksumMethod, int] = ChecksumMethod.SHA256
    ) -> dict[str, str]:
        manifest: dict[str, str] = {}
        self._walk(root, "", method, manifest)
        logger.info(f"Manifiesto de {root}: {len(manifest)} archivos")
        return manifest

    def _walk(
        self,
        directory: str,
        prefix: str,
        method: Union[ChecksumMethod, int],
        manifest: dict[str, str],
    ) -> None:
        for entry in self._fs.list_dir(directory):
            path = os.path.join(directory, entry.name)
            relative = f"{prefix}{entry.name}"
            if entry.is_dir:
                self._walk(path, f"{relative}/", method, manifest)
            else:
                manifest[relative] = self._fs.checksum(path, method)


class CopyDirectoryVerified:
    """
    Caso de Uso: Copiar un árbol y verificar que cada archivo llegó intacto.

    1. copy_dir (falla rápido, sin limpieza parcial).
    2. Manifiesto de origen y destino con el mismo método.
    3. Reporte de archivos faltantes o con contenido distinto.
    """

    def __init__(self, file_io: FileIo):
        self._fs = file_io
        self._manifest = BuildChecksumManifest(file_io)

    @ObservabilityService.measure_latency(operation_name="copy_dir_verified")
    def execute(
        self,
        source: str,
        destination: str,
        method: Union[ChecksumMethod, int] = ChecksumMethod.SHA256,
    ) -> CopyReport:
        logger.info(f"Copiando {source} -> {destination}")
        self._fs.copy_dir(source, destination)

        expected = self._manifest.execute(source, method)
        actual = self._manifest.execute(destination, method)

        missing = sorted(p for p in expected if p not in actual)
        mismatched = sorted(
            p for p, digest in expected.items() if p in actual and actual[p] != digest
        )

        report = CopyReport(copied=len(expected), mismatched=mismatched, missing=missing)
        if report.ok:
            logger.info(f"[OK] {report.copied} archivos verificados")
        else:
            logger.warning(
                f"[MISMATCH] faltantes={len(missing)} distintos={len(mismatched)}"
            )
        return report
