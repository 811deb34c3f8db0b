# tests/e2e/test_file_io_e2e.py
"""
Tests End-to-End (E2E) para el subsistema de File I/O.
Objetivo: Validar árboles reales, archivos grandes y el ciclo completo
escribir -> copiar -> verificar -> borrar.
"""

import hashlib

from common_helpers.modules.file_io.application.use_cases import (
    BuildChecksumManifest,
    CopyDirectoryVerified,
)
from common_helpers.modules.file_io.domain.value_objects import ChecksumMethod
from common_helpers.modules.file_io.infrastructure.adapters import LocalFileIoAdapter
from common_helpers.modules.file_io.infrastructure.config import FileIoSettings

LAYOUT = {
    "top.bin": 1024,
    "empty.bin": 0,
    "docs/readme.txt": 300,
    "docs/deep/nested/data.bin": 200_000,
    "assets/img.raw": 70_000,
}


def test_copy_dir_reproduces_every_file(tmp_path, tree_factory):
    """
    Escenario: Copiar un árbol con varios niveles y archivos vacíos.
    Validación: Cada archivo del destino es idéntico byte a byte.
    """
    # Arrange
    source = tree_factory("source", LAYOUT)
    destination = tmp_path / "backup" / "copy"
    fs = LocalFileIoAdapter(settings=FileIoSettings())

    # Act
    report = CopyDirectoryVerified(fs).execute(str(source), str(destination))

    # Assert
    assert report.ok
    assert report.copied == len(LAYOUT)
    assert fs.dir_exists(str(destination))
    for relative in LAYOUT:
        assert (destination / relative).read_bytes() == (source / relative).read_bytes()


def test_manifest_matches_hashlib_for_large_files(tree_factory):
    # Arrange
    source = tree_factory("big", {"blob.bin": 3 * 65536 + 17})
    fs = LocalFileIoAdapter(settings=FileIoSettings())

    # Act
    manifest = BuildChecksumManifest(fs).execute(str(source), ChecksumMethod.SHA1)

    # Assert
    expected = hashlib.sha1((source / "blob.bin").read_bytes()).hexdigest()
    assert manifest == {"blob.bin": expected}


def test_range_reads_on_sparse_file(sparse_file_factory):
    """
    Escenario: Archivo de 64MB lógico.
    Validación: Lecturas de cabecera/cola sin leer el archivo entero.
    """
    path = str(sparse_file_factory("sparse.bin", size_mb=64))
    fs = LocalFileIoAdapter(settings=FileIoSettings())
    size = fs.info(path).size

    assert fs.read_range(path, 0, 7) == b"HEADER_"
    assert fs.read_range(path, size - 7, size + 1000) == b"FOOTER_"


def test_full_lifecycle(tmp_path):
    fs = LocalFileIoAdapter(settings=FileIoSettings(os_override="linux"))
    work = str(tmp_path / "work")

    fs.create_dir(work)
    target = work + fs.path_separator() + "data.txt"
    fs.write_buffered(target, b"chunked content", 4)
    assert fs.read(target) == b"chunked content"

    fs.delete(target)
    assert fs.exists(target) is False

    fs.delete_dir(work)
    assert fs.dir_exists(work) is False
