import os

import pytest


@pytest.fixture
def tree_factory(tmp_path):
    """
    Factory para crear árboles de directorios con contenido aleatorio.
    `layout` mapea rutas relativas ("a/b/c.bin") a tamaños en bytes.
    """

    def _create_tree(name: str, layout: dict):
        root = tmp_path / name
        root.mkdir()
        for relative, size in layout.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(os.urandom(size))
        return root

    return _create_tree


@pytest.fixture
def sparse_file_factory(tmp_path):
    """
    Archivos 'Sparse' (huecos): tamaño lógico grande sin gastar disco real.
    Cabecera y cola reales para validar lecturas por rango.
    """

    def _create_sparse_file(filename: str, size_mb: float):
        filepath = tmp_path / filename
        size_bytes = int(size_mb * 1024 * 1024)

        with open(filepath, "wb") as f:
            f.write(b"HEADER_")
            f.seek(size_bytes - 7)
            f.write(b"FOOTER_")

        return filepath

    return _create_sparse_file
