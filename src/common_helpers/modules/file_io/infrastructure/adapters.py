"""
Adaptadores de Infraestructura para File I/O.

Arquitectura: Modular Monolith
Capa: Infrastructure (Adapters)
Responsabilidad: Implementar el puerto FileIo sobre el sistema de archivos local
(LocalFileIoAdapter) y ofrecer un doble de pruebas que registra llamadas (FakeFileIo).
"""

import hashlib
import logging
import os
import shutil
import stat
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional, Union

from common_helpers.core.value_objects import ChunkSize
from common_helpers.modules.file_io.domain import path_resolver
from common_helpers.modules.file_io.domain.exceptions import (
    InvalidChecksumMethodError,
    PathNotFoundError,
)
from common_helpers.modules.file_io.domain.value_objects import (
    ChecksumMethod,
    DirEntry,
    FileInfo,
    OperatingSystem,
)
from common_helpers.modules.file_io.infrastructure.config import FileIoSettings
from common_helpers.modules.file_io.infrastructure.observability import measure_time

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644
DEFAULT_DIR_MODE = 0o777
HASH_CHUNK_BYTES = 65536


@contextmanager
def _not_found_as_domain_error(path: str) -> Iterator[None]:
    """Traduce FileNotFoundError del SO a PathNotFoundError; el resto pasa tal cual."""
    try:
        yield
    except PathNotFoundError:
        raise
    except FileNotFoundError as e:
        raise PathNotFoundError.for_path(e.filename or path) from e


def _resolve_checksum_method(method: Union[ChecksumMethod, int]) -> ChecksumMethod:
    if isinstance(method, ChecksumMethod):
        return method
    if isinstance(method, int) and not isinstance(method, bool):
        try:
            return ChecksumMethod(method)
        except ValueError:
            pass
    raise InvalidChecksumMethodError(f"Método de checksum inválido: {method!r}")


class LocalFileIoAdapter:
    """
    Implementación que interactúa con el sistema de archivos local del OS.
    Sin estado propio: cada operación abre y cierra sus propios handles.
    """

    def __init__(self, settings: Optional[FileIoSettings] = None):
        self.settings = settings if settings is not None else FileIoSettings.from_env()

    # === Sistema Operativo y Rutas ===

    def operating_system(self) -> OperatingSystem:
        return path_resolver.detect_operating_system(self.settings.os_override)

    def path_separator(self) -> str:
        return path_resolver.path_separator(self.operating_system())

    def to_host_path(self, path: str) -> str:
        return path_resolver.to_host_path(path, self.operating_system())

    def join_path(self, *parts: str) -> str:
        return path_resolver.join_path(*parts, operating_system=self.operating_system())

    def execution_path(self) -> str:
        return sys.argv[0]

    # === Archivos ===

    def exists(self, path: str) -> bool:
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            # Permisos u otros fallos de stat: se asume que existe
            logger.debug(f"stat falló para {path} ({e}); se considera existente")
        return True

    def read(self, path: str) -> bytes:
        if not self.exists(path):
            raise PathNotFoundError.for_path(path)

        with _not_found_as_domain_error(path), open(path, "rb") as f:
            return f.read()

    def read_range(self, path: str, start: int, end: int) -> bytes:
        if not self.exists(path):
            raise PathNotFoundError.for_path(path)

        with _not_found_as_domain_error(path), open(path, "rb") as f:
            size = os.fstat(f.fileno()).st_size
            if end == 0 or end > size:
                end = size

            length = end - start
            if length < 0:
                raise ValueError(f"Rango inválido: start={start} > end={end}")

            f.seek(start)
            data = f.read(length)

        if len(data) < length:
            raise EOFError(f"Lectura incompleta en {path}: {len(data)}/{length} bytes")
        return data

    def write(self, path: str, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
        with _not_found_as_domain_error(path):
            with open(path, "wb") as f:
                f.write(data)
            os.chmod(path, mode)
        logger.debug(f"Escritos {len(data)} bytes en {path}")

    def write_buffered(
        self, path: str, data: bytes, chunk_size: int, mode: int = DEFAULT_FILE_MODE
    ) -> None:
        chunks = ChunkSize(chunk_size).split(data)

        with _not_found_as_domain_error(path), open(path, "wb") as f:
            os.chmod(path, mode)
            for chunk in chunks:
                f.write(chunk)

        logger.debug(f"Escritos {len(data)} bytes en {len(chunks)} bloques: {path}")

    def copy(self, source: str, destination: str) -> None:
        with _not_found_as_domain_error(source), open(source, "rb") as src:
            with _not_found_as_domain_error(destination), open(destination, "wb") as dst:
                shutil.copyfileobj(src, dst)
                dst.flush()
                os.fsync(dst.fileno())

            source_mode = stat.S_IMODE(os.fstat(src.fileno()).st_mode)
            os.chmod(destination, source_mode)

        logger.debug(f"Copiado {source} -> {destination}")

    def delete(self, path: str) -> None:
        with _not_found_as_domain_error(path):
            os.remove(path)

    def info(self, path: str) -> FileInfo:
        with _not_found_as_domain_error(path):
            st = os.stat(path)

        normalized = os.path.normpath(path)

        return FileInfo(
            name=os.path.basename(normalized) or normalized,
            size=st.st_size,
            mode=stat.S_IMODE(st.st_mode),
            modified_at=datetime.fromtimestamp(st.st_mtime),
            is_dir=stat.S_ISDIR(st.st_mode),
        )

    # === Directorios ===

    def dir_exists(self, path: str) -> bool:
        return self.exists(path)

    def create_dir(self, path: str, mode: int = DEFAULT_DIR_MODE) -> None:
        # Un solo nivel: si falta el padre, falla
        with _not_found_as_domain_error(path):
            os.mkdir(path, mode)

    def list_dir(self, path: str) -> list[DirEntry]:
        with _not_found_as_domain_error(path), os.scandir(path) as entries:
            return [DirEntry(name=e.name, is_dir=e.is_dir()) for e in entries]

    @measure_time(metric_name="copy_dir_latency")
    def copy_dir(self, source: str, destination: str) -> None:
        """
        Copia recursiva. Falla en el primer error; lo ya copiado se queda en destino.
        """
        with _not_found_as_domain_error(source):
            source_mode = stat.S_IMODE(os.stat(source).st_mode)

        os.makedirs(destination, source_mode, exist_ok=True)

        for entry in self.list_dir(source):
            source_path = os.path.join(source, entry.name)
            destination_path = os.path.join(destination, entry.name)

            if entry.is_dir:
                self.copy_dir(source_path, destination_path)
            else:
                self.copy(source_path, destination_path)

    def delete_dir(self, path: str) -> None:
        if not os.path.lexists(path):
            return

        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except FileNotFoundError:
            # Borrado concurrente: el resultado es el mismo
            logger.debug(f"{path} desapareció durante el borrado")

    # === Integridad ===

    @measure_time(metric_name="checksum_latency")
    def checksum(self, path: str, method: Union[ChecksumMethod, int]) -> str:
        with _not_found_as_domain_error(path), open(path, "rb") as f:
            hasher = hashlib.new(_resolve_checksum_method(method).hashlib_name)
            for chunk in iter(lambda: f.read(HASH_CHUNK_BYTES), b""):
                hasher.update(chunk)

        return hasher.hexdigest()


# === Test Double ===


@dataclass
class FakeCall:
    """Una invocación registrada: método y argumentos por nombre."""

    method: str
    arguments: dict[str, Any]


@dataclass
class FakeOperation:
    """
    Respuesta programada para un método.

    - func: si existe, se invoca con los argumentos de la llamada (por nombre).
    - error: si existe (y no hay func), se lanza.
    - returns: valor fijo en otro caso.
    """

    method: str
    returns: Any = None
    error: Optional[BaseException] = None
    func: Optional[Callable[..., Any]] = None
    calls: list[dict[str, Any]] = field(default_factory=list)


def get_argument_value(
    arguments: dict[str, Any], name: str, expected_type: type
) -> tuple[Any, bool]:
    """
    Extrae un argumento registrado si existe y es del tipo esperado.
    Retorna (valor, True) o (None, False).
    """
    value = arguments.get(name)
    if name in arguments and isinstance(value, expected_type):
        return value, True
    return None, False


class FakeFileIo:
    """
    Implementación simulada (Fake) del puerto FileIo.
    Útil para tests unitarios de casos de uso sin tocar disco.

    Comportamiento:
    - Cada llamada se registra en `calls` (y en la operación programada).
    - Sin respuesta programada, devuelve un valor neutro (False, b"", [], "", None).
    """

    def __init__(self, operations: Optional[list[FakeOperation]] = None):
        self._operations: list[FakeOperation] = list(operations or [])
        self.calls: list[FakeCall] = []

    def on(
        self,
        method: str,
        returns: Any = None,
        error: Optional[BaseException] = None,
        func: Optional[Callable[..., Any]] = None,
    ) -> FakeOperation:
        """
        Programa la respuesta de `method`.

        La última programación gana: permite sobrescribir en un test una
        respuesta ya cargada en el constructor.
        """
        operation = FakeOperation(method=method, returns=returns, error=error, func=func)
        self._operations.insert(0, operation)
        return operation

    def calls_to(self, method: str) -> list[dict[str, Any]]:
        return [c.arguments for c in self.calls if c.method == method]

    def _dispatch(self, method: str, default: Any, /, **arguments: Any) -> Any:
        self.calls.append(FakeCall(method=method, arguments=dict(arguments)))

        for operation in self._operations:
            if operation.method != method:
                continue
            operation.calls.append(dict(arguments))
            if operation.func is not None:
                return operation.func(**arguments)
            if operation.error is not None:
                raise operation.error
            return operation.returns

        return default

    # === Sistema Operativo y Rutas ===

    def operating_system(self) -> OperatingSystem:
        return self._dispatch("operating_system", OperatingSystem.UNKNOWN)

    def path_separator(self) -> str:
        return self._dispatch("path_separator", path_resolver.POSIX_SEPARATOR)

    def to_host_path(self, path: str) -> str:
        return self._dispatch("to_host_path", path, path=path)

    def join_path(self, *parts: str) -> str:
        return self._dispatch("join_path", "/".join(parts), parts=parts)

    def execution_path(self) -> str:
        return self._dispatch("execution_path", "")

    # === Archivos ===

    def exists(self, path: str) -> bool:
        return self._dispatch("exists", False, path=path)

    def read(self, path: str) -> bytes:
        return self._dispatch("read", b"", path=path)

    def read_range(self, path: str, start: int, end: int) -> bytes:
        return self._dispatch("read_range", b"", path=path, start=start, end=end)

    def write(self, path: str, data: bytes, mode: int = DEFAULT_FILE_MODE) -> None:
        return self._dispatch("write", None, path=path, data=data, mode=mode)

    def write_buffered(
        self, path: str, data: bytes, chunk_size: int, mode: int = DEFAULT_FILE_MODE
    ) -> None:
        return self._dispatch(
            "write_buffered", None, path=path, data=data, chunk_size=chunk_size, mode=mode
        )

    def copy(self, source: str, destination: str) -> None:
        return self._dispatch("copy", None, source=source, destination=destination)

    def delete(self, path: str) -> None:
        return self._dispatch("delete", None, path=path)

    def info(self, path: str) -> FileInfo:
        return self._dispatch("info", None, path=path)

    # === Directorios ===

    def dir_exists(self, path: str) -> bool:
        return self._dispatch("dir_exists", False, path=path)

    def create_dir(self, path: str, mode: int = DEFAULT_DIR_MODE) -> None:
        return self._dispatch("create_dir", None, path=path, mode=mode)

    def list_dir(self, path: str) -> list[DirEntry]:
        return self._dispatch("list_dir", [], path=path)

    def copy_dir(self, source: str, destination: str) -> None:
        return self._dispatch("copy_dir", None, source=source, destination=destination)

    def delete_dir(self, path: str) -> None:
        return self._dispatch("delete_dir", None, path=path)

    # === Integridad ===

    def checksum(self, path: str, method: Union[ChecksumMethod, int]) -> str:
        return self._dispatch("checksum", "", path=path, method=method)
