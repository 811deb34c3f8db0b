"""
Interfaz de Línea de Comandos (CLI) para el Módulo de File I/O.

Arquitectura: Interface Adapter
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Instanciar el Composition Root.
    3. Formatear la salida (texto, tablas rich o JSON).

Códigos de salida:
    0 éxito | 1 verificación fallida | 2 ruta inexistente | 3 error de I/O | 130 cancelado
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from common_helpers.modules.file_io.application.use_cases import (
    BuildChecksumManifest,
    CopyDirectoryVerified,
)
from common_helpers.modules.file_io.domain.exceptions import FileIoError, PathNotFoundError
from common_helpers.modules.file_io.domain.value_objects import ChecksumMethod
from common_helpers.modules.file_io.infrastructure.adapters import LocalFileIoAdapter
from common_helpers.modules.file_io.infrastructure.config import FileIoSettings
from common_helpers.modules.file_io.infrastructure.observability import (
    configure_from_settings,
)

METHODS = {m.name.lower(): m for m in ChecksumMethod}

EXIT_OK = 0
EXIT_VERIFY_FAILED = 1
EXIT_NOT_FOUND = 2
EXIT_IO_ERROR = 3
EXIT_INTERRUPTED = 130


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="common-helpers",
        description="🗂️  Common Helpers - File I/O multiplataforma",
        epilog="Ejemplo: common-helpers checksum README.md --method md5",
    )
    parser.add_argument(
        "--os",
        dest="os_override",
        choices=["linux", "windows", "darwin"],
        help="Fuerza el SO lógico (equivale a TEST_OS_OVERRIDE)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Muestra logs detallados"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("os", help="SO detectado y separador de rutas")

    p = sub.add_parser("host-path", help="Reescribe una ruta para el SO actual")
    p.add_argument("path")

    p = sub.add_parser("join", help="Une partes con el separador del SO")
    p.add_argument("parts", nargs="+")

    p = sub.add_parser("checksum", help="Checksum de un archivo")
    p.add_argument("path")
    p.add_argument("--method", "-m", choices=sorted(METHODS), default="sha256")

    p = sub.add_parser("info", help="Metadatos de un archivo o directorio")
    p.add_argument("path")

    p = sub.add_parser("ls", help="Lista los hijos inmediatos de un directorio")
    p.add_argument("path")

    p = sub.add_parser("copy", help="Copia un archivo (con fsync y permisos)")
    p.add_argument("source")
    p.add_argument("destination")

    p = sub.add_parser("copy-dir", help="Copia recursiva de un directorio")
    p.add_argument("source")
    p.add_argument("destination")
    p.add_argument(
        "--verify", action="store_true", help="Compara checksums tras copiar"
    )
    p.add_argument("--method", "-m", choices=sorted(METHODS), default="sha256")

    p = sub.add_parser("delete-dir", help="Borrado recursivo (idempotente)")
    p.add_argument("path")

    p = sub.add_parser("manifest", help="Checksums de todos los archivos de un árbol")
    p.add_argument("root")
    p.add_argument("--method", "-m", choices=sorted(METHODS), default="sha256")
    p.add_argument("--json", action="store_true", help="Salida JSON (para pipes)")

    return parser


def build_settings(args: argparse.Namespace) -> FileIoSettings:
    settings = FileIoSettings.from_env()
    if args.os_override:
        settings = replace(settings, os_override=args.os_override)
    if args.verbose:
        settings = replace(settings, log_level="DEBUG")
    return settings


def run(args: argparse.Namespace, console: Console) -> int:
    fs = LocalFileIoAdapter(settings=build_settings(args))

    if args.command == "os":
        console.print(f"{fs.operating_system().name} | separador: {fs.path_separator()!r}")

    elif args.command == "host-path":
        console.print(fs.to_host_path(args.path), markup=False, highlight=False)

    elif args.command == "join":
        console.print(fs.join_path(*args.parts), markup=False, highlight=False)

    elif args.command == "checksum":
        console.print(fs.checksum(args.path, METHODS[args.method]), highlight=False)

    elif args.command == "info":
        info = fs.info(args.path)
        table = Table(show_header=False, box=None)
        table.add_row("Nombre", escape(info.name))
        table.add_row("Tamaño", f"{info.size} bytes")
        table.add_row("Permisos", oct(info.mode))
        table.add_row("Modificado", info.modified_at.isoformat(timespec="seconds"))
        table.add_row("Directorio", "sí" if info.is_dir else "no")
        console.print(table)

    elif args.command == "ls":
        entries = sorted(fs.list_dir(args.path), key=lambda e: (not e.is_dir, e.name))
        table = Table(title=f"📂 {escape(args.path)}", box=box.SIMPLE, header_style="bold")
        table.add_column("TIPO")
        table.add_column("NOMBRE")
        for entry in entries:
            table.add_row("dir" if entry.is_dir else "file", escape(entry.name))
        console.print(table)
        console.print(f"Total: {len(entries)}")

    elif args.command == "copy":
        fs.copy(args.source, args.destination)
        console.print(f"✅ {escape(args.source)} -> {escape(args.destination)}")

    elif args.command == "copy-dir":
        if not args.verify:
            fs.copy_dir(args.source, args.destination)
            console.print(f"✅ {escape(args.source)} -> {escape(args.destination)}")
            return EXIT_OK

        report = CopyDirectoryVerified(fs).execute(
            args.source, args.destination, METHODS[args.method]
        )
        if not report.ok:
            for path in report.missing:
                console.print(f"[red]❌ faltante:[/] {escape(path)}")
            for path in report.mismatched:
                console.print(f"[red]❌ distinto:[/] {escape(path)}")
            return EXIT_VERIFY_FAILED
        console.print(f"✅ {report.copied} archivos copiados y verificados")

    elif args.command == "delete-dir":
        fs.delete_dir(args.path)
        console.print(f"🗑️  {escape(args.path)}")

    elif args.command == "manifest":
        manifest = BuildChecksumManifest(fs).execute(args.root, METHODS[args.method])
        if args.json:
            print(json.dumps(manifest, indent=2, sort_keys=True))
        else:
            table = Table(box=box.SIMPLE, header_style="bold")
            table.add_column(args.method.upper())
            table.add_column("ARCHIVO")
            for path in sorted(manifest):
                table.add_row(manifest[path], escape(path))
            console.print(table)

    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)
    console = Console()
    error_console = Console(stderr=True)

    configure_from_settings(build_settings(args))

    try:
        return run(args, console)
    except PathNotFoundError as e:
        error_console.print(f"❌ No existe: {e.filename}", markup=False)
        return EXIT_NOT_FOUND
    except (FileIoError, OSError, ValueError) as e:
        error_console.print(f"❌ Error de I/O: {e}", markup=False)
        return EXIT_IO_ERROR
    except KeyboardInterrupt:
        error_console.print("\n⚠️  Operación cancelada por el usuario.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
