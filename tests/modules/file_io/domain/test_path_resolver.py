# tests/modules/file_io/domain/test_path_resolver.py
"""
Tests para el resolvedor de SO y rutas.
Enfoque: Transformaciones de texto puras (sin disco, sin variables de entorno).
"""

import pytest

from common_helpers.modules.file_io.domain.path_resolver import (
    detect_operating_system,
    join_path,
    path_separator,
    to_host_path,
)
from common_helpers.modules.file_io.domain.value_objects import OperatingSystem

# === detect_operating_system ===


@pytest.mark.parametrize(
    "override, expected",
    [
        ("linux", OperatingSystem.LINUX),
        ("WINDOWS", OperatingSystem.WINDOWS),
        ("Darwin", OperatingSystem.MAC),
        ("freebsd", OperatingSystem.UNKNOWN),
    ],
)
def test_override_wins_over_host(override, expected):
    assert detect_operating_system(override, platform_name="Linux") == expected


def test_empty_override_falls_back_to_host():
    assert detect_operating_system("", platform_name="Windows") == OperatingSystem.WINDOWS
    assert detect_operating_system(None, platform_name="Darwin") == OperatingSystem.MAC


def test_host_detection_without_arguments_returns_an_operating_system():
    assert isinstance(detect_operating_system(), OperatingSystem)


# === path_separator ===


@pytest.mark.parametrize(
    "operating_system, expected",
    [
        (OperatingSystem.WINDOWS, "\\"),
        (OperatingSystem.LINUX, "/"),
        (OperatingSystem.MAC, "/"),
        (OperatingSystem.UNKNOWN, "/"),
    ],
)
def test_path_separator(operating_system, expected):
    assert path_separator(operating_system) == expected


# === to_host_path ===


def test_to_host_path_windows():
    assert to_host_path("C:/path/to/file", OperatingSystem.WINDOWS) == "C:\\path\\to\\file"


@pytest.mark.parametrize("operating_system", [OperatingSystem.LINUX, OperatingSystem.MAC])
def test_to_host_path_posix_drops_drive(operating_system):
    assert to_host_path("C:\\path\\to\\file", operating_system) == "/path/to/file"


def test_to_host_path_posix_keeps_everything_after_first_colon():
    assert to_host_path("C:\\a:b\\c", OperatingSystem.LINUX) == "/a:b/c"


def test_to_host_path_posix_without_drive():
    assert to_host_path("relative\\dir", OperatingSystem.LINUX) == "relative/dir"


def test_to_host_path_unknown_is_unchanged():
    assert to_host_path("C:\\path/mixed", OperatingSystem.UNKNOWN) == "C:\\path/mixed"


# === join_path ===


def test_join_path_linux():
    assert join_path("path/", "to/", "file", operating_system=OperatingSystem.LINUX) == (
        "path/to/file"
    )


def test_join_path_windows():
    assert join_path("path\\", "to", "file", operating_system=OperatingSystem.WINDOWS) == (
        "path\\to\\file"
    )


def test_join_path_flattens_inner_separators():
    """
    Regla: se eliminan TODAS las barras de cada parte.
    "a/b" no son dos segmentos, es "ab".
    """
    assert join_path("a/b", "c\\d", operating_system=OperatingSystem.LINUX) == "ab/cd"
