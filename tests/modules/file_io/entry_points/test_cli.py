"""
Tests para: CLI de File I/O
Tipo: Integración (argv -> casos de uso -> disco en tmp_path)
"""

import json

import pytest

from common_helpers.modules.file_io.entry_points import cli

KNOWN_CONTENT = b"Initial bytes\nThis is Second Line\nMore Text"


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """El CLI reconfigura el root logger; en tests no lo tocamos."""
    monkeypatch.setattr(cli, "configure_from_settings", lambda settings: None)
    monkeypatch.delenv("TEST_OS_OVERRIDE", raising=False)


@pytest.fixture
def tree(tmp_path):
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    (root / "known.txt").write_bytes(KNOWN_CONTENT)
    (root / "sub" / "inner.txt").write_bytes(b"inner")
    return root


def test_checksum_command(tree, capsys):
    code = cli.main(["checksum", str(tree / "known.txt"), "--method", "md5"])

    assert code == cli.EXIT_OK
    assert "bad71408e80acc34a474d42ce219d154" in capsys.readouterr().out


def test_missing_path_exits_with_not_found(tmp_path, capsys):
    code = cli.main(["checksum", str(tmp_path / "ghost.txt")])

    assert code == cli.EXIT_NOT_FOUND
    assert "No existe" in capsys.readouterr().err


def test_os_flag_overrides_detection(capsys):
    code = cli.main(["--os", "windows", "host-path", "C:/path/to/file"])

    assert code == cli.EXIT_OK
    assert "C:\\path\\to\\file" in capsys.readouterr().out


def test_join_under_linux(capsys):
    cli.main(["--os", "linux", "join", "path/", "to/", "file"])
    assert "path/to/file" in capsys.readouterr().out


def test_manifest_json(tree, capsys):
    code = cli.main(["manifest", str(tree), "--method", "md5", "--json"])

    manifest = json.loads(capsys.readouterr().out)
    assert code == cli.EXIT_OK
    assert manifest["known.txt"] == "bad71408e80acc34a474d42ce219d154"
    assert set(manifest) == {"known.txt", "sub/inner.txt"}


def test_copy_dir_with_verify(tree, tmp_path):
    destination = tmp_path / "copy"

    code = cli.main(["copy-dir", str(tree), str(destination), "--verify"])

    assert code == cli.EXIT_OK
    assert (destination / "sub" / "inner.txt").read_bytes() == b"inner"


def test_delete_dir_is_idempotent(tree):
    assert cli.main(["delete-dir", str(tree)]) == cli.EXIT_OK
    assert cli.main(["delete-dir", str(tree)]) == cli.EXIT_OK
    assert not tree.exists()


def test_ls_lists_children(tree, capsys):
    code = cli.main(["ls", str(tree)])

    out = capsys.readouterr().out
    assert code == cli.EXIT_OK
    assert "known.txt" in out
    assert "sub" in out


def test_copy_into_missing_directory_exits_not_found(tree, tmp_path):
    code = cli.main(["copy", str(tree / "known.txt"), str(tmp_path / "nope" / "x.txt")])
    assert code == cli.EXIT_NOT_FOUND


def test_unknown_command_exits_via_argparse():
    with pytest.raises(SystemExit):
        cli.main(["explode"])


def test_copy_path_with_brackets_is_printed_literally(tmp_path):
    # "x[/y]" se parece a una etiqueta de cierre de rich
    source_dir = tmp_path / "x["
    source_dir.mkdir()
    source = source_dir / "y]"
    source.write_bytes(b"payload")
    destination = tmp_path / "b.txt"

    code = cli.main(["copy", str(source), str(destination)])

    assert code == cli.EXIT_OK
    assert destination.read_bytes() == b"payload"


def test_ls_shows_bracketed_names_verbatim(tmp_path, capsys):
    (tmp_path / "[bold]x").write_bytes(b"")

    code = cli.main(["ls", str(tmp_path)])

    assert code == cli.EXIT_OK
    assert "[bold]x" in capsys.readouterr().out


def test_info_shows_bracketed_name_verbatim(tmp_path, capsys):
    target = tmp_path / "[red]report"
    target.write_bytes(b"abc")

    code = cli.main(["info", str(target)])

    assert code == cli.EXIT_OK
    assert "[red]report" in capsys.readouterr().out
