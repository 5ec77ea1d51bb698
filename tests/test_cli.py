"""Tests for the metagen command line."""

import pytest

from metagen.cli import main

SOURCE = """\
#include <stdint.h>

// Player state
Introspect() struct Player {
    Vec3 position;
    float *weights;
    char name[32];
};

Introspect() enum Team { Red = 1, Blue };
"""


def _write(tmp_path, text: str, name: str = "input.h") -> str:
    path = tmp_path / name
    path.write_text(text)
    return str(path)


def test_generates_to_stdout(tmp_path, capsys) -> None:
    assert main([_write(tmp_path, SOURCE)]) == 0
    out = capsys.readouterr().out
    assert 'Meta_Struct meta_Player = { "Player", 3 };' in out
    assert 'Meta_Enum meta_Team = { "Team", 2 };' in out


def test_missing_argument_is_a_usage_error(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "usage:" in captured.err


def test_missing_file_is_fatal(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "nope.h")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[FATAL] Could not open" in captured.err


def test_unterminated_string_produces_no_output(tmp_path, capsys) -> None:
    path = _write(tmp_path, SOURCE + 'const char *s = "abc')
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unterminated string literal" in captured.err


def test_unknown_target_is_fatal(tmp_path, capsys) -> None:
    assert main([_write(tmp_path, "Introspect() class X { };")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert '[FATAL] [1:14] Unknown introspection target "class"' in captured.err


def test_warning_keeps_output(tmp_path, capsys) -> None:
    assert main([_write(tmp_path, "@\n" + SOURCE)]) == 0
    captured = capsys.readouterr()
    assert '[WARN] [1:1] Unknown token "@"' in captured.err
    assert "meta_Player_members" in captured.out


def test_output_file(tmp_path, capsys) -> None:
    target = tmp_path / "out" / "meta.h"
    target.parent.mkdir()
    assert main([_write(tmp_path, SOURCE), "-o", str(target)]) == 0
    assert capsys.readouterr().out == ""
    text = target.read_text()
    assert "offsetof(Player, weights)" in text
    assert "[Blue] = \"Blue\"," in text


def test_unwritable_output_is_fatal(tmp_path, capsys) -> None:
    target = tmp_path / "missing_dir" / "meta.h"
    assert main([_write(tmp_path, SOURCE), "-o", str(target)]) == 1
    assert "Could not open" in capsys.readouterr().err


def test_check_mode(tmp_path, capsys) -> None:
    assert main([_write(tmp_path, SOURCE), "--check"]) == 0
    assert capsys.readouterr().out == ""


def test_custom_annotation(tmp_path, capsys) -> None:
    path = _write(tmp_path, "REFLECT() struct S { int a; };")
    assert main([path, "--annotation", "REFLECT", "--no-header"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("#include <stddef.h>")
    assert "Meta_Struct meta_S" in out


def test_dump_tokens(tmp_path, capsys) -> None:
    assert main([_write(tmp_path, "Introspect() struct S { int a; };"), "--dump-tokens"]) == 0
    err = capsys.readouterr().err
    assert "[1:1] IDENTIFIER: Introspect" in err
    assert "[1:14] IDENTIFIER: struct" in err


def test_quiet_hides_warnings(tmp_path, capsys) -> None:
    assert main([_write(tmp_path, "@ Introspect() struct S { int a; };"), "-q"]) == 0
    captured = capsys.readouterr()
    assert captured.err == ""
    assert "Meta_Struct meta_S" in captured.out


def test_verbose_logs_debug_to_stderr(tmp_path, capsys) -> None:
    path = _write(tmp_path, "Introspect() struct S { int a; };")
    assert main([path]) == 0
    plain = capsys.readouterr()
    assert "[DEBUG]" not in plain.err

    assert main([path, "-v"]) == 0
    verbose = capsys.readouterr()
    assert "[DEBUG] struct S: 1 members" in verbose.err
    assert verbose.out == plain.out
