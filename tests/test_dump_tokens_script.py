import sys
from pathlib import Path

import pytest

from scripts.dump_tokens import main


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["dump_tokens.py", *args])
    return main()


def test_fail_on_error_returns_one_when_any_file_has_errors(tmp_path: Path, monkeypatch, capsys) -> None:
    clean = _write(tmp_path, "clean.colloid", "()")
    broken = _write(tmp_path, "broken.colloid", "(@)")

    assert _run(monkeypatch, str(clean), str(broken), "--fail-on-error") == 1
    assert f"===== {broken} (4 results, 1 errors) =====" in capsys.readouterr().out


def test_errors_are_not_fatal_without_fail_on_error(tmp_path: Path, monkeypatch, capsys) -> None:
    broken = _write(tmp_path, "broken.colloid", "(@)")

    assert _run(monkeypatch, str(broken)) == 0
    assert capsys.readouterr().out.splitlines()[1:] == [
        "000 '('[LeftParenthesis]@1:1",
        "001 error: Unexpected input: @ @1:2",
        "002 ')'[RightParenthesis]@1:3",
        "003 ''[EndOfFile]@1:3",
    ]


def test_fail_on_error_returns_zero_for_clean_files(tmp_path: Path, monkeypatch) -> None:
    clean = _write(tmp_path, "clean.colloid", "(\n)")

    assert _run(monkeypatch, str(clean), "--fail-on-error") == 0


def test_errors_only_prints_just_the_errors(tmp_path: Path, monkeypatch, capsys) -> None:
    broken = _write(tmp_path, "broken.colloid", "(@\n#)")

    assert _run(monkeypatch, str(broken), "--errors-only") == 0
    assert capsys.readouterr().out.splitlines()[1:] == [
        "error: Unexpected input: @ @1:2",
        "error: Unexpected input: # @2:1",
    ]


def test_missing_path_exits(tmp_path: Path, monkeypatch) -> None:
    missing = tmp_path / "missing.colloid"

    with pytest.raises(SystemExit, match="No such file"):
        _run(monkeypatch, str(missing))
