import io

import pytest

from linecount.counting import LanguageCount, count_file_lines, count_lines, scan
from linecount.lang import Language


def test_empty():
    assert count_lines(io.BytesIO(b""), 1 << 10) == 0


def test_ends_with_newline():
    assert count_lines(io.BytesIO(b"this\nis\na\ntest\n"), 1 << 10) == 4


def test_ends_with_no_newline():
    assert count_lines(io.BytesIO(b"this\nis\na\ntest"), 1 << 10) == 4


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 5, 7, 1 << 10])
@pytest.mark.parametrize("data", [b"this\nis\na\ntest\n", b"this\nis\na\ntest", b"\n\n\n", b"x"])
def test_chunk_size_does_not_change_result(data, chunk_size):
    assert count_lines(io.BytesIO(data), chunk_size) == count_lines(io.BytesIO(data))


def test_default_chunk_size():
    assert count_lines(io.BytesIO(b"this\nis\na\ntest")) == 4


def test_invalid_chunk_size():
    with pytest.raises(ValueError):
        count_lines(io.BytesIO(b"a\n"), 0)


def test_count_file_lines(tmp_path):
    target = tmp_path / "f.txt"
    target.write_bytes(b"this\nis\na\ntest\n")
    assert count_file_lines(target) == 4


def test_count_file_lines_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_file_lines(tmp_path / "missing.py")


def test_scan_groups_and_sorts(tmp_path):
    (tmp_path / "a.py").write_text("a\nb\n")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "b.py").write_text("c\nd\ne")
    (tmp_path / "main.rs").write_text("fn main() {}\n")
    (tmp_path / "README").write_text("ignored\nno\nextension\n")
    result = scan(tmp_path)
    assert result == [
        LanguageCount(Language.PYTHON, files=2, lines=5),
        LanguageCount(Language.RUST, files=1, lines=1),
    ]


def test_scan_sorted_descending(tmp_path):
    (tmp_path / "a.go").write_text("1\n")
    (tmp_path / "b.js").write_text("1\n2\n3\n")
    (tmp_path / "c.rb").write_text("1\n2\n")
    lines = [count.lines for count in scan(tmp_path)]
    assert lines == sorted(lines, reverse=True)


def test_scan_extension_case_insensitive(tmp_path):
    (tmp_path / "UPPER.PY").write_text("x\n")
    assert scan(tmp_path) == [LanguageCount(Language.PYTHON, files=1, lines=1)]


def test_scan_skips_hidden(tmp_path):
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "x.py").write_text("x\n")
    (tmp_path / ".secret.py").write_text("x\n")
    (tmp_path / "shown.py").write_text("x\n")
    assert scan(tmp_path) == [LanguageCount(Language.PYTHON, files=1, lines=1)]


def test_scan_directory_with_extension_not_counted(tmp_path):
    (tmp_path / "pkg.py").mkdir()
    (tmp_path / "pkg.py" / "inner.rs").write_text("x\n")
    assert scan(tmp_path) == [LanguageCount(Language.RUST, files=1, lines=1)]


def test_scan_single_file(tmp_path):
    target = tmp_path / "only.c"
    target.write_text("int x;\nint y;\n")
    assert scan(target) == [LanguageCount(Language.C, files=1, lines=2)]


def test_scan_missing_path_reports(tmp_path, capsys):
    assert scan(tmp_path / "missing") == []
    assert capsys.readouterr().err.startswith("Error: ")


def test_gitignore_respected_in_repo(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".gitignore").write_text("*.py\n!keep.py\nbuild/\n")
    (tmp_path / "drop.py").write_text("x\n")
    (tmp_path / "keep.py").write_text("x\n")
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "gen.rs").write_text("x\n")
    (tmp_path / "lib.rs").write_text("x\n")
    result = scan(tmp_path)
    assert sorted(result, key=lambda c: c.language.value) == [
        LanguageCount(Language.PYTHON, files=1, lines=1),
        LanguageCount(Language.RUST, files=1, lines=1),
    ]


def test_gitignore_ignored_outside_repo(tmp_path):
    (tmp_path / ".gitignore").write_text("*.py\n")
    (tmp_path / "a.py").write_text("x\n")
    assert scan(tmp_path) == [LanguageCount(Language.PYTHON, files=1, lines=1)]


def test_ignore_file_respected_without_repo(tmp_path):
    (tmp_path / ".ignore").write_text("vendor/\n")
    (tmp_path / "vendor").mkdir()
    (tmp_path / "vendor" / "dep.go").write_text("x\n")
    (tmp_path / "app.go").write_text("x\ny\n")
    assert scan(tmp_path) == [LanguageCount(Language.GO, files=1, lines=2)]


def test_nested_gitignore_anchored(tmp_path):
    (tmp_path / ".git").mkdir()
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / ".gitignore").write_text("/top.py\n**/deep.py\n")
    (sub / "top.py").write_text("x\n")
    (sub / "inner").mkdir()
    (sub / "inner" / "top.py").write_text("x\n")
    (sub / "inner" / "deep.py").write_text("x\n")
    assert scan(tmp_path) == [LanguageCount(Language.PYTHON, files=1, lines=1)]


def test_git_info_exclude(tmp_path):
    (tmp_path / ".git" / "info").mkdir(parents=True)
    (tmp_path / ".git" / "info" / "exclude").write_text("*.md\n")
    (tmp_path / "notes.md").write_text("x\n")
    (tmp_path / "a.sh").write_text("x\n")
    assert scan(tmp_path) == [LanguageCount(Language.SHELL, files=1, lines=1)]