"""Walking a directory tree and counting lines per language."""

from __future__ import annotations

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator

from .lang import Language, language_for_path

__all__ = ["LanguageCount", "count_lines", "count_file_lines", "scan"]

DEFAULT_CHUNK_SIZE = 1 << 15


@dataclass
class LanguageCount:
    """Number of files and lines found for one language."""

    language: Language
    files: int = 0
    lines: int = 0


def count_lines(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> int:
    """Count lines in a binary stream.

    Every newline ends a line; a final line without a trailing newline
    counts as well. An empty stream has no lines.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    count = 0
    last = b""
    for chunk in iter(lambda: stream.read(chunk_size), b""):
        count += chunk.count(b"\n")
        last = chunk[-1:]
    if last and last != b"\n":
        count += 1
    return count


def count_file_lines(path: str | os.PathLike[str]) -> int:
    """Count lines in the file at ``path``."""
    with open(path, "rb") as stream:
        return count_lines(stream)


def scan(path: str | os.PathLike[str] = ".") -> list[LanguageCount]:
    """Count files and lines per language under ``path``.

    Hidden entries are skipped, as is anything excluded by ``.ignore`` files
    or, inside a git repository, by ``.gitignore`` and ``.git/info/exclude``.
    Problems are reported on standard error and the walk carries on. The
    result is ordered by line count, largest first.
    """
    totals: dict[Language, LanguageCount] = {}
    for file_path in _walk(Path(path)):
        language = language_for_path(file_path)
        if language is None:
            continue
        try:
            lines = count_file_lines(file_path)
        except OSError as exc:
            _report(f'"{file_path}": {exc.strerror or exc}')
            continue
        entry = totals.setdefault(language, LanguageCount(language))
        entry.files += 1
        entry.lines += lines
    return sorted(totals.values(), key=lambda c: (-c.lines, c.language.value))


def _report(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


@dataclass(frozen=True)
class _Rule:
    base: Path
    regex: re.Pattern[str]
    negated: bool
    dir_only: bool

    def matches(self, path: Path, is_dir: bool) -> bool:
        if self.dir_only and not is_dir:
            return False
        try:
            relative = path.relative_to(self.base).as_posix()
        except ValueError:
            return False
        return self.regex.fullmatch(relative) is not None


def _translate(pattern: str) -> str:
    """Turn a gitignore glob into a regular expression over posix paths."""
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            if pattern.startswith("**", i) and (i == 0 or pattern[i - 1] == "/"):
                after = i + 2
                if after == n:
                    out.append(".*")
                    i = after
                    continue
                if pattern[after] == "/":
                    out.append("(?:.*/)?")
                    i = after + 1
                    continue
            out.append("[^/]*")
            i += 1
        elif c == "?":
            out.append("[^/]")
            i += 1
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                out.append(re.escape(c))
                i += 1
                continue
            body = pattern[i + 1 : j]
            negate = body[:1] in ("!", "^")
            if negate:
                body = body[1:]
            body = body.replace("\\", "\\\\")
            out.append("[" + ("^" if negate else "") + body + "]")
            i = j + 1
        elif c == "\\" and i + 1 < n:
            out.append(re.escape(pattern[i + 1]))
            i += 2
        else:
            out.append(re.escape(c))
            i += 1
    return "".join(out)


def _parse_line(line: str, base: Path) -> _Rule | None:
    line = line.rstrip("\r\n")
    while line.endswith(" ") and not line.endswith("\\ "):
        line = line[:-1]
    if not line or line.startswith("#"):
        return None
    negated = line.startswith("!")
    if negated:
        line = line[1:]
    dir_only = line.endswith("/")
    if dir_only:
        line = line[:-1]
    if not line:
        return None
    anchored = "/" in line
    if line.startswith("/"):
        line = line[1:]
    body = _translate(line)
    if not anchored:
        body = "(?:.*/)?" + body
    return _Rule(base, re.compile(body, re.DOTALL), negated, dir_only)


def _read_rules(ignore_file: Path, base: Path) -> list[_Rule]:
    try:
        text = ignore_file.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return [rule for line in text.splitlines() if (rule := _parse_line(line, base))]


def _dir_rules(directory: Path, use_git: bool) -> list[_Rule]:
    rules = _read_rules(directory / ".gitignore", directory) if use_git else []
    rules.extend(_read_rules(directory / ".ignore", directory))
    return rules


def _repo_root(directory: Path) -> Path | None:
    for candidate in (directory, *directory.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def _initial_rules(root: Path, repo: Path | None) -> list[_Rule]:
    rules: list[_Rule] = []
    if repo is not None:
        rules.extend(_read_rules(repo / ".git" / "info" / "exclude", repo))
    for ancestor in reversed(root.parents):
        in_repo = repo is not None and (ancestor == repo or repo in ancestor.parents)
        rules.extend(_dir_rules(ancestor, in_repo))
    return rules


def _is_ignored(path: Path, is_dir: bool, rules: list[_Rule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(path, is_dir):
            ignored = not rule.negated
    return ignored


def _walk(root: Path) -> Iterator[Path]:
    root = Path(os.path.abspath(root))
    try:
        os.stat(root)
    except OSError as exc:
        _report(str(exc))
        return
    if not root.is_dir():
        yield root
        return
    repo = _repo_root(root)
    yield from _walk_dir(root, _initial_rules(root, repo), repo is not None)


def _walk_dir(directory: Path, inherited: list[_Rule], use_git: bool) -> Iterator[Path]:
    rules = inherited + _dir_rules(directory, use_git)
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        _report(str(exc))
        return
    for entry in entries:
        if entry.name.startswith("."):
            continue
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            is_dir = False
        if _is_ignored(path, is_dir, rules):
            continue
        if is_dir:
            yield from _walk_dir(path, rules, use_git)
        elif not path.is_dir():
            yield path