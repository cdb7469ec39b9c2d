# linecount

Count lines of code in a directory tree, grouped by language.

Files are recognised by their extension, compared case-insensitively. A file
with no extension, or whose extension is not known, is left out. Every newline
ends a line, and a final line without a trailing newline still counts; an empty
file has no lines. Results are sorted by line count, largest first.

## What gets scanned

- Entries whose names start with a dot (files and directories) are skipped.
- Patterns in `.ignore` files are honoured everywhere.
- Inside a git repository (a directory with a `.git` entry, at the scanned
  path or above it), `.gitignore` files and `.git/info/exclude` are honoured
  too. Ignore files in the directories above the scanned path apply as well.
- Symbolic links to directories are not followed.
- When the path given is a single file, that file alone is counted.

Files that cannot be read, and a path that does not exist, are reported on
standard error as `Error: ...`; the scan carries on with the rest.

## Installation

```
pip install .
```

## Usage

Scan the current directory:

```
linecount
```

Scan a specific directory or a single file:

```
linecount path/to/project
```

Options:

- `-o`, `--output` `table|json`: output format (default `table`).
- `-t`, `--timing`: also report how long the run took, in milliseconds.
- `-V`, `--version`: print the version and exit.

Example table output:

```
 Language | Files | Lines
----------+-------+-------
 Python   |    12 | 1,804
 Markdown |     2 |    97
----------+-------+-------
 Total    |    14 | 1,901
```

The `Total` row, with the rule above it, is left out when exactly one language
was found. With `--timing` a line `Took: <n>ms` follows the table.

JSON output holds `languages` (each with `language`, `num_files` and
`num_lines`), `total_num_files`, `total_num_lines` and, with `--timing`,
`elapsed_ms`.

## Library use

```python
from linecount.counting import scan
from linecount.cli import build_report, render_table

report = build_report(scan("."), None)
print(render_table(report))
```

- `linecount.counting.scan(path)` returns a list of `LanguageCount` objects
  (`language`, `files`, `lines`).
- `linecount.counting.count_lines(stream, chunk_size)` counts the lines in any
  binary stream; `count_file_lines(path)` does the same for a file.
- `linecount.lang.get_language(extension)` maps a lower-case extension to a
  `Language`; `language_for_path(path)` does so from a file name.
- `linecount.cli` has `render_json`, `render_table`, `write_output` and
  `Report.to_dict` for producing output from a `Report`.

## Limitations

Only ignore files inside the scanned tree and its parent directories are read;
a user's global git excludes file is not consulted. Lines are counted as they
are: blank lines and comments are not told apart from code.

## Running the tests

```
pip install .[test]
pytest
```