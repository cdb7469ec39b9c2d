"""Languages recognised by file extension."""

from __future__ import annotations

import os
import string
from enum import Enum
from pathlib import PurePath

__all__ = ["Language", "get_language", "language_for_path"]


class Language(Enum):
    """A programming or markup language; the value is its display label."""

    ADA = "Ada"
    APPLESCRIPT = "AppleScript"
    ASSEMBLY = "Assembly"
    C = "C"
    CLOJURE = "Clojure"
    CLOJURESCRIPT = "ClojureScript"
    COBOL = "COBOL"
    COFFEESCRIPT = "CoffeScript"
    CPP = "C++"
    CSHARP = "C#"
    CSS = "CSS"
    DART = "Dart"
    ELIXIR = "Elixir"
    ELM = "Elm"
    ERLANG = "Erlang"
    FORTRAN = "Fortran"
    GO = "Go"
    GROOVY = "Groovy"
    HANDLEBARS = "Handlebars"
    HASKELL = "Haskell"
    HTML = "HTML"
    JAVA = "Java"
    JAVASCRIPT = "JavaScript"
    JSON = "JSON"
    JULIA = "Julia"
    KOTLIN = "Kotlin"
    LESS = "LESS"
    LUA = "Lua"
    MARKDOWN = "Markdown"
    MUSTACHE = "Mustache"
    OBJECTIVE_C = "Objective-C"
    OCAML = "OCaml"
    PASCAL = "Pascal"
    PERL = "Perl"
    PHP = "PHP"
    PROLOG = "Prolog"
    PROTOCOL_BUFFER = "ProtocolBuffer"
    PYTHON = "Python"
    R = "R"
    RACKET = "Racket"
    RHAI = "Rhai"
    REASONML = "ReasonML"
    RUBY = "Ruby"
    RUST = "Rust"
    SASS = "SASS"
    SCALA = "Scala"
    SCHEME = "Scheme"
    SHELL = "Shell"
    SQL = "SQL"
    STYLUS = "Stylus"
    SVELTE = "Svelte"
    SWIFT = "Swift"
    TOML = "TOML"
    TYPESCRIPT = "TypeScript"
    VUE = "Vue"
    WEBASSEMBLY = "WebAssembly"
    XML = "XML"
    YAML = "YAML"
    ZIG = "Zig"

    def __str__(self) -> str:
        return self.value


_EXTENSIONS: dict[str, Language] = {
    "adb": Language.ADA,
    "ads": Language.ADA,
    "applescript": Language.APPLESCRIPT,
    "asm": Language.ASSEMBLY,
    "c": Language.C,
    "cbl": Language.COBOL,
    "clj": Language.CLOJURE,
    "cljs": Language.CLOJURESCRIPT,
    "cob": Language.COBOL,
    "coffee": Language.COFFEESCRIPT,
    "cpp": Language.CPP,
    "cpy": Language.COBOL,
    "cs": Language.CSHARP,
    "css": Language.CSS,
    "dart": Language.DART,
    "elm": Language.ELM,
    "erl": Language.ERLANG,
    "ex": Language.ELIXIR,
    "exs": Language.ELIXIR,
    "f": Language.FORTRAN,
    "f90": Language.FORTRAN,
    "for": Language.FORTRAN,
    "go": Language.GO,
    "groovy": Language.GROOVY,
    "gsh": Language.GROOVY,
    "gvy": Language.GROOVY,
    "gy": Language.GROOVY,
    "handlebars": Language.HANDLEBARS,
    "hbs": Language.HANDLEBARS,
    "hrl": Language.ERLANG,
    "hs": Language.HASKELL,
    "htm": Language.HTML,
    "html": Language.HTML,
    "inc": Language.PASCAL,
    "java": Language.JAVA,
    "jl": Language.JULIA,
    "js": Language.JAVASCRIPT,
    "json": Language.JSON,
    "jsx": Language.JAVASCRIPT,
    "kt": Language.KOTLIN,
    "kts": Language.KOTLIN,
    "less": Language.LESS,
    "lua": Language.LUA,
    "m": Language.OBJECTIVE_C,
    "md": Language.MARKDOWN,
    "mjs": Language.JAVASCRIPT,
    "ml": Language.OCAML,
    "mli": Language.OCAML,
    "mustache": Language.MUSTACHE,
    "p": Language.PROLOG,
    "pas": Language.PASCAL,
    "php": Language.PHP,
    "pl": Language.PERL,
    "pm": Language.PERL,
    "pp": Language.PASCAL,
    "pro": Language.PROLOG,
    "proto": Language.PROTOCOL_BUFFER,
    "py": Language.PYTHON,
    "r": Language.R,
    "rb": Language.RUBY,
    "re": Language.REASONML,
    "rhai": Language.RHAI,
    "rkt": Language.RACKET,
    "rs": Language.RUST,
    "s": Language.ASSEMBLY,
    "sass": Language.SASS,
    "scala": Language.SCALA,
    "scm": Language.SCHEME,
    "scpt": Language.APPLESCRIPT,
    "scptd": Language.APPLESCRIPT,
    "scss": Language.SASS,
    "sh": Language.SHELL,
    "sql": Language.SQL,
    "styl": Language.STYLUS,
    "svelte": Language.SVELTE,
    "swift": Language.SWIFT,
    "toml": Language.TOML,
    "ts": Language.TYPESCRIPT,
    "tsx": Language.TYPESCRIPT,
    "vue": Language.VUE,
    "wat": Language.WEBASSEMBLY,
    "xml": Language.XML,
    "yaml": Language.YAML,
    "yml": Language.YAML,
    "zig": Language.ZIG,
}

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def get_language(extension: str) -> Language | None:
    """Return the language for an exact, already lower-cased extension."""
    return _EXTENSIONS.get(extension)


def language_for_path(path: str | os.PathLike[str]) -> Language | None:
    """Return the language a file belongs to, judged by its extension.

    The extension is compared case-insensitively (ASCII only). Files without
    an extension, including dot-files such as ``.bashrc``, have no language.
    """
    suffix = PurePath(os.fspath(path)).suffix
    if not suffix:
        return None
    return get_language(suffix[1:].translate(_ASCII_LOWER))