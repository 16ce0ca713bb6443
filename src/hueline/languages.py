"""Built-in language definitions.

A Language bundles the keyword and identifier sets the tokenizer needs for
one file type, plus the extensions it is used for. Definitions are plain
data; ``Language.config()`` turns one into a SyntaxConfig.

Example:
    >>> language = language_for_path("shaders/blur.frag")
    >>> language.name
    'glsl'
    >>> engine = Syntax(buffer, language.config())
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from hueline.config import SyntaxConfig


@dataclass(frozen=True, slots=True)
class Language:
    """Keyword data for one language.

    Attributes:
        name: Lookup name (e.g., "cpp")
        extensions: File extensions including the dot (e.g., ".cpp")
        keywords: Reserved words, classified as KEYWORD
        identifiers: Well-known names (types, builtins), classified as IDENTIFIER
        case_insensitive: Whether keyword matching ignores case

    """

    name: str
    extensions: tuple[str, ...]
    keywords: frozenset[str]
    identifiers: frozenset[str] = frozenset()
    case_insensitive: bool = False

    def config(self) -> SyntaxConfig:
        return SyntaxConfig(
            keywords=self.keywords,
            identifiers=self.identifiers,
            case_insensitive=self.case_insensitive,
        )


CPP = Language(
    name="cpp",
    extensions=(".c", ".cc", ".cpp", ".cxx", ".h", ".hh", ".hpp", ".inl"),
    keywords=frozenset(
        {
            "alignas", "alignof", "auto", "bool", "break", "case", "catch",
            "char", "class", "const", "constexpr", "const_cast", "continue",
            "decltype", "default", "delete", "do", "double", "dynamic_cast",
            "else", "enum", "explicit", "export", "extern", "false", "float",
            "for", "friend", "goto", "if", "inline", "int", "long", "mutable",
            "namespace", "new", "noexcept", "nullptr", "operator", "private",
            "protected", "public", "register", "reinterpret_cast", "return",
            "short", "signed", "sizeof", "static", "static_assert",
            "static_cast", "struct", "switch", "template", "this",
            "thread_local", "throw", "true", "try", "typedef", "typeid",
            "typename", "union", "unsigned", "using", "virtual", "void",
            "volatile", "while",
        }
    ),  # fmt: skip
    identifiers=frozenset(
        {
            "std", "string", "vector", "map", "set", "unordered_map",
            "shared_ptr", "unique_ptr", "make_shared", "make_unique", "size_t",
            "int8_t", "int16_t", "int32_t", "int64_t", "uint8_t", "uint16_t",
            "uint32_t", "uint64_t", "assert", "printf", "memcpy", "memset",
        }
    ),  # fmt: skip
)

PYTHON = Language(
    name="python",
    extensions=(".py", ".pyi", ".pyw"),
    keywords=frozenset(
        {
            "False", "None", "True", "and", "as", "assert", "async", "await",
            "break", "class", "continue", "def", "del", "elif", "else",
            "except", "finally", "for", "from", "global", "if", "import", "in",
            "is", "lambda", "nonlocal", "not", "or", "pass", "raise", "return",
            "try", "while", "with", "yield",
        }
    ),  # fmt: skip
    identifiers=frozenset(
        {
            "bool", "bytes", "dict", "enumerate", "float", "int", "isinstance",
            "len", "list", "object", "print", "range", "self", "set", "str",
            "super", "tuple", "type", "zip",
        }
    ),  # fmt: skip
)

GLSL = Language(
    name="glsl",
    extensions=(".glsl", ".vert", ".frag", ".geom", ".comp", ".vs", ".fs"),
    keywords=frozenset(
        {
            "attribute", "bool", "break", "bvec2", "bvec3", "bvec4", "const",
            "continue", "discard", "do", "else", "false", "float", "for",
            "highp", "if", "in", "inout", "int", "ivec2", "ivec3", "ivec4",
            "layout", "lowp", "mat2", "mat3", "mat4", "mediump", "out",
            "precision", "return", "sampler2D", "samplerCube", "struct",
            "true", "uniform", "varying", "vec2", "vec3", "vec4", "void",
            "while",
        }
    ),  # fmt: skip
    identifiers=frozenset(
        {
            "abs", "clamp", "cross", "dot", "fract", "gl_FragColor",
            "gl_FragCoord", "gl_Position", "length", "max", "min", "mix",
            "normalize", "pow", "reflect", "smoothstep", "step", "texture",
            "texture2D",
        }
    ),  # fmt: skip
)

LISP = Language(
    name="lisp",
    extensions=(".lisp", ".lsp", ".cl", ".el", ".scm"),
    keywords=frozenset(
        {
            "defun", "defmacro", "defvar", "defparameter", "lambda", "let",
            "let*", "if", "cond", "when", "unless", "progn", "setq", "setf",
            "quote", "loop", "and", "or", "not", "nil", "t",
        }
    ),  # fmt: skip
    identifiers=frozenset(
        {"car", "cdr", "cons", "list", "append", "mapcar", "apply", "funcall", "format"}
    ),
    case_insensitive=True,
)

SQL = Language(
    name="sql",
    extensions=(".sql",),
    keywords=frozenset(
        {
            "select", "from", "where", "insert", "into", "values", "update",
            "set", "delete", "create", "table", "drop", "alter", "join",
            "inner", "left", "right", "outer", "on", "group", "by", "order",
            "having", "limit", "and", "or", "not", "null", "as", "distinct",
            "union", "primary", "key", "index",
        }
    ),  # fmt: skip
    identifiers=frozenset({"count", "sum", "avg", "min", "max", "coalesce"}),
    case_insensitive=True,
)

BUILTIN_LANGUAGES: dict[str, Language] = {
    language.name: language for language in (CPP, PYTHON, GLSL, LISP, SQL)
}

_BY_EXTENSION: dict[str, Language] = {
    extension: language
    for language in BUILTIN_LANGUAGES.values()
    for extension in language.extensions
}


def get_language(name: str) -> Language:
    """Get a built-in language by name.

    Raises:
        KeyError: If no language has that name
    """
    try:
        return BUILTIN_LANGUAGES[name.lower()]
    except KeyError:
        available = ", ".join(sorted(BUILTIN_LANGUAGES))
        msg = f"Unknown language '{name}'. Available: {available}"
        raise KeyError(msg) from None


def language_for_path(path: str | PurePath) -> Language | None:
    """Pick a built-in language from a file's extension, or None."""
    return _BY_EXTENSION.get(PurePath(path).suffix.lower())


__all__ = [
    "BUILTIN_LANGUAGES",
    "CPP",
    "GLSL",
    "LISP",
    "PYTHON",
    "SQL",
    "Language",
    "get_language",
    "language_for_path",
]
