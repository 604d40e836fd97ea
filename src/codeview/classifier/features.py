"""Lexical features and the per-language weight table used for classification."""

import re
from types import MappingProxyType
from typing import Mapping

FEATURE_TABLE_VERSION = "2024.1"

DEFAULT_LANGUAGE = "kt"

# Priority order: earlier languages win ties. The default language comes first
# so that a snippet with no evidence resolves to it.
SUPPORTED_LANGUAGES = (
    "kt",
    "java",
    "js",
    "py",
    "rb",
    "go",
    "c",
    "cpp",
    "cs",
    "php",
    "swift",
    "rs",
    "sh",
    "sql",
    "css",
    "html",
)

SIGIL_VARIABLE = "$var"

TOKEN_PATTERN = re.compile(
    r"""
      \#!\S*                                # shebang
    | <\?php | \?>                          # php open/close
    | </[A-Za-z][\w-]*                      # closing tag
    | (?<![\w\])])<!?[A-Za-z][\w-]*         # opening tag, not a generic
    | [@\#][A-Za-z_]\w*                     # annotation, directive
    | \$[A-Za-z_]\w*                        # sigil variable
    | [A-Za-z_]\w*                          # identifier or keyword
    | ===|!==|:=|=>|->|::|\?\.|\$\{|[{};]   # operators
    """,
    re.VERBOSE,
)

_TABLE = {
    "kt": {
        "fun": 5, "val": 3, "var": 1, "println": 2, "when": 3, "override": 1,
        "data": 2, "object": 2, "companion": 5, "lateinit": 5, "?.": 2,
        "it": 1, "listOf": 5, "mutableListOf": 5, "Unit": 3, "Int": 1,
        "String": 1, "package": 1, "import": 1,
    },
    "java": {
        "public": 2, "private": 1, "protected": 2, "static": 1, "void": 2,
        "class": 1, "extends": 3, "implements": 4, "@Override": 4,
        "System": 3, "new": 1, "String": 1, "final": 3, "import": 1,
        "package": 2, "throws": 5, "boolean": 3, "interface": 1, "int": 1,
        ";": 1, "ArrayList": 4, "null": 1,
    },
    "js": {
        "function": 3, "var": 2, "let": 2, "const": 2, "===": 4, "!==": 4,
        "=>": 1, "console": 4, "document": 4, "window": 4, "require": 2,
        "undefined": 5, "null": 1, "this": 1, "async": 1, "await": 1,
        "module": 1, "exports": 3, "prototype": 4, "typeof": 3, ";": 1,
        "log": 1, "import": 1, "export": 2, "node": 2,
    },
    "py": {
        "def": 3, "elif": 5, "self": 3, "None": 3, "True": 2, "False": 2,
        "__init__": 5, "__name__": 5, "lambda": 2, "import": 1, "from": 1,
        "print": 1, "pass": 3, "in": 1, "not": 1, "and": 1, "or": 1,
        "is": 1, "with": 1, "yield": 1, "range": 2, "class": 1,
        "python": 2, "python3": 2,
    },
    "rb": {
        "def": 3, "end": 3, "puts": 4, "nil": 4, "elsif": 5, "require": 2,
        "attr_accessor": 5, "attr_reader": 5, "do": 1, "unless": 4,
        "module": 1, "each": 2, "ruby": 2, "class": 1, "self": 1, "::": 1,
        "=>": 1,
    },
    "go": {
        "func": 4, "package": 2, ":=": 4, "fmt": 5, "Println": 3,
        "Printf": 2, "chan": 5, "go": 2, "defer": 5, "struct": 2,
        "interface": 1, "nil": 2, "import": 1, "range": 1, "make": 2,
        "var": 1, "err": 2, "main": 1, "type": 3,
    },
    "c": {
        "#include": 4, "#define": 3, "int": 1, "printf": 4, "malloc": 5,
        "free": 2, "char": 2, "void": 1, "struct": 2, "sizeof": 3,
        "NULL": 3, "typedef": 3, ";": 1, "->": 1, "<stdio": 5, "<stdlib": 5,
        "main": 1, "unsigned": 2,
    },
    "cpp": {
        "#include": 4, "#define": 2, "std": 5, "::": 2, "cout": 5, "cin": 3,
        "endl": 5, "namespace": 2, "template": 4, "typename": 4,
        "<iostream": 5, "<vector": 4, "virtual": 3, "nullptr": 5, "class": 1,
        "delete": 3, "auto": 2, "int": 1, ";": 1, "->": 1, "const": 1,
        "bool": 1, "main": 1, "vector": 3, "unsigned": 1, "char": 1,
        "sizeof": 1,
    },
    "cs": {
        "using": 4, "namespace": 3, "Console": 5, "WriteLine": 4,
        "string": 2, "var": 1, "get": 2, "set": 1, "override": 1,
        "public": 1, "private": 1, "void": 1, "class": 1, "static": 1,
        "readonly": 4, "foreach": 3, "=>": 1, "async": 1, "await": 1,
        "Task": 3, "bool": 3, ";": 1, "new": 1, "int": 1, "System": 1,
    },
    "php": {
        "<?php": 10, "?>": 3, SIGIL_VARIABLE: 3, "echo": 3, "function": 1,
        "foreach": 3, "array": 3, "=>": 1, "->": 1, "public": 1, "class": 1,
        "namespace": 1, "use": 1, ";": 1, "::": 1, "isset": 5,
        "require_once": 5,
    },
    "swift": {
        "func": 3, "let": 2, "var": 2, "guard": 5, "import": 1, "UIKit": 5,
        "Foundation": 5, "print": 1, "init": 3, "self": 1, "override": 1,
        "struct": 1, "protocol": 5, "extension": 4, "?.": 1, "->": 1,
        "Int": 2, "String": 1, "nil": 2, "in": 1, "class": 1, "inout": 5,
        "weak": 3, "@IBOutlet": 5, "@objc": 5,
    },
    "rs": {
        "fn": 5, "let": 1, "mut": 5, "impl": 5, "pub": 4, "use": 2,
        "crate": 5, "match": 2, "Some": 3, "None": 1, "Ok": 3, "Err": 3,
        "println": 1, "Vec": 4, "->": 1, "::": 2, "struct": 1, "enum": 1,
        "self": 1, ";": 1, "unwrap": 4, "String": 1, "i32": 4, "u32": 3,
        "usize": 4, "trait": 4, "mod": 3,
    },
    "sh": {
        "#!/bin/bash": 10, "#!/bin/sh": 10, "bash": 3, "echo": 3, "fi": 5,
        "then": 3, "esac": 5, "done": 4, "do": 1, SIGIL_VARIABLE: 1,
        "export": 3, "elif": 2, "grep": 3, "sudo": 4, "cd": 2, "ls": 2,
        "local": 2, "${": 2, "exit": 2,
    },
    "sql": {
        "SELECT": 5, "FROM": 2, "WHERE": 4, "INSERT": 5, "INTO": 3,
        "UPDATE": 4, "DELETE": 3, "CREATE": 3, "TABLE": 3, "VALUES": 4,
        "JOIN": 4, "ORDER": 3, "BY": 2, "GROUP": 3, "NOT": 1, "NULL": 1,
        "PRIMARY": 4, "KEY": 2, "VARCHAR": 5, "INTEGER": 3, "AND": 1,
        "select": 4, "from": 1, "where": 3, "insert": 4, "into": 2,
        "values": 3, "varchar": 5, ";": 1,
    },
    "css": {
        "@media": 5, "@import": 2, "px": 3, "rem": 3, "em": 1, "color": 2,
        "margin": 4, "padding": 4, "border": 3, "background": 3, "font": 2,
        "display": 3, "width": 1, "height": 1, "important": 3, "hover": 3,
        "rgba": 4, "solid": 3, "none": 1, "auto": 1, "flex": 2,
    },
    "html": {
        "<!DOCTYPE": 10, "<html": 5, "<head": 4, "<body": 4, "<div": 4,
        "</div": 3, "<p": 2, "<a": 2, "href": 3, "<span": 3, "<script": 3,
        "<meta": 4, "<title": 4, "<ul": 3, "<li": 3, "<br": 3, "<img": 3,
        "src": 2, "<link": 3, "<table": 3, "<td": 3, "<input": 3,
        "<form": 3, "<h1": 4, "rel": 2, "charset": 3,
    },
}

FEATURE_TABLE: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {language: MappingProxyType(weights) for language, weights in _TABLE.items()}
)


def tokenize(snippet: str) -> list[str]:
    """Split a snippet into lexical features, in order of appearance.

    Every ``$name`` collapses to the single ``$var`` feature.
    """
    tokens = []
    for match in TOKEN_PATTERN.finditer(snippet):
        token = match.group(0)
        if token[0] == "$" and len(token) > 1 and token[1] != "{":
            token = SIGIL_VARIABLE
        tokens.append(token)
    return tokens


def features(snippet: str) -> frozenset[str]:
    """Distinct lexical features of a snippet."""
    return frozenset(tokenize(snippet))
