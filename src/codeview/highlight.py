"""Syntax highlighting of code listings with Pygments."""

import logging

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# Language tag to Pygments lexer alias
LEXER_ALIASES = {
    "kt": "kotlin",
    "java": "java",
    "js": "javascript",
    "py": "python",
    "rb": "ruby",
    "go": "go",
    "c": "c",
    "cpp": "cpp",
    "cs": "csharp",
    "php": "php",
    "swift": "swift",
    "rs": "rust",
    "sh": "bash",
    "sql": "sql",
    "css": "css",
    "html": "html",
}


def get_lexer(language: str) -> Lexer:
    """
    Get a Pygments lexer for a language tag or Pygments alias.

    Unknown languages get the plain text lexer. Leading and trailing blank
    lines are preserved so highlighted output lines up with the source.
    """
    alias = LEXER_ALIASES.get(language, language)
    options = {"stripnl": False, "ensurenl": True}
    if alias == "php":
        # Snippets are usually shown without the opening tag
        options["startinline"] = True

    try:
        return get_lexer_by_name(alias, **options)
    except ClassNotFound:
        logger.warning(f"No lexer for language '{language}', using plain text")
        return TextLexer(**options)


def normalize_newlines(code: str) -> str:
    """Turn CRLF and lone CR line breaks into LF, the way Pygments lexers do."""
    return code.replace("\r\n", "\n").replace("\r", "\n")


def highlight(language: str, code: str) -> str:
    """Highlight code as HTML with CSS class spans and no wrapping element."""
    formatter = HtmlFormatter(nowrap=True)
    return pygments_highlight(normalize_newlines(code), get_lexer(language), formatter)


def highlight_lines(language: str, code: str) -> list[str]:
    """Highlight code and split the HTML into one entry per source line."""
    line_count = normalize_newlines(code).count("\n") + 1
    parts = highlight(language, code).split("\n")[:line_count]
    parts.extend([""] * (line_count - len(parts)))
    return parts
