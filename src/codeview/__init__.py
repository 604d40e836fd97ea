"""codeview - Code listings with language classification and syntax highlighting."""

__version__ = "0.1.0"

from .classifier import (
    DEFAULT_LANGUAGE,
    SUPPORTED_LANGUAGES,
    CodeModel,
    CodeProcessor,
    get_processor,
)
from .cli import cli, main
from .listing import CodeListing, extract_lines

__all__ = [
    "main", "cli", "CodeListing", "extract_lines", "CodeModel", "CodeProcessor",
    "get_processor", "DEFAULT_LANGUAGE", "SUPPORTED_LANGUAGES", "__version__",
]
