"""Code listings split into display lines, with optional shortening and highlighting."""

import asyncio
import logging

from .classifier import CodeProcessor, get_processor
from .config import MAX_SHORTCUT_LINES, SHORTCUT_NOTE
from .highlight import highlight_lines, normalize_newlines

logger = logging.getLogger(__name__)


def extract_lines(content: str) -> list[str]:
    """Split content into lines on LF, CRLF or lone CR line breaks."""
    return normalize_newlines(content).split("\n")


class CodeListing:
    """
    Lines of a code listing as a view would display them.

    When the listing is not shown in full and is longer than ``max_lines``,
    only the first ``max_lines`` lines are shown, followed by the upper-cased
    shortcut note; the rest are kept in ``dropped_lines``.
    """

    def __init__(
        self,
        content: str,
        show_full: bool = True,
        max_lines: int = MAX_SHORTCUT_LINES,
        shortcut_note: str = SHORTCUT_NOTE,
        processor: CodeProcessor | None = None,
    ):
        if max_lines <= 0:
            raise ValueError("Max lines must be a positive number")

        self.content = content
        self.max_lines = max_lines
        self.shortcut_note = shortcut_note
        self.processor = processor
        self.language: str | None = None
        self.is_full_showing = True
        self.dropped_lines: list[str] | None = None
        self.lines: list[str] = []
        self._apply(extract_lines(content), show_full)

    def _apply(self, lines: list[str], show_full: bool) -> None:
        self.is_full_showing = show_full or len(lines) <= self.max_lines

        if self.is_full_showing:
            self.dropped_lines = None
            self.lines = lines
        else:
            self.dropped_lines = lines[self.max_lines:]
            self.lines = lines[: self.max_lines] + [self.shortcut_note.upper()]

    def update_content(self, new_content: str) -> None:
        """Replace the content, keeping the current full/shortened mode."""
        self.content = new_content
        self.language = None
        self._apply(extract_lines(new_content), self.is_full_showing)

    def numbered_lines(self) -> list[tuple[int | None, str]]:
        """Displayed lines with 1-based numbers; the shortcut note has no number."""
        numbered = [(i + 1, line) for i, line in enumerate(self.lines)]
        if not self.is_full_showing:
            numbered[-1] = (None, numbered[-1][1])
        return numbered

    def __len__(self) -> int:
        return len(self.lines)

    def _resolve_language(self, content: str) -> str:
        processor = self.processor or get_processor()
        return processor.classify_or_default(content)

    def _highlighting(self, content: str, language: str | None) -> tuple[str, list[str]]:
        if language is None:
            language = self._resolve_language(content)
        logger.debug(f"Highlighting {len(content)} characters as '{language}'")
        return language, highlight_lines(language, content)

    def highlight_code(self, language: str | None = None) -> str:
        """
        Highlight the listing.

        Args:
            language: Language tag; when None the language is classified,
                falling back to the default tag if the classifier is untrained

        Returns:
            The language tag used
        """
        language, lines = self._highlighting(self.content, language)
        self.language = language
        self._apply(lines, self.is_full_showing)
        return language

    async def highlight_code_async(self, language: str | None = None) -> str:
        """Like :meth:`highlight_code`, with the work done in a worker thread."""
        content = self.content
        language, lines = await asyncio.to_thread(self._highlighting, content, language)

        if content != self.content:
            # Content was replaced while highlighting; drop the stale result
            logger.debug("Listing changed during highlighting, discarding result")
            return language

        self.language = language
        self._apply(lines, self.is_full_showing)
        return language
