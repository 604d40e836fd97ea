"""Configuration for codeview."""

import logging
import os
from dataclasses import dataclass, field

MAX_SHORTCUT_LINES = 6
SHORTCUT_NOTE = "Show all"


@dataclass
class ClassifierConfig:
    """Configuration for the language classifier."""

    cache_size: int = 1000

    def __post_init__(self):
        if self.cache_size < 0:
            raise ValueError("Cache size cannot be negative")

    @classmethod
    def from_env(cls) -> "ClassifierConfig":
        """Create configuration from environment variables."""
        return cls(cache_size=int(os.getenv("CODEVIEW_CACHE_SIZE", "1000")))


@dataclass
class ListingConfig:
    """Configuration for shortened listings."""

    max_lines: int = MAX_SHORTCUT_LINES
    shortcut_note: str = SHORTCUT_NOTE

    def __post_init__(self):
        if self.max_lines <= 0:
            raise ValueError("Max lines must be a positive number")

    @classmethod
    def from_env(cls) -> "ListingConfig":
        """Create configuration from environment variables."""
        return cls(
            max_lines=int(os.getenv("CODEVIEW_MAX_LINES", str(MAX_SHORTCUT_LINES))),
            shortcut_note=os.getenv("CODEVIEW_SHORTCUT_NOTE", SHORTCUT_NOTE),
        )


@dataclass
class CodeViewConfig:
    """Main configuration for codeview."""

    classifier: ClassifierConfig = field(default_factory=ClassifierConfig)
    listing: ListingConfig = field(default_factory=ListingConfig)
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate and normalize log level."""
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @classmethod
    def from_env(cls) -> "CodeViewConfig":
        """Create configuration from environment variables."""
        return cls(
            classifier=ClassifierConfig.from_env(),
            listing=ListingConfig.from_env(),
            log_level=os.getenv("CODEVIEW_LOG_LEVEL", "WARNING"),
        )
