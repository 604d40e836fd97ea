"""Data models for language classification."""

from dataclasses import dataclass
from enum import Enum


class ClassificationMethod(Enum):
    """How a classification result was reached."""

    FEATURES = "features"
    DEFAULT = "default"


@dataclass(frozen=True)
class Classification:
    """Result of classifying a snippet, with the winning score and its share of the total."""

    language: str
    score: int
    confidence: float
    method: ClassificationMethod

    def __repr__(self) -> str:
        return (
            f"Classification(language='{self.language}', score={self.score}, "
            f"confidence={self.confidence:.2f}, method={self.method.value})"
        )
