"""Feature-weight model that scores snippets against every supported language."""

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .errors import ModelError
from .features import (
    DEFAULT_LANGUAGE,
    FEATURE_TABLE,
    FEATURE_TABLE_VERSION,
    SUPPORTED_LANGUAGES,
    features,
)
from .models import Classification, ClassificationMethod

logger = logging.getLogger(__name__)


class CodeModel:
    """
    Immutable bag-of-features scorer.

    The feature table is compiled into an inverted index mapping each feature
    to the languages it votes for. A language's score is the sum of the
    weights of the distinct features present in the snippet. Ties go to the
    language listed first in ``languages``.
    """

    def __init__(
        self,
        table: Mapping[str, Mapping[str, int]] = FEATURE_TABLE,
        languages: Sequence[str] = SUPPORTED_LANGUAGES,
        default_language: str = DEFAULT_LANGUAGE,
        version: str = FEATURE_TABLE_VERSION,
    ):
        """
        Compile a feature table.

        Args:
            table: Mapping of language tag to ``{feature: weight}``
            languages: Supported tags in tie-break priority order
            default_language: Tag returned when a snippet carries no evidence

        Raises:
            ModelError: If the table references unknown languages or holds
                non-positive weights, or the default is not supported
        """
        self.languages = tuple(languages)
        self.default_language = default_language
        self.version = version

        if len(set(self.languages)) != len(self.languages):
            raise ModelError("Supported languages contain duplicates")
        if default_language not in self.languages:
            raise ModelError(
                f"Default language '{default_language}' is not supported",
                {"languages": list(self.languages)},
            )

        self._priority = {language: i for i, language in enumerate(self.languages)}
        index: dict[str, list[tuple[str, int]]] = {}

        for language, weights in table.items():
            if language not in self._priority:
                raise ModelError(
                    f"Feature table references unsupported language '{language}'",
                    {"languages": list(self.languages)},
                )
            for feature, weight in weights.items():
                if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                    raise ModelError(
                        f"Invalid weight {weight!r} for feature '{feature}' of '{language}'"
                    )
                index.setdefault(feature, []).append((language, weight))

        self._index = MappingProxyType(
            {feature: tuple(votes) for feature, votes in index.items()}
        )

    @property
    def feature_count(self) -> int:
        return len(self._index)

    def score(self, snippet: str) -> dict[str, int]:
        """Score a snippet against every supported language."""
        scores = dict.fromkeys(self.languages, 0)
        for feature in features(snippet):
            for language, weight in self._index.get(feature, ()):
                scores[language] += weight
        return scores

    def rank(self, snippet: str) -> list[tuple[str, int]]:
        """Languages ordered by score, highest first, ties in priority order."""
        scores = self.score(snippet)
        return sorted(scores.items(), key=lambda item: (-item[1], self._priority[item[0]]))

    def classify(self, snippet: str) -> Classification:
        """Pick the best-scoring language for a snippet."""
        if not snippet or not snippet.strip():
            return Classification(self.default_language, 0, 0.0, ClassificationMethod.DEFAULT)

        ranking = self.rank(snippet)
        language, best = ranking[0]

        if best == 0:
            # No evidence at all: every language ties at zero.
            return Classification(self.default_language, 0, 0.0, ClassificationMethod.DEFAULT)

        total = sum(score for _, score in ranking)
        logger.debug(f"Scored snippet: {ranking[:3]}")
        return Classification(language, best, best / total, ClassificationMethod.FEATURES)
