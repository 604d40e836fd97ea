"""Process-wide classifier with a single, explicit model build."""

import logging
from collections.abc import Callable
from threading import Lock, RLock

from ..config import ClassifierConfig
from .cache import ClassificationCache
from .errors import ClassifierError, ModelError, NotTrainedError
from .features import DEFAULT_LANGUAGE
from .model import CodeModel
from .models import Classification

logger = logging.getLogger(__name__)

ModelFactory = Callable[[], CodeModel]


class CodeProcessor:
    """
    Owns the classifier model and guards its one-time build.

    Call :meth:`train` once before classifying (the host's setup step).
    Concurrent callers of :meth:`train` block until the single build
    completes and then share the same model.
    """

    def __init__(self, model_factory: ModelFactory = CodeModel, cache_size: int = 1000):
        self._model_factory = model_factory
        self._train_lock = RLock()
        self._model: CodeModel | None = None
        self._trained = False
        self.build_count = 0
        self.cache = ClassificationCache(max_size=cache_size)

    @property
    def is_trained(self) -> bool:
        return self._trained

    @property
    def model(self) -> CodeModel:
        if not self._trained:
            raise NotTrainedError()
        return self._model

    def train(self) -> CodeModel:
        """Build the model if it has not been built yet.

        Thread-safe initialization with double-checked locking pattern.

        Returns:
            The built model

        Raises:
            ModelError: If the model cannot be built; the processor stays untrained
        """
        if self._trained:
            return self._model

        with self._train_lock:
            # Double-check after acquiring lock
            if self._trained:
                return self._model

            try:
                model = self._model_factory()
            except ClassifierError:
                logger.error("Failed to build classifier model", exc_info=True)
                raise
            except Exception as e:
                logger.error(f"Failed to build classifier model: {e}")
                raise ModelError(f"Failed to build classifier model: {e}") from e

            self.build_count += 1
            self._model = model
            # Publish only once the model is fully assigned
            self._trained = True

            logger.info(
                f"Classifier trained: {len(model.languages)} languages, "
                f"{model.feature_count} features, table version {model.version}"
            )
            return model

    def classify_detailed(self, snippet: str) -> Classification:
        """
        Classify a snippet, returning the full result.

        Raises:
            NotTrainedError: If :meth:`train` has not completed
        """
        model = self.model

        cached = self.cache.get(snippet)
        if cached is not None:
            return cached

        result = model.classify(snippet)
        self.cache.put(snippet, result)
        return result

    def classify(self, snippet: str) -> str:
        """Return the language tag for a snippet. Requires a trained processor."""
        return self.classify_detailed(snippet).language

    def classify_or_default(self, snippet: str, default: str = DEFAULT_LANGUAGE) -> str:
        """Classify when trained, otherwise return ``default``."""
        if not self._trained:
            logger.warning(f"Classifier not trained, falling back to '{default}'")
            return default
        return self.classify(snippet)


_processor: CodeProcessor | None = None
_processor_lock = Lock()


def get_processor() -> CodeProcessor:
    """Return the process-wide processor, creating it on first call.

    The cache size is read from the environment when the processor is created.
    """
    global _processor
    if _processor is None:
        with _processor_lock:
            if _processor is None:
                config = ClassifierConfig.from_env()
                _processor = CodeProcessor(cache_size=config.cache_size)
    return _processor
