"""Language classification for code snippets."""

from .cache import CacheStatistics, ClassificationCache
from .errors import ClassifierError, ModelError, NotTrainedError
from .features import (
    DEFAULT_LANGUAGE,
    FEATURE_TABLE,
    FEATURE_TABLE_VERSION,
    SUPPORTED_LANGUAGES,
    features,
    tokenize,
)
from .model import CodeModel
from .models import Classification, ClassificationMethod
from .processor import CodeProcessor, get_processor

__all__ = [
    "CodeModel",
    "CodeProcessor",
    "get_processor",
    "Classification",
    "ClassificationMethod",
    "ClassificationCache",
    "CacheStatistics",
    "ClassifierError",
    "ModelError",
    "NotTrainedError",
    "DEFAULT_LANGUAGE",
    "SUPPORTED_LANGUAGES",
    "FEATURE_TABLE",
    "FEATURE_TABLE_VERSION",
    "features",
    "tokenize",
]
