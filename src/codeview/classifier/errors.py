"""Exceptions raised by the language classifier."""

from typing import Any


class ClassifierError(Exception):
    """Base class for classifier errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "CLASSIFIER_ERROR",
        technical_details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.error_code = error_code
        self.user_message = message
        self.technical_details = technical_details or {}


class NotTrainedError(ClassifierError):
    """Classification was requested before the model was built."""

    def __init__(self, message: str = "Classifier is not trained", technical_details: dict[str, Any] | None = None):
        super().__init__(message, "NOT_TRAINED", technical_details)


class ModelError(ClassifierError):
    """The feature table cannot be compiled into a model."""

    def __init__(self, message: str, technical_details: dict[str, Any] | None = None):
        super().__init__(message, "MODEL_ERROR", technical_details)
