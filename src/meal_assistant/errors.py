"""Exceptions raised by the meal assistant."""


class MealAssistantError(Exception):
    """Base class for meal assistant failures."""


class EmptyResponseError(MealAssistantError, RuntimeError):
    """The upstream model returned no content."""


class TranscriptionError(EmptyResponseError):
    """Audio transcription produced no text."""


class MealProcessingError(EmptyResponseError):
    """Meal analysis produced no content."""


class InvalidMealResponseError(MealAssistantError, ValueError):
    """The upstream model returned content that is not a valid meal payload."""

    def __init__(self, message: str, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


class ImageFetchError(MealAssistantError):
    """A meal image could not be downloaded."""

    def __init__(self, message: str, url: str) -> None:
        super().__init__(message)
        self.url = url
