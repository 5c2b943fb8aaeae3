"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_assistant.adapters.gemini_client import GeminiGenerativeClient
from meal_assistant.adapters.image_fetcher import HttpxImageFetcher
from meal_assistant.config import Settings
from meal_assistant.services.assistant import MealAssistantService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_assistant_service: MealAssistantService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gemini_client = GeminiGenerativeClient.create(resolved_settings.gemini_api_key)
    image_fetcher = HttpxImageFetcher.create(
        timeout_seconds=resolved_settings.image_fetch_timeout_seconds
    )
    meal_assistant_service = MealAssistantService(
        client=gemini_client,
        image_fetcher=image_fetcher,
        transcription_model=resolved_settings.transcription_model,
        meal_model=resolved_settings.meal_model,
        audio_mime_type=resolved_settings.audio_mime_type,
        image_mime_type=resolved_settings.image_mime_type,
        timezone=resolved_settings.timezone,
    )

    async def close_resources() -> None:
        await image_fetcher.close()

    return AppContainer(
        settings=resolved_settings,
        meal_assistant_service=meal_assistant_service,
        close_resources=close_resources,
    )
