"""Shared test fixtures."""

import json
from collections.abc import Sequence
from dataclasses import dataclass, field

import pytest

from meal_assistant.adapters.image_fetcher import ImageFetcher
from meal_assistant.config import Settings
from meal_assistant.containers import AppContainer
from meal_assistant.domain.requests import InlinePart
from meal_assistant.domain.safety import SafetyPolicy
from meal_assistant.errors import ImageFetchError
from meal_assistant.services.assistant import GenerativeClient, MealAssistantService

BREAKFAST_PAYLOAD: dict[str, object] = {
    "name": "Café da manhã",
    "icon": "🍳",
    "foods": [
        {
            "name": "Ovos mexidos",
            "quantity": "2 unidades",
            "calories": 156,
            "carbohydrates": 1.2,
            "proteins": 12.6,
            "fats": 10.6,
        },
        {
            "name": "Torrada",
            "quantity": "1 fatia",
            "calories": 75,
            "carbohydrates": 14,
            "proteins": 2.6,
            "fats": 1,
        },
    ],
}


@dataclass
class FakeGenerativeClient(GenerativeClient):
    """Fake generative client that records calls and returns a fixed reply."""

    reply: str | None = field(default_factory=lambda: json.dumps(BREAKFAST_PAYLOAD))
    calls: list[dict[str, object]] = field(default_factory=list)

    async def generate(
        self,
        *,
        model: str,
        contents: Sequence[str | InlinePart],
        safety_policy: SafetyPolicy,
        response_mime_type: str | None = None,
    ) -> str | None:
        self.calls.append(
            {
                "model": model,
                "contents": list(contents),
                "safety_policy": safety_policy,
                "response_mime_type": response_mime_type,
            }
        )
        return self.reply


@dataclass
class FakeImageFetcher(ImageFetcher):
    """Fake image fetcher returning static bytes or failing on demand."""

    content: bytes = b"\xff\xd8\xfffake-jpeg"
    fail: bool = False
    urls: list[str] = field(default_factory=list)

    async def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.fail:
            raise ImageFetchError("Failed to download image: unreachable", url)
        return self.content


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="gemini-key", environment="test")


@pytest.fixture
def generative_client() -> FakeGenerativeClient:
    return FakeGenerativeClient()


@pytest.fixture
def image_fetcher() -> FakeImageFetcher:
    return FakeImageFetcher()


@pytest.fixture
def service(
    settings: Settings,
    generative_client: FakeGenerativeClient,
    image_fetcher: FakeImageFetcher,
) -> MealAssistantService:
    return MealAssistantService(
        client=generative_client,
        image_fetcher=image_fetcher,
        transcription_model=settings.transcription_model,
        meal_model=settings.meal_model,
        audio_mime_type=settings.audio_mime_type,
        image_mime_type=settings.image_mime_type,
        timezone=settings.timezone,
    )


@pytest.fixture
def container(settings: Settings, service: MealAssistantService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_assistant_service=service,
        close_resources=close_resources,
    )
