"""Google Gemini client for multimodal generation."""

from collections.abc import Sequence
from dataclasses import dataclass

from google import genai
from google.genai import types

from meal_assistant.domain.requests import InlinePart
from meal_assistant.domain.safety import SafetyPolicy
from meal_assistant.services.assistant import GenerativeClient


@dataclass
class GeminiGenerativeClient(GenerativeClient):
    """Generative client backed by the google-genai SDK."""

    client: genai.Client

    @classmethod
    def create(cls, api_key: str) -> "GeminiGenerativeClient":
        """Create a Gemini client."""
        return cls(client=genai.Client(api_key=api_key))

    async def generate(
        self,
        *,
        model: str,
        contents: Sequence[str | InlinePart],
        safety_policy: SafetyPolicy,
        response_mime_type: str | None = None,
    ) -> str | None:
        """Call generate_content and return the response text."""
        config = types.GenerateContentConfig(
            safety_settings=to_safety_settings(safety_policy),
            response_mime_type=response_mime_type,
        )
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=[_to_content(item) for item in contents],
            config=config,
        )
        return response.text


def to_safety_settings(policy: SafetyPolicy) -> list[types.SafetySetting]:
    """Translate a safety policy into SDK safety settings."""
    return [
        types.SafetySetting(
            category=types.HarmCategory(category.value),
            threshold=types.HarmBlockThreshold(threshold.value),
        )
        for category, threshold in policy.rules
    ]


def _to_content(item: str | InlinePart) -> str | types.Part:
    if isinstance(item, InlinePart):
        return types.Part.from_bytes(data=item.data, mime_type=item.mime_type)
    return item
