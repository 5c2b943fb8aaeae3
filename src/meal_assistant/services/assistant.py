"""Meal assistant service: transcription and meal analysis via an LLM."""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from pydantic import ValidationError

from meal_assistant.adapters.image_fetcher import ImageFetcher
from meal_assistant.domain.meals import MealDetails
from meal_assistant.domain.requests import (
    InlinePart,
    MealDescriptionRequest,
    MealImageRequest,
    TranscriptionRequest,
)
from meal_assistant.domain.safety import PERMISSIVE_SAFETY_POLICY, SafetyPolicy
from meal_assistant.errors import (
    InvalidMealResponseError,
    MealProcessingError,
    TranscriptionError,
)
from meal_assistant.services.prompts import (
    TRANSCRIPTION_PROMPT,
    meal_from_image_prompt,
    meal_from_text_prompt,
)

JSON_MIME_TYPE = "application/json"

_logger = logging.getLogger(__name__)


class GenerativeClient(Protocol):
    """Interface for the hosted generative model."""

    async def generate(
        self,
        *,
        model: str,
        contents: Sequence[str | InlinePart],
        safety_policy: SafetyPolicy,
        response_mime_type: str | None = None,
    ) -> str | None:
        """Return the model's text output, or None when it produced nothing."""


@dataclass
class MealAssistantService:
    """Service that prepares prompts, calls the model and validates results."""

    client: GenerativeClient
    image_fetcher: ImageFetcher
    transcription_model: str = "gemini-1.5-flash"
    meal_model: str = "gemini-2.0-flash-exp"
    audio_mime_type: str = "audio/m4a"
    image_mime_type: str = "image/jpeg"
    timezone: str = "America/Sao_Paulo"
    safety_policy: SafetyPolicy = PERMISSIVE_SAFETY_POLICY

    async def transcribe_audio(self, file_buffer: bytes) -> str:
        """Transcribe Portuguese speech from an audio buffer."""
        request = TranscriptionRequest(
            audio=file_buffer,
            mime_type=self.audio_mime_type,
            prompt=TRANSCRIPTION_PROMPT,
        )
        _logger.info(
            "Transcribing audio: model=%s bytes=%s",
            self.transcription_model,
            len(file_buffer),
        )
        transcription = await self.client.generate(
            model=self.transcription_model,
            contents=request.contents(),
            safety_policy=self.safety_policy,
        )
        if not transcription:
            _logger.warning("Transcription returned no text")
            raise TranscriptionError("Falha ao transcrever o áudio.")
        return transcription

    async def get_meal_details_from_text(
        self, text: str, created_at: datetime
    ) -> MealDetails:
        """Identify foods and estimate nutrition from a meal description."""
        request = MealDescriptionRequest(text=text, created_at=created_at)
        prompt = meal_from_text_prompt(request.text, request.created_at, self.timezone)
        _logger.info(
            "Analysing meal text: model=%s chars=%s", self.meal_model, len(text)
        )
        raw = await self.client.generate(
            model=self.meal_model,
            contents=[prompt],
            safety_policy=self.safety_policy,
            response_mime_type=JSON_MIME_TYPE,
        )
        if not raw:
            _logger.warning("Meal text analysis returned no content")
            raise MealProcessingError("Failed to process meal from text.")
        return parse_meal_details(raw)

    async def get_meal_details_from_image(
        self, image_url: str, created_at: datetime
    ) -> MealDetails:
        """Identify foods and estimate nutrition from a meal photo URL."""
        request = MealImageRequest(image_url=image_url, created_at=created_at)
        image_bytes = await self.image_fetcher.fetch(request.image_url)
        image_part = InlinePart(data=image_bytes, mime_type=self.image_mime_type)
        prompt = meal_from_image_prompt(request.created_at, self.timezone)
        _logger.info(
            "Analysing meal image: model=%s bytes=%s",
            self.meal_model,
            len(image_bytes),
        )
        raw = await self.client.generate(
            model=self.meal_model,
            contents=[prompt, image_part],
            safety_policy=self.safety_policy,
            response_mime_type=JSON_MIME_TYPE,
        )
        if not raw:
            _logger.warning("Meal image analysis returned no content")
            raise MealProcessingError("Failed to process meal from image.")
        return parse_meal_details(raw)


def parse_meal_details(raw: str) -> MealDetails:
    """Parse and validate the model's JSON output."""
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        _logger.warning("Model returned malformed JSON: %s", exc)
        raise InvalidMealResponseError("Model returned malformed JSON", raw) from exc
    try:
        meal = MealDetails.model_validate(payload)
    except ValidationError as exc:
        _logger.warning("Model returned an unexpected meal shape: %s", exc)
        raise InvalidMealResponseError(
            "Model returned an unexpected meal shape", raw
        ) from exc
    _logger.info(
        "Parsed meal: name=%s foods=%s calories=%s",
        meal.name,
        len(meal.foods),
        meal.total_calories,
    )
    return meal
