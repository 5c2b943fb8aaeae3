"""Request payloads sent to the upstream model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InlinePart:
    """Binary payload sent inline with a prompt."""

    data: bytes
    mime_type: str


@dataclass(frozen=True)
class TranscriptionRequest:
    """Audio to transcribe along with the instruction prompt."""

    audio: bytes
    mime_type: str
    prompt: str

    def contents(self) -> list[str | InlinePart]:
        return [self.prompt, InlinePart(data=self.audio, mime_type=self.mime_type)]


@dataclass(frozen=True)
class MealDescriptionRequest:
    """Free-text meal description."""

    text: str
    created_at: datetime


@dataclass(frozen=True)
class MealImageRequest:
    """Remote meal photo."""

    image_url: str
    created_at: datetime
