"""Content safety policy sent with every model request."""

from dataclasses import dataclass
from enum import Enum


class HarmCategory(Enum):
    """Content categories the upstream model can filter."""

    HARASSMENT = "HARM_CATEGORY_HARASSMENT"
    HATE_SPEECH = "HARM_CATEGORY_HATE_SPEECH"
    SEXUALLY_EXPLICIT = "HARM_CATEGORY_SEXUALLY_EXPLICIT"
    DANGEROUS_CONTENT = "HARM_CATEGORY_DANGEROUS_CONTENT"


class BlockThreshold(Enum):
    """How aggressively flagged content is blocked."""

    BLOCK_NONE = "BLOCK_NONE"
    BLOCK_ONLY_HIGH = "BLOCK_ONLY_HIGH"
    BLOCK_MEDIUM_AND_ABOVE = "BLOCK_MEDIUM_AND_ABOVE"
    BLOCK_LOW_AND_ABOVE = "BLOCK_LOW_AND_ABOVE"


@dataclass(frozen=True)
class SafetyPolicy:
    """Immutable set of (category, threshold) pairs."""

    rules: tuple[tuple[HarmCategory, BlockThreshold], ...]

    @classmethod
    def uniform(cls, threshold: BlockThreshold) -> "SafetyPolicy":
        """Apply the same threshold to every category."""
        return cls(rules=tuple((category, threshold) for category in HarmCategory))


PERMISSIVE_SAFETY_POLICY = SafetyPolicy.uniform(BlockThreshold.BLOCK_NONE)
