"""Remote image download client."""

import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from meal_assistant.errors import ImageFetchError

_logger = logging.getLogger(__name__)


class ImageFetcher(Protocol):
    """Interface for downloading meal images."""

    async def fetch(self, url: str) -> bytes:
        """Download an image and return its bytes."""


@dataclass
class HttpxImageFetcher(ImageFetcher):
    """Image fetcher using httpx."""

    http_client: httpx.AsyncClient
    timeout_seconds: float = 20

    @classmethod
    def create(cls, timeout_seconds: float = 20) -> "HttpxImageFetcher":
        """Create an image fetcher with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(follow_redirects=True),
            timeout_seconds=timeout_seconds,
        )

    async def fetch(self, url: str) -> bytes:
        """Download the image at url into memory."""
        try:
            response = await self.http_client.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            _logger.warning("Image download failed: url=%s error=%s", url, exc)
            raise ImageFetchError(f"Failed to download image: {exc}", url) from exc
        if not response.content:
            raise ImageFetchError("Downloaded image is empty", url)
        return response.content

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
