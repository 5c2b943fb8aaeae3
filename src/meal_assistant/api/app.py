"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from meal_assistant.api.models import (
    MealImagePayload,
    MealTextPayload,
    TranscriptionResponse,
)
from meal_assistant.app_logging import configure_logging
from meal_assistant.containers import AppContainer
from meal_assistant.domain.meals import MealDetails
from meal_assistant.errors import (
    EmptyResponseError,
    ImageFetchError,
    InvalidMealResponseError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(ImageFetchError)
    async def image_fetch_failed(
        request: Request, exc: ImageFetchError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "image_url": exc.url},
        )

    @app.exception_handler(EmptyResponseError)
    async def empty_model_response(
        request: Request, exc: EmptyResponseError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": _format_error(request, exc)},
        )

    @app.exception_handler(InvalidMealResponseError)
    async def invalid_model_response(
        request: Request, exc: InvalidMealResponseError
    ) -> JSONResponse:
        logger.warning("Rejected model output: %s", exc.raw[:500])
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": _format_error(request, exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/transcriptions")
    async def transcribe(request: Request) -> TranscriptionResponse:
        """Transcribe an uploaded audio body."""
        state_container: AppContainer = request.app.state.container
        audio = await request.body()
        if not audio:
            raise HTTPException(
                status_code=422,
                detail="Audio body is empty",
            )
        text = await state_container.meal_assistant_service.transcribe_audio(audio)
        return TranscriptionResponse(text=text)

    @app.post("/meals/from-text")
    async def meal_from_text(payload: MealTextPayload, request: Request) -> MealDetails:
        """Analyse a written meal description."""
        state_container: AppContainer = request.app.state.container
        return await state_container.meal_assistant_service.get_meal_details_from_text(
            text=payload.text, created_at=payload.created_at
        )

    @app.post("/meals/from-image")
    async def meal_from_image(
        payload: MealImagePayload, request: Request
    ) -> MealDetails:
        """Analyse a meal photo by URL."""
        state_container: AppContainer = request.app.state.container
        service = state_container.meal_assistant_service
        return await service.get_meal_details_from_image(
            image_url=payload.image_url, created_at=payload.created_at
        )

    return app


def _format_error(request: Request, exc: Exception) -> str:
    """Return a client-facing error message with local debug info."""
    state_container: AppContainer = request.app.state.container
    if state_container.settings.environment == "local" and exc.__cause__:
        return f"{exc} (debug: {type(exc.__cause__).__name__}: {exc.__cause__})"
    return str(exc)
