"""Tests for the HTTP API."""

import logging

from fastapi.testclient import TestClient

from meal_assistant.api.app import create_app
from tests.conftest import FakeImageFetcher


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_transcription_endpoint(container, generative_client) -> None:
    generative_client.reply = "Almocei arroz e feijão."
    client = TestClient(create_app(container))

    response = client.post(
        "/transcriptions",
        content=b"m4a-bytes",
        headers={"Content-Type": "audio/m4a"},
    )

    assert response.status_code == 200
    assert response.json() == {"text": "Almocei arroz e feijão."}


def test_transcription_endpoint_rejects_empty_body(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/transcriptions", content=b"")

    assert response.status_code == 422


def test_transcription_endpoint_maps_empty_model_output(
    container, generative_client
) -> None:
    generative_client.reply = ""
    client = TestClient(create_app(container))

    response = client.post("/transcriptions", content=b"m4a-bytes")

    assert response.status_code == 502
    assert response.json()["detail"] == "Falha ao transcrever o áudio."


def test_meal_from_text_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/from-text",
        json={"text": "2 eggs and toast", "created_at": "2024-05-10T11:00:00Z"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Café da manhã"
    assert len(data["foods"]) == 2
    assert data["foods"][0]["calories"] == 156


def test_meal_from_text_endpoint_maps_malformed_json(
    container, generative_client
) -> None:
    generative_client.reply = "{oops"
    client = TestClient(create_app(container))

    response = client.post("/meals/from-text", json={"text": "salad"})

    assert response.status_code == 502
    assert response.json()["detail"] == "Model returned malformed JSON"


def test_meal_from_image_endpoint(container, image_fetcher) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/from-image", json={"image_url": "https://images.test/meal.jpg"}
    )

    assert response.status_code == 200
    assert response.json()["icon"] == "🍳"
    assert image_fetcher.urls == ["https://images.test/meal.jpg"]


def test_meal_from_image_endpoint_maps_fetch_failure(container) -> None:
    container.meal_assistant_service.image_fetcher = FakeImageFetcher(fail=True)
    client = TestClient(create_app(container))

    response = client.post(
        "/meals/from-image", json={"image_url": "https://unreachable.test/x.jpg"}
    )

    assert response.status_code == 422
    assert response.json()["image_url"] == "https://unreachable.test/x.jpg"


def test_app_uses_configured_log_level(container) -> None:
    container.settings.log_level = "WARNING"

    create_app(container)

    assert logging.getLogger("meal_assistant").level == logging.WARNING
    logging.getLogger("meal_assistant").setLevel(logging.INFO)


def test_shutdown_closes_resources(container) -> None:
    closed: list[bool] = []

    async def close_resources() -> None:
        closed.append(True)

    container.close_resources = close_resources

    with TestClient(create_app(container)) as client:
        assert client.get("/health").status_code == 200
        assert closed == []

    assert closed == [True]
