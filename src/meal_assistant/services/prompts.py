"""Prompt templates for transcription and meal analysis."""

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

TRANSCRIPTION_PROMPT = (
    "Transcreva este áudio em português. Retorne apenas o texto transcrito."
)

MEAL_JSON_FORMAT = """O formato de saída JSON deve ser:
{
  "name": "Nome da Refeição",
  "icon": "🍽️",
  "foods": [
    {
      "name": "Nome do Alimento",
      "quantity": "100g",
      "calories": 150,
      "carbohydrates": 30,
      "proteins": 5,
      "fats": 1.5
    }
  ]
}"""


def meal_from_text_prompt(text: str, created_at: datetime, timezone: str) -> str:
    """Build the nutritionist prompt for a written meal description."""
    local_time = local_time_label(created_at, timezone)
    return (
        "Você é um nutricionista. Analise a descrição da refeição de um paciente.\n"
        "\n"
        "Instruções:\n"
        "1. Dê um nome e escolha um emoji para a refeição baseado no horário "
        f"em que foi feita ({local_time}).\n"
        "2. Identifique os alimentos na descrição.\n"
        "3. Estime os valores nutricionais para cada alimento.\n"
        "4. Retorne apenas os dados em JSON, sem explicações adicionais.\n"
        "\n"
        f"Data da refeição: {iso_timestamp(created_at)}\n"
        f'Descrição da refeição: "{text}"\n'
        "\n"
        f"{MEAL_JSON_FORMAT}\n"
    )


def meal_from_image_prompt(created_at: datetime, timezone: str) -> str:
    """Build the nutritionist prompt for a meal photo."""
    local_time = local_time_label(created_at, timezone)
    return (
        "Você é um nutricionista especialista em análise de alimentos por imagem.\n"
        "\n"
        "Instruções:\n"
        "1. A imagem contém uma refeição de um paciente.\n"
        f"2. Com base no horário ({local_time}), dê um nome e um emoji "
        "para a refeição.\n"
        "3. Identifique cada alimento na imagem.\n"
        "4. Estime a quantidade e os valores nutricionais de cada um.\n"
        "5. Retorne os dados em JSON, sem texto ou explicações adicionais.\n"
        "\n"
        f"{MEAL_JSON_FORMAT}\n"
    )


def local_time_label(created_at: datetime, timezone: str) -> str:
    """Render the wall-clock time of a meal as HH:MM:SS in the given zone."""
    return _as_aware(created_at).astimezone(ZoneInfo(timezone)).strftime("%H:%M:%S")


def iso_timestamp(created_at: datetime) -> str:
    """Render a UTC ISO-8601 timestamp with milliseconds and a Z suffix."""
    utc_value = _as_aware(created_at).astimezone(UTC)
    return utc_value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _as_aware(value: datetime) -> datetime:
    # Naive timestamps are treated as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
