"""Food analysis through a text completion model."""

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Protocol

from calorie_coach.domain.errors import ParseError
from calorie_coach.domain.foods import (
    DEFAULT_CATEGORY,
    FOOD_CATEGORIES,
    FoodAnalysisResult,
)

NO_REASONING = "No reasoning provided."
FALLBACK_REASONING = (
    "The AI model could not produce a valid nutritional estimate for this food. "
    "Please try again or rephrase your description."
)

_JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)
_NUMERIC_FIELDS = ("calories", "protein", "carbs", "fat")

_logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Interface for a single-shot text completion call."""

    async def generate(self, *, model: str, prompt: str) -> str:
        """Return the raw text produced for the prompt."""


@dataclass
class FoodAnalysisService:
    """Build analysis prompts and turn model output into safe results."""

    client: CompletionClient
    model: str

    async def analyze(self, query: str) -> FoodAnalysisResult:
        """Estimate nutrition for a dish or ingredient list.

        Unusable model output degrades to a fallback result. Failures of the
        completion call itself surface as ``TransportError``.
        """
        text = await self.client.generate(model=self.model, prompt=build_prompt(query))
        try:
            payload = parse_response(text)
        except ParseError as exc:
            _logger.warning("Food analysis fallback for %r: %s", query, exc)
            return fallback_result(query)
        return sanitize_result(payload, query)


def build_prompt(query: str) -> str:
    """Return the analysis prompt for a food description."""
    return (
        f"Analyze the nutritional content of {query}. "
        "Provide the following information:\n"
        "1. Estimated calories per 100g\n"
        "2. Protein content in grams per 100g\n"
        "3. Carbohydrate content in grams per 100g\n"
        "4. Fat content in grams per 100g\n"
        "5. Categorize this food as 'cutting' (low calorie and high protein, "
        "good for weight loss), 'bulking' (calorie dense and high protein, "
        "good for muscle gain), or 'general' (balanced nutrition)\n"
        "6. Brief reasoning for the category assignment\n\n"
        "Respond with a single JSON object using exactly this structure:\n"
        "{\n"
        f'  "name": {json.dumps(query)},\n'
        '  "calories": number,\n'
        '  "protein": number,\n'
        '  "carbs": number,\n'
        '  "fat": number,\n'
        '  "category": "cutting" or "bulking" or "general",\n'
        '  "reasoning": "brief explanation"\n'
        "}\n\n"
        "Only return the JSON object. Do not add any other text, "
        "explanations, or markdown code fences."
    )


def parse_response(text: str) -> dict[str, object]:
    """Read a JSON object from model output, tolerating surrounding prose."""
    try:
        payload = json.loads(text)
    except ValueError:
        match = _JSON_OBJECT_PATTERN.search(text)
        if match is None:
            raise ParseError("no JSON object in model output") from None
        try:
            payload = json.loads(match.group(0))
        except ValueError as exc:
            raise ParseError(f"invalid JSON object: {exc}") from exc
    if not isinstance(payload, dict) or not payload:
        raise ParseError("model output is not a non-empty JSON object")
    return payload


def sanitize_result(payload: dict[str, object], query: str) -> FoodAnalysisResult:
    """Coerce each field of an untrusted payload into a valid result."""
    name = payload.get("name")
    reasoning = payload.get("reasoning")
    numbers = {field: _coerce_number(payload.get(field)) for field in _NUMERIC_FIELDS}
    return FoodAnalysisResult(
        name=name.strip() if isinstance(name, str) and name.strip() else query,
        category=_coerce_category(payload.get("category")),
        reasoning=(
            reasoning.strip()
            if isinstance(reasoning, str) and reasoning.strip()
            else NO_REASONING
        ),
        **numbers,
    )


def fallback_result(query: str) -> FoodAnalysisResult:
    """Return the degraded result used when model output is unusable."""
    return FoodAnalysisResult(
        name=query,
        calories=0,
        protein=0,
        carbs=0,
        fat=0,
        category=DEFAULT_CATEGORY,
        reasoning=FALLBACK_REASONING,
        fallback=True,
    )


def _coerce_number(value: object) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _coerce_category(value: object) -> str:
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in FOOD_CATEGORIES:
            return normalized
    return DEFAULT_CATEGORY
