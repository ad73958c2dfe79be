"""OpenAI Responses API client for text completions."""

from dataclasses import dataclass

import httpx
from openai import APIError, AsyncOpenAI

from calorie_coach.domain.errors import TransportError
from calorie_coach.services.analysis import CompletionClient


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    store: bool = False

    @classmethod
    def create(cls, api_key: str, store: bool = False) -> "OpenAICompletionClient":
        """Create an OpenAI completion client."""
        return cls(client=AsyncOpenAI(api_key=api_key), store=store)

    async def generate(self, *, model: str, prompt: str) -> str:
        """Send the prompt and return the model's raw output text."""
        try:
            response = await self.client.responses.create(
                model=model,
                input=prompt,
                store=self.store,
            )
        except (APIError, httpx.HTTPError) as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
