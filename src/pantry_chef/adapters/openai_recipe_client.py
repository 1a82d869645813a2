"""OpenAI Responses API client for recipe generation."""

import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from pantry_chef.services.generation import RecipeClient


@dataclass
class OpenAIRecipeClient(RecipeClient):
    """Recipe client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout_seconds: float = 60) -> "OpenAIRecipeClient":
        """Create an OpenAI recipe client with a managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(client=AsyncOpenAI(api_key=api_key, http_client=http_client))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        instructions: str,
        prompt: str,
        schema: dict[str, object],
    ) -> object:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": model,
            "instructions": instructions,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "recipe_batch",
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(_strip_code_fences(output_text))

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fences the model sometimes wraps JSON in."""
    return text.replace("```json", "").replace("```", "").strip()
