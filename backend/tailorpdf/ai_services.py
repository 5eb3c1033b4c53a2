"""
AI Services Module for the resume PDF service
Single capability: send a system instruction and a prompt to an
OpenAI-compatible chat completions endpoint and return the text.
"""
import os
from typing import Optional
import httpx
import logging

from .errors import ServiceError

logger = logging.getLogger(__name__)


class AIService:
    """OpenAI-compatible completion client; one instance per request."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.model = model or os.getenv("OPENAI_VERSION", "gpt-3.5-turbo")
        self.base_url = (base_url or os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")).rstrip("/")
        # No timeout unless configured; the hosting environment bounds the request
        if timeout is None and os.getenv("OPENAI_TIMEOUT"):
            timeout = float(os.getenv("OPENAI_TIMEOUT"))
        self.timeout = timeout
        self.temperature = 0.7
        self.max_tokens = 4096

    async def complete(self, system: str, prompt: str) -> str:
        """Return the completion text ('' if the model sent no content). Raises ServiceError."""
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt}
            ],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers=headers,
                    json=payload
                )
        except httpx.HTTPError as e:
            logger.error(f"Completion request failed: {e}")
            raise ServiceError("Completion request failed", details=str(e)) from e

        if response.status_code != 200:
            logger.error(f"Completion API returned {response.status_code}")
            raise ServiceError("Completion API call failed",
                               details=f"{response.status_code} {response.text}")

        try:
            result = response.json()
            content = result["choices"][0]["message"].get("content")
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ServiceError("Unexpected completion response", details=str(e)) from e
        return content or ""


def get_ai_service(user_api_key: Optional[str] = None, model: Optional[str] = None) -> AIService:
    """Get AI service instance with the given API key or the configured default"""
    return AIService(api_key=user_api_key, model=model)
