from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod

import httpx
from pydantic import ValidationError

from ..config import Settings, settings
from ..schemas import ExternalExtraction
from ..utils.text import strip_code_fence

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """
You are a helpful assistant that extracts structured task information from user input.
Given a prompt, return a JSON object with the following fields:
- text: the main task description (string)
- date: the date (string, e.g. 'tomorrow', 'next Thursday', '05/10/2025', or ISO format)
- time: the time (string, e.g. '3pm', '14:00', or '12:00')
- priority: one of 'High', 'Medium', or 'Low'
If a field is missing, use null.
Return only the JSON object.
"""


class ExtractionError(RuntimeError):
    """The remote extractor could not produce a usable result."""


class TaskExtractor(ABC):
    @abstractmethod
    def extract(self, text: str) -> ExternalExtraction:
        """
        Return the remote reading of `text`.
        Must raise ExtractionError for any failure (network, status, payload).
        """
        raise NotImplementedError


def parse_extraction(content: str) -> ExternalExtraction:
    """Validate raw model output. Anything but a JSON object of optional strings is rejected."""
    try:
        data = json.loads(strip_code_fence(content))
    except ValueError as exc:
        raise ExtractionError(f"Extractor did not return valid JSON: {content!r}") from exc
    if not isinstance(data, dict):
        raise ExtractionError(f"Extractor returned {type(data).__name__}, expected an object")
    try:
        return ExternalExtraction.model_validate(data, strict=True)
    except ValidationError as exc:
        raise ExtractionError(f"Extractor payload has the wrong shape: {exc}") from exc


class OpenRouterExtractor(TaskExtractor):
    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str,
        model: str,
        timeout: float = 10.0,
        referer: str | None = None,
        title: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        if not api_key:
            raise ValueError("OpenRouter API key is missing")
        self.api_key = api_key
        self.endpoint = endpoint
        self.model = model
        self.timeout = timeout
        self.referer = referer
        self.title = title
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        if self.title:
            headers["X-Title"] = self.title
        return headers

    def extract(self, text: str) -> ExternalExtraction:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": text},
            ],
            "max_tokens": 256,
            "temperature": 0.2,
        }

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                r = client.post(self.endpoint, headers=self._headers(), json=payload)
                r.raise_for_status()
                data = r.json()
        except httpx.HTTPError as exc:
            raise ExtractionError(f"OpenRouter request failed: {exc}") from exc
        except ValueError as exc:
            raise ExtractionError("OpenRouter response body is not JSON") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ExtractionError("OpenRouter response has no message content") from exc
        if not isinstance(content, str):
            raise ExtractionError("OpenRouter message content is not text")

        extraction = parse_extraction(content)
        logger.info("OpenRouter returned: %s", extraction.model_dump())
        return extraction


def build_extractor(config: Settings) -> TaskExtractor | None:
    """Remote extractor from settings, or None when no API key is configured."""
    if not config.openrouter_api_key:
        logger.debug("OPENROUTER_API_KEY not set; quick-add uses the local parser only")
        return None
    return OpenRouterExtractor(
        config.openrouter_api_key,
        endpoint=config.openrouter_endpoint,
        model=config.openrouter_model,
        timeout=config.extraction_timeout,
        referer=config.openrouter_referer,
        title=config.openrouter_title,
    )


def get_extractor() -> TaskExtractor | None:
    """FastAPI dependency; tests override it with a fake."""
    return build_extractor(settings)
