from __future__ import annotations

import logging
from typing import Any, Optional, Protocol

import openai
from openai import OpenAI

logger = logging.getLogger(__name__)


class InferenceRequestError(Exception):
    """The inference endpoint could not produce a completion."""

    def __init__(self, status: Optional[int], message: str = "") -> None:
        super().__init__(message or f"inference request failed with status {status}")
        self.status = status


class InferenceClient(Protocol):
    def complete(self, turns: list[dict[str, str]]) -> str:
        ...


class OpenAIInferenceClient:
    """Chat completions against an OpenAI-compatible endpoint (e.g. a hosted Phi-4 deployment)."""

    def __init__(
        self,
        endpoint: str,
        api_key: str,
        model: str,
        client: Optional[Any] = None,
    ) -> None:
        self.model = model
        self._client = client or OpenAI(
            base_url=endpoint,
            api_key=api_key,
            default_headers={"api-key": api_key},
            max_retries=0,
        )

    def complete(self, turns: list[dict[str, str]]) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=turns,
            )
        except openai.APIStatusError as exc:
            raise InferenceRequestError(exc.status_code, exc.message) from exc
        except openai.APIConnectionError as exc:
            raise InferenceRequestError(None, exc.message) from exc
        except openai.APIError as exc:
            raise InferenceRequestError(getattr(exc, "status_code", None), exc.message) from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
