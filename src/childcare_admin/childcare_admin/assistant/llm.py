from __future__ import annotations

import logging
from typing import Optional, Protocol

from openai import OpenAI

log = logging.getLogger(__name__)


class ChatModel(Protocol):
    def reply(self, *, system: str, message: str) -> str:
        raise NotImplementedError


class OpenAIChatModel(ChatModel):
    """Chat completion through the OpenAI API.

    The client is built on first use so the app starts without a key; a call
    without ``OPENAI_API_KEY`` fails instead.
    """

    def __init__(self, *, api_key: Optional[str], model: str, max_tokens: int = 1000):
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._client: Optional[OpenAI] = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise RuntimeError("Missing OpenAI API key (set OPENAI_API_KEY).")
            self._client = OpenAI(api_key=self._api_key)
        return self._client

    def reply(self, *, system: str, message: str) -> str:
        response = self._get_client().chat.completions.create(
            model=self._model,
            max_tokens=self._max_tokens,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": message},
            ],
        )
        return (response.choices[0].message.content or "").strip()
