"""OpenAI adapter: implements the GenerationTransport port."""

from __future__ import annotations

import logging

import httpx
from openai import APIStatusError, AsyncOpenAI, OpenAIError

from readme_synth.domain.entities import AttemptOutcome, GenerationRequest
from readme_synth.domain.value_objects import Credential

logger = logging.getLogger(__name__)

_AUTH_STATUSES = frozenset({401, 403})


class OpenAIAdapter:
    """Concrete ``GenerationTransport`` backed by the OpenAI chat-completions API.

    One ``AsyncOpenAI`` client is kept per credential.  SDK retries are
    disabled so each credential gets exactly one attempt per call.
    """

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        *,
        base_url: str | None = None,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._model = model
        self._base_url = base_url
        self._timeout = timeout
        self._http_client = http_client
        self._clients: dict[str, AsyncOpenAI] = {}

    def _client_for(self, credential: Credential) -> AsyncOpenAI:
        client = self._clients.get(credential.secret)
        if client is None:
            client = AsyncOpenAI(
                api_key=credential.secret,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,
                http_client=self._http_client,
            )
            self._clients[credential.secret] = client
        return client

    async def attempt(
        self, credential: Credential, request: GenerationRequest
    ) -> AttemptOutcome:
        """Send one single-turn prompt and classify the result."""
        kwargs: dict[str, object] = {
            "model": self._model,
            "messages": [{"role": "user", "content": request.prompt}],
            "max_tokens": request.max_tokens,
        }
        if request.temperature is not None:
            kwargs["temperature"] = request.temperature

        try:
            response = await self._client_for(credential).chat.completions.create(**kwargs)  # type: ignore[call-overload]
        except APIStatusError as exc:
            if exc.status_code in _AUTH_STATUSES:
                return AttemptOutcome.auth_failure(exc)
            logger.error("OpenAI returned HTTP %d: %s", exc.status_code, exc.message)
            return AttemptOutcome.fatal(exc)
        except OpenAIError as exc:
            logger.error("OpenAI request failed: %s", exc)
            return AttemptOutcome.fatal(exc)

        if not response.choices:
            return AttemptOutcome.success("")
        return AttemptOutcome.success(response.choices[0].message.content)

    async def close(self) -> None:
        """Release underlying HTTP resources."""
        for client in self._clients.values():
            await client.close()
        self._clients.clear()
