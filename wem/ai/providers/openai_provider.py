from __future__ import annotations

import asyncio
import json
import logging
import os
import re
import time
from typing import Any, Optional, Sequence

from openai import AsyncOpenAI, OpenAIError

from wem.ai.config import AIConfig
from wem.ai.types import ChatMessage, ResponseFormat
from wem.core.errors import InferenceError, InferenceTimeout, MalformedResponse, RunTerminated

logger = logging.getLogger(__name__)

# Run states after which polling stops without a usable answer.
RUN_FAILURE_STATUSES = frozenset({"failed", "cancelled", "expired", "incomplete", "requires_action"})

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def parse_json_object(text: str | None) -> dict[str, Any]:
    """Parse model output that is expected to be a single JSON object."""
    raw = (text or "").strip()
    if not raw:
        raise MalformedResponse("Model returned an empty response")
    fenced = _FENCE_RE.match(raw)
    if fenced:
        raw = fenced.group(1)
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Model returned invalid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise MalformedResponse("Model returned JSON that is not an object")
    return parsed


class OpenAIProvider:
    def __init__(
        self,
        config: AIConfig,
        api_key: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
        sleep=asyncio.sleep,
        clock=time.monotonic,
    ):
        self._config = config
        self._sleep = sleep
        self._clock = clock
        if client is not None:
            self._client = client
            return

        key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
        if not key:
            raise RuntimeError("OPENAI_API_KEY is missing")

        self._client = AsyncOpenAI(
            api_key=key,
            base_url=config.base_url,
            timeout=config.timeout_s,
            max_retries=config.max_retries,
        )

    @property
    def threads_enabled(self) -> bool:
        return bool(self._config.assistant_id)

    async def aclose(self) -> None:
        await self._client.close()

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        response_format: ResponseFormat = ResponseFormat.TEXT,
    ) -> str | dict[str, Any]:
        payload = [{"role": m.role, "content": m.content} for m in messages]

        create_kwargs: dict[str, Any] = {
            "model": self._config.model,
            "messages": payload,
            "temperature": self._config.temperature,
        }
        if response_format == ResponseFormat.JSON_OBJECT:
            create_kwargs["response_format"] = {"type": "json_object"}

        started = self._clock()
        try:
            completion = await self._client.chat.completions.create(**create_kwargs)
        except OpenAIError as exc:
            raise InferenceError(f"Chat completion failed: {exc}") from exc

        content = completion.choices[0].message.content if completion.choices else None
        logger.info(
            "chat_completion model=%s format=%s latency_ms=%s chars=%s",
            self._config.model,
            response_format.value,
            int((self._clock() - started) * 1000),
            len(content or ""),
        )
        if response_format == ResponseFormat.JSON_OBJECT:
            return parse_json_object(content)

        text = (content or "").strip()
        if not text:
            raise MalformedResponse("Model returned an empty response")
        return text

    async def run_thread(self, instructions: str, prompt: str) -> dict[str, Any]:
        if not self._config.assistant_id:
            raise InferenceError("OPENAI_ASSISTANT_ID is not configured")

        try:
            thread = await self._client.beta.threads.create()
            await self._client.beta.threads.messages.create(thread.id, role="user", content=prompt)
            run = await self._client.beta.threads.runs.create(
                thread_id=thread.id,
                assistant_id=self._config.assistant_id,
                instructions=instructions,
            )
            await self._wait_for_run(thread.id, run.id)
            messages = await self._client.beta.threads.messages.list(thread.id, order="desc", limit=1)
        except OpenAIError as exc:
            raise InferenceError(f"Assistant run failed: {exc}") from exc

        if not messages.data or not messages.data[0].content:
            raise MalformedResponse("Assistant run completed without a message")
        part = messages.data[0].content[0]
        if part.type != "text":
            raise MalformedResponse("Expected text response from assistant")
        return parse_json_object(part.text.value)

    async def _wait_for_run(self, thread_id: str, run_id: str) -> None:
        deadline = self._clock() + self._config.poll_timeout_s
        for attempt in range(1, self._config.poll_max_attempts + 1):
            run = await self._client.beta.threads.runs.retrieve(run_id, thread_id=thread_id)
            if run.status == "completed":
                logger.info("assistant_run_completed run_id=%s attempts=%s", run_id, attempt)
                return
            if run.status in RUN_FAILURE_STATUSES:
                raise RunTerminated(run.status)
            if self._clock() >= deadline:
                break
            await self._sleep(self._config.poll_interval_s)

        await self._cancel_run(thread_id, run_id)
        raise InferenceTimeout(
            f"Assistant run {run_id} did not finish within "
            f"{self._config.poll_max_attempts} polls or {self._config.poll_timeout_s}s"
        )

    async def _cancel_run(self, thread_id: str, run_id: str) -> None:
        try:
            await self._client.beta.threads.runs.cancel(run_id, thread_id=thread_id)
        except OpenAIError as exc:
            logger.warning("assistant_run_cancel_failed run_id=%s: %s", run_id, exc)
