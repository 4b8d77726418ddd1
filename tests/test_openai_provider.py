import itertools
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from openai import OpenAIError

from wem.ai.config import AIConfig, load_ai_config
from wem.ai.providers.openai_provider import OpenAIProvider, parse_json_object
from wem.ai.types import ChatMessage, ResponseFormat
from wem.core.errors import InferenceError, InferenceTimeout, MalformedResponse, RunTerminated

MESSAGES = [ChatMessage(role="system", content="sys"), ChatMessage(role="user", content="hi")]


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def _text_message(value, kind="text"):
    part = SimpleNamespace(type=kind, text=SimpleNamespace(value=value))
    return SimpleNamespace(data=[SimpleNamespace(content=[part])])


def _fake_client(completion=None, statuses=None, reply='{"analysis": "ok"}'):
    runs = SimpleNamespace(
        create=AsyncMock(return_value=SimpleNamespace(id="run_1")),
        retrieve=AsyncMock(side_effect=[SimpleNamespace(status=s) for s in statuses] if statuses else None),
        cancel=AsyncMock(),
    )
    messages = SimpleNamespace(create=AsyncMock(), list=AsyncMock(return_value=_text_message(reply)))
    threads = SimpleNamespace(
        create=AsyncMock(return_value=SimpleNamespace(id="thread_1")),
        messages=messages,
        runs=runs,
    )
    chat = SimpleNamespace(completions=SimpleNamespace(create=AsyncMock(return_value=completion)))
    return SimpleNamespace(chat=chat, beta=SimpleNamespace(threads=threads), close=AsyncMock())


def _provider(client, **config):
    cfg = AIConfig(provider="openai", model="gpt-4o-mini", assistant_id="asst_test", **config)
    return OpenAIProvider(cfg, client=client, sleep=AsyncMock(), clock=lambda: 0.0)


class AIConfigTests(unittest.TestCase):
    def test_malformed_numbers_fall_back_to_defaults(self):
        env = {
            "AI_TEMPERATURE": "warm",
            "OPENAI_TIMEOUT_S": "",
            "OPENAI_MAX_RETRIES": "two",
            "POLL_MAX_ATTEMPTS": "sixty",
            "POLL_TIMEOUT_S": "1.5m",
        }
        with patch.dict("os.environ", env):
            cfg = load_ai_config()

        self.assertEqual(cfg.temperature, 0.7)
        self.assertEqual(cfg.timeout_s, 30.0)
        self.assertEqual(cfg.max_retries, 2)
        self.assertEqual(cfg.poll_max_attempts, 60)
        self.assertEqual(cfg.poll_timeout_s, 90.0)

    def test_polling_bounds_are_read_from_environment(self):
        env = {"POLL_MAX_ATTEMPTS": "5", "POLL_TIMEOUT_S": "12", "OPENAI_ASSISTANT_ID": " asst_1 "}
        with patch.dict("os.environ", env):
            cfg = load_ai_config()

        self.assertEqual(cfg.poll_max_attempts, 5)
        self.assertEqual(cfg.poll_timeout_s, 12.0)
        self.assertEqual(cfg.assistant_id, "asst_1")


class ParseJsonObjectTests(unittest.TestCase):
    def test_accepts_fenced_json(self):
        self.assertEqual(parse_json_object('```json\n{"a": 1}\n```'), {"a": 1})

    def test_rejects_non_objects_and_garbage(self):
        for raw in ("", "   ", "not json", "[1, 2]", None):
            with self.assertRaises(MalformedResponse):
                parse_json_object(raw)


class SingleTurnTests(unittest.IsolatedAsyncioTestCase):
    async def test_json_mode_requests_json_object_and_parses(self):
        client = _fake_client(completion=_completion('{"riskScore": 72}'))
        result = await _provider(client).complete(MESSAGES, ResponseFormat.JSON_OBJECT)

        self.assertEqual(result, {"riskScore": 72})
        kwargs = client.chat.completions.create.await_args.kwargs
        self.assertEqual(kwargs["response_format"], {"type": "json_object"})
        self.assertEqual(kwargs["messages"][1], {"role": "user", "content": "hi"})

    async def test_text_mode_returns_stripped_text(self):
        client = _fake_client(completion=_completion("  Insight text \n"))
        result = await _provider(client).complete(MESSAGES)

        self.assertEqual(result, "Insight text")
        self.assertNotIn("response_format", client.chat.completions.create.await_args.kwargs)

    async def test_unparseable_json_is_malformed(self):
        client = _fake_client(completion=_completion("The score is 72"))
        with self.assertRaises(MalformedResponse):
            await _provider(client).complete(MESSAGES, ResponseFormat.JSON_OBJECT)

    async def test_sdk_errors_become_inference_errors(self):
        client = _fake_client()
        client.chat.completions.create.side_effect = OpenAIError("connection reset")
        with self.assertRaises(InferenceError):
            await _provider(client).complete(MESSAGES)

    def test_missing_key_fails_fast(self):
        cfg = AIConfig(provider="openai", model="gpt-4o-mini")
        with patch.dict("os.environ", {"OPENAI_API_KEY": ""}):
            with self.assertRaises(RuntimeError):
                OpenAIProvider(cfg)


class ThreadedRunTests(unittest.IsolatedAsyncioTestCase):
    async def test_polls_until_completed(self):
        client = _fake_client(statuses=["queued", "in_progress", "completed"])
        provider = _provider(client)

        result = await provider.run_thread("be a coach", "prompt text")

        self.assertEqual(result, {"analysis": "ok"})
        self.assertEqual(client.beta.threads.runs.retrieve.await_count, 3)
        self.assertEqual(provider._sleep.await_count, 2)
        provider._sleep.assert_awaited_with(1.0)
        run_kwargs = client.beta.threads.runs.create.await_args.kwargs
        self.assertEqual(run_kwargs["assistant_id"], "asst_test")
        self.assertEqual(run_kwargs["instructions"], "be a coach")

    async def test_failed_run_terminates(self):
        client = _fake_client(statuses=["in_progress", "failed"])
        with self.assertRaises(RunTerminated) as ctx:
            await _provider(client).run_thread("x", "y")
        self.assertEqual(ctx.exception.status, "failed")
        client.beta.threads.messages.list.assert_not_awaited()

    async def test_attempt_bound_raises_timeout_and_cancels(self):
        client = _fake_client()
        client.beta.threads.runs.retrieve.return_value = SimpleNamespace(status="in_progress")

        with self.assertRaises(InferenceTimeout):
            await _provider(client, poll_max_attempts=3).run_thread("x", "y")

        self.assertEqual(client.beta.threads.runs.retrieve.await_count, 3)
        client.beta.threads.runs.cancel.assert_awaited_once()

    async def test_time_budget_raises_timeout(self):
        client = _fake_client()
        client.beta.threads.runs.retrieve.return_value = SimpleNamespace(status="in_progress")
        ticks = itertools.count(0, 3)
        cfg = AIConfig(provider="openai", model="m", assistant_id="asst_test", poll_timeout_s=5)
        provider = OpenAIProvider(cfg, client=client, sleep=AsyncMock(), clock=lambda: next(ticks))

        with self.assertRaises(InferenceTimeout):
            await provider.run_thread("x", "y")
        self.assertEqual(client.beta.threads.runs.retrieve.await_count, 2)

    async def test_non_text_reply_is_malformed(self):
        client = _fake_client(statuses=["completed"])
        client.beta.threads.messages.list.return_value = _text_message("", kind="image_file")
        with self.assertRaises(MalformedResponse):
            await _provider(client).run_thread("x", "y")

    async def test_threads_disabled_without_assistant(self):
        cfg = AIConfig(provider="openai", model="m")
        provider = OpenAIProvider(cfg, client=_fake_client())
        self.assertFalse(provider.threads_enabled)
        with self.assertRaises(InferenceError):
            await provider.run_thread("x", "y")


if __name__ == "__main__":
    unittest.main()
