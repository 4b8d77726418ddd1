from dataclasses import dataclass

from wem.core.config import _get_env, _get_env_float, _get_env_int


@dataclass(frozen=True)
class AIConfig:
    provider: str
    model: str
    temperature: float = 0.7
    base_url: str | None = None
    timeout_s: float = 30.0
    max_retries: int = 2
    assistant_id: str | None = None
    poll_interval_s: float = 1.0
    poll_max_attempts: int = 60
    poll_timeout_s: float = 90.0


def load_ai_config() -> AIConfig:
    provider = (_get_env("AI_PROVIDER", "openai") or "openai").strip().lower()
    model = (_get_env("AI_MODEL", "gpt-4o-mini") or "gpt-4o-mini").strip()
    return AIConfig(
        provider=provider,
        model=model,
        temperature=_get_env_float("AI_TEMPERATURE", 0.7),
        base_url=(_get_env("OPENAI_BASE_URL") or "").strip() or None,
        timeout_s=_get_env_float("OPENAI_TIMEOUT_S", 30.0),
        max_retries=_get_env_int("OPENAI_MAX_RETRIES", 2),
        assistant_id=(_get_env("OPENAI_ASSISTANT_ID") or "").strip() or None,
        poll_interval_s=_get_env_float("POLL_INTERVAL_S", 1.0),
        poll_max_attempts=max(1, _get_env_int("POLL_MAX_ATTEMPTS", 60)),
        poll_timeout_s=_get_env_float("POLL_TIMEOUT_S", 90.0),
    )
