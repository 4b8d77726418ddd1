from typing import Optional

from wem.ai.config import load_ai_config
from wem.ai.types import InferenceGateway

from wem.ai.providers.openai_provider import OpenAIProvider


def get_gateway(api_key: Optional[str] = None) -> InferenceGateway:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(config=cfg, api_key=api_key)

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
