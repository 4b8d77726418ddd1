from contextlib import asynccontextmanager
import logging

from wem.ai.factory import get_gateway
from wem.core.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    if getattr(app.state, "gateway", None) is None:
        if not settings.openai_api_key:
            raise RuntimeError("Missing OpenAI API key. Set OPENAI_API_KEY in the environment or .env file.")
        app.state.gateway = get_gateway(api_key=settings.openai_api_key)
        logger.info("inference_gateway_ready threads=%s", app.state.gateway.threads_enabled)

    yield

    close = getattr(app.state.gateway, "aclose", None)
    if close is not None:
        await close()
