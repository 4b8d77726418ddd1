from fastapi import Request

from wem.ai.types import InferenceGateway


def get_gateway(request: Request) -> InferenceGateway:
    gateway = getattr(request.app.state, "gateway", None)
    if gateway is None:
        raise RuntimeError("Inference gateway is not initialised")
    return gateway
