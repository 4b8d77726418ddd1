import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
from starlette.exceptions import HTTPException as StarletteHTTPException
import sentry_sdk

from wem.ai.types import InferenceGateway
from wem.api.v1.insights import router as insights_router
from wem.api.v1.pages import router as pages_router
from wem.api.v1.report import router as report_router
from wem.api.v1.risk import router as risk_router
from wem.core.errors import WemError
from wem.core.rate_limit import limiter
from wem.core.config import settings
from dotenv import load_dotenv
from wem.core.lifespan import lifespan

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

logger = logging.getLogger(__name__)


async def wem_error_handler(request: Request, exc: WemError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_failed path=%s code=%s details=%s: %s", request.url.path, exc.code, exc.details, exc.message
        )
    else:
        logger.info("request_rejected path=%s code=%s details=%s", request.url.path, exc.code, exc.details)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(status_code=exc.status_code, content={"error": detail}, headers=exc.headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_invalid path=%s errors=%s", request.url.path, len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "Invalid request body"})


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_crashed path=%s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(gateway: InferenceGateway | None = None) -> FastAPI:
    app = FastAPI(
        title="WEM Risk Analyzer API",
        version="0.1.0",
        lifespan=lifespan,
        root_path=settings.root_path,
    )
    if gateway is not None:
        app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_allowed_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_exception_handler(WemError, wem_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.add_middleware(SlowAPIMiddleware)

    app.include_router(risk_router, prefix="/api", tags=["Risk"])
    app.include_router(insights_router, prefix="/api", tags=["Insights"])
    app.include_router(report_router, prefix="/api", tags=["Report"])
    app.include_router(pages_router, tags=["Pages"])
    return app


app = create_app()
