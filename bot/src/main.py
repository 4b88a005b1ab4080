import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from api.health import router as health_router
from api.rooms import router as rooms_router
from config import settings
from core.database import engine
from models import Base

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # Validate LLM config at startup — fail fast if misconfigured
    from llm import create_llm_provider

    provider = create_llm_provider(settings)
    base_url = f" via {settings.LLM_BASE_URL}" if settings.LLM_BASE_URL else ""
    logger.info(
        "LLM ready: provider=%s model=%s%s assistant=%s window=%d",
        settings.LLM_PROVIDER,
        provider.model,
        base_url,
        settings.ASSISTANT_NAME,
        settings.HISTORY_WINDOW_SIZE,
    )

    yield
    await engine.dispose()


app = FastAPI(title="roomchat", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "X-Api-Secret"],
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response


app.add_middleware(SecurityHeadersMiddleware)

app.include_router(health_router)
app.include_router(rooms_router)
