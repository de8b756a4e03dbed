from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.core.config import Settings, get_settings
from app.core.gate import AccessGate
from app.core.logger import logger, setup_logging
from app.middleware.access_gate import AccessGateMiddleware
from app.routers import auth


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.LOG_LEVEL)
        logger.info(f"APP START | env={settings.ENV}")
        yield

    app = FastAPI(
        title="Startup Investor Match",
        version="1.0.0",
        lifespan=lifespan
    )
    app.dependency_overrides[get_settings] = lambda: settings

    gate = AccessGate(
        secret=settings.JWT_SECRET,
        algorithms=settings.JWT_ALGORITHMS
    )
    app.add_middleware(
        AccessGateMiddleware,
        gate=gate,
        cookie_name=settings.TOKEN_COOKIE_NAME,
        login_path=settings.LOGIN_PATH
    )

    app.include_router(auth.router)
    return app
