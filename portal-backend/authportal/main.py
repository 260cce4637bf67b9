# authportal/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from authportal.api.api import build_api_router
from authportal.api.routes_auth import validation_exception_handler
from authportal.api.routes_form import STATIC_DIR, router as form_router
from authportal.core.config import Settings, get_settings
from authportal.db.init_db import init_db
from authportal.db.session import build_engine, build_session_factory

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        init_db(app.state.engine)
    except SQLAlchemyError:
        logger.exception("Database initialization failed. Check DATABASE_URL.")
    yield
    app.state.engine.dispose()


def create_application(
    api_router: Optional[APIRouter] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    api_router = api_router or build_api_router()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- STATE ----------
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # ---------- STATIC FILES ----------
    # Credential form script and page
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    # ---------- ROUTERS ----------
    app.include_router(form_router)
    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/healthz", tags=["health"])
    def healthz():
        return {"status": "ok"}

    return app


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_application(build_api_router(), settings)

    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
