# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

from schedulify.api.endpoints import analyze, health, schedules  # noqa: E402
from schedulify.core.config import Settings, settings as default_settings  # noqa: E402
from schedulify.core.errors import register_error_handlers  # noqa: E402
from schedulify.db.session_store import SessionStore  # noqa: E402
from schedulify.services.generator import (  # noqa: E402
    GeminiScheduleGenerator,
    ScheduleGenerator,
)

log = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    settings: Optional[Settings] = None,
    generator: Optional[ScheduleGenerator] = None,
    session_store: Optional[SessionStore] = None,
) -> FastAPI:
    settings = settings or default_settings

    # [Lifecycle] startup checks; nothing here can stop the server
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.uses_default_session_secret:
            log.warning(
                "SESSION_SECRET is not set; session cookies are signed with the insecure "
                "default key. Set it before deploying."
            )
        if not app.state.schedule_generator.configured:
            log.warning("GEMINI_API_KEY is not set; /analyze-task will fail until it is.")
        log.info("%s running in %s mode", settings.APP_NAME, settings.ENVIRONMENT)
        yield
        purged = app.state.session_store.purge_expired()
        log.info("Shutting down, dropped %d expired sessions", purged)

    app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
    app.state.settings = settings
    if session_store is None:
        session_store = SessionStore(max_age=settings.SESSION_MAX_AGE)
    if generator is None:
        generator = GeminiScheduleGenerator(settings)
    app.state.session_store = session_store
    app.state.schedule_generator = generator

    # --- Middleware ---

    # 1. CORS: the landing page may be served from another origin during development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 2. Session: signed cookie carrying the server-side session id
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SESSION_SECRET,
        https_only=settings.is_production,
        same_site="lax",
        path="/",
        max_age=settings.SESSION_MAX_AGE,
    )

    register_error_handlers(app)

    static_dir = settings.STATIC_DIR
    if static_dir.exists():
        app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

    @app.get("/", include_in_schema=False)
    async def landing_page():
        index = static_dir / "index.html"
        if not index.exists():
            raise HTTPException(status_code=404, detail="Landing page not found")
        return FileResponse(index)

    app.include_router(schedules.router)
    app.include_router(analyze.router)
    app.include_router(health.router)
    return app


configure_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
