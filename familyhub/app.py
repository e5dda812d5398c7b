"""FamilyHub application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from familyhub.config import Settings
from familyhub.database import create_db_engine, init_db
from familyhub.errors import register_exception_handlers

API_PREFIX = "/api"
VERSION = "0.1.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an app bound to its own settings and database engine."""
    settings = settings or Settings()
    settings.ensure_dirs()
    settings.ensure_secrets()

    engine = create_db_engine(settings)
    init_db(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Shared calendar, todos and notes for family groups",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # --- Register API routers ---
    from familyhub.api.auth import router as auth_router
    from familyhub.api.calendar import router as calendar_router
    from familyhub.api.family import router as family_router
    from familyhub.api.notes import router as notes_router
    from familyhub.api.todos import router as todos_router
    from familyhub.api.upload import router as upload_router

    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(family_router, prefix=API_PREFIX)
    app.include_router(calendar_router, prefix=API_PREFIX)
    app.include_router(todos_router, prefix=API_PREFIX)
    app.include_router(notes_router, prefix=API_PREFIX)
    app.include_router(upload_router, prefix=API_PREFIX)

    @app.get(f"{API_PREFIX}/health")
    def health():
        return {"status": "ok", "message": f"{settings.app_name} API is running"}

    # Avatars are public; attachments are only served through the gated download route
    app.mount(
        "/uploads/avatars",
        StaticFiles(directory=str(settings.avatar_dir)),
        name="avatars",
    )

    return app
