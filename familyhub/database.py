"""Database connection and initialization."""

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from familyhub.config import Settings

# Import all models so SQLModel registers them
import familyhub.models  # noqa: F401


def create_db_engine(settings: Settings) -> Engine:
    """Create an engine for the configured SQLite file.

    Foreign keys are a per-connection setting in SQLite, so they are switched
    on for every new connection; the cascades on families and notes rely on it.
    """
    engine = create_engine(
        f"sqlite:///{settings.db_path}",
        echo=settings.debug,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_conn, _record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA synchronous=NORMAL")
        cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """Create all tables and enable WAL mode."""
    SQLModel.metadata.create_all(engine)

    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA journal_mode=WAL")
        conn.commit()


def get_session(request: Request):
    """FastAPI dependency: yields a session bound to the app's engine."""
    with Session(request.app.state.engine) as session:
        yield session
