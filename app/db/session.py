from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings


class DBSessionManager:

    def __init__(self, database_url: str | None = None) -> None:
        url = database_url or settings.database.database_url
        engine_kwargs = {"future": True, "pool_pre_ping": settings.database.pool_pre_ping}
        if url.startswith("sqlite"):
            # SQLite sessions are shared with the notifier's worker threads
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs.update(
                pool_size=settings.database.pool_size,
                max_overflow=settings.database.max_overflow,
                pool_timeout=settings.database.pool_timeout,
                pool_recycle=settings.database.pool_recycle,
            )
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            expire_on_commit=False,
        )

    def get_session(self) -> Generator[Session, None, None]:
        session: Session = self.SessionLocal()
        try:
            yield session
        finally:
            session.close()

    def create_all(self) -> None:
        # Import models so every table is registered on the metadata
        import app.models  # noqa: F401
        from app.db.base import Base

        Base.metadata.create_all(bind=self.engine)


db_manager = DBSessionManager()


def get_db() -> Generator[Session, None, None]:
    yield from db_manager.get_session()
