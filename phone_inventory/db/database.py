from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from starlette.requests import Request

from phone_inventory.settings.db_settings import Settings, get_settings

Base = declarative_base()


def make_engine(settings: Optional[Settings] = None) -> Engine:
    settings = settings or get_settings()
    connect_args = {}
    if settings.SYNC_DATABASE_URL.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(
        settings.SYNC_DATABASE_URL,
        pool_pre_ping=True,
        future=True,
        connect_args=connect_args,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
