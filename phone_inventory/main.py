from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from phone_inventory.api.v1 import endpoints
from phone_inventory.common.logger import configure_logging, logger
from phone_inventory.db.CRUD import create_db
from phone_inventory.db.database import make_engine, make_session_factory
from phone_inventory.db.Models import phone_models as _phone_models  # модели до create_all
from phone_inventory.settings.db_settings import Settings, get_settings


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    settings = settings or get_settings()
    owns_engine = engine is None
    engine = engine or make_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting app ..... %s", create_db(engine))
        yield
        if owns_engine:
            engine.dispose()

    app = FastAPI(title="Phone Inventory API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)
    app.include_router(endpoints.router, prefix="/api")
    return app


configure_logging(level=get_settings().LOG_LEVEL, json_logs=get_settings().JSON_LOGS)
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
