# storefront/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI
import uvicorn

from storefront.api import ROUTERS
from storefront.api.errors import register_error_handlers
from storefront.data.database import Database
from storefront.utils.settings import DATABASE_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(database: Database | None = None) -> FastAPI:
    database = database or Database(DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Initializing database...")
        if database.connect():
            database.create_all()
        else:
            # start bez bazy: odczyty zwracaja puste wyniki, zapisy 503
            logger.warning("Starting without database, reads degrade to empty results")
        yield
        database.dispose()

    app = FastAPI(
        title="Storefront API",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    register_error_handlers(app)
    for router in ROUTERS:
        app.include_router(router)

    return app


if __name__ == "__main__":
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
