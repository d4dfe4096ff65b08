import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.api.v1 import api_router
from app.core.db_check import wait_for_db
from app.core.logging import setup_logging
from app.db.session import Base, engine
from app import models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    await wait_for_db()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Splito is live")
    yield
    await engine.dispose()


app = FastAPI(title="Splito Occasions Backend", lifespan=lifespan)

@app.get("/")
async def root():
    return {"message": "Splito Occasions Backend is live"}

app.include_router(api_router, prefix="/api/v1")
