import asyncio
import logging
from sqlalchemy import text
from app.core.config import settings
from app.db.session import engine

logger = logging.getLogger(__name__)


async def wait_for_db(retries: int | None = None, delay: float = 2):
    if retries is None:
        retries = settings.DB_CONNECT_RETRIES

    for i in range(retries):
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            logger.info("Database connected")
            return
        except Exception as e:
            logger.warning("Database not ready | [ %d/%d ] %s → retrying...", i + 1, retries, e)
            await asyncio.sleep(delay)

    raise RuntimeError("Database unreachable after retries")
