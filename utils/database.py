# utils/database.py

import logging
from typing import AsyncGenerator

import asyncpg

from config import settings

pool: asyncpg.Pool | None = None

logger = logging.getLogger(__name__)


def get_pool() -> asyncpg.Pool:
    if pool is None:
        raise RuntimeError("Database pool is not initialized")
    return pool


async def get_connection() -> AsyncGenerator[asyncpg.Connection, None]:
    pool = get_pool()
    async with pool.acquire() as conn:
        yield conn


async def init_pool() -> None:
    global pool
    try:
        pool = await asyncpg.create_pool(
            host=settings.db_host,
            port=settings.db_port,
            user=settings.db_user,
            password=settings.db_password,
            database=settings.db_name,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )
    except (OSError, asyncpg.PostgresError):
        logger.error(
            "DB 연결 실패: %s:%s/%s",
            settings.db_host, settings.db_port, settings.db_name,
            exc_info=True,
        )
        raise ConnectionError("DB 연결 실패") from None
    logger.info("DB pool 생성 (min=%d, max=%d)", settings.db_pool_min_size, settings.db_pool_max_size)


async def close_pool() -> None:
    global pool
    if pool:
        await pool.close()
        pool = None
