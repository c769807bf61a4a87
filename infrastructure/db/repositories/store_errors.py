from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from domain.exceptions import ServerFault
from infrastructure.logging.structlog_logs import logger
from infrastructure.metrics.metrics import store_failures_total


@asynccontextmanager
async def store_guard(db: AsyncSession, store: str, action: str):
    """
    Roll back and re-raise any SQLAlchemy error as ServerFault.

    Increments store_failures_total so storage trouble shows up on /metrics.
    """
    try:
        yield
    except SQLAlchemyError as e:
        store_failures_total.labels(store=store).inc()
        logger.error("store_operation_failed", store=store, action=action, error=str(e))
        try:
            await db.rollback()
        except SQLAlchemyError:
            logger.warning("store_rollback_failed", store=store, action=action)
        raise ServerFault(f"Database error while trying to {action} {store}: {e}") from e
