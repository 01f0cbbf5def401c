# app/core/lifespan.py
from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from app.db.cassandra import CassandraGateway
from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # --- Startup ---
    # Cassandra is mandatory: no gateway, no service
    try:
        gateway = await CassandraGateway.connect(settings)
    except Exception:
        logger.exception("Cassandra connection failed")
        raise
    app.state.gateway = gateway

    # Application runs
    try:
        yield
    finally:
        # --- Shutdown ---
        app.state.gateway = None
        await gateway.close()
