# app/db/cassandra.py
"""
Cassandra gateway.

Wraps one `Cluster` + `Session` pair built from settings. The driver runs its
own IO threads; every statement is sent with `execute_async` and its
`ResponseFuture` is bridged onto an asyncio future, so a request awaiting the
database never blocks the event loop. Calls the driver only offers in blocking
form (connect, prepare, shutdown) are pushed to a worker thread.

The gateway holds no per-request state and is shared by all requests.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Sequence

from cassandra.cluster import Cluster, Session
from cassandra.policies import DCAwareRoundRobinPolicy, TokenAwarePolicy
from cassandra.query import PreparedStatement, dict_factory

from app.core.config import Settings

logger = logging.getLogger(__name__)

APPLIED_COLUMN = "[applied]"


class GatewayError(Exception):
    """Base class for storage failures surfaced to the API layer."""


class StatementPreparationError(GatewayError):
    pass


class QueryExecutionError(GatewayError):
    pass


def was_applied(rows: Sequence[dict]) -> bool:
    """
    Outcome of a conditional (IF ...) statement.
    Cassandra answers with a single row whose `[applied]` column is the verdict.
    """
    if not rows:
        return False
    return bool(rows[0].get(APPLIED_COLUMN, False))


def bridge_response_future(response_future, loop: asyncio.AbstractEventLoop) -> asyncio.Future:
    """
    Turn a driver ResponseFuture into an asyncio future resolving to every row.
    Callbacks fire on driver threads; results are handed to the loop thread-safely.
    Further pages are requested from the callback until the result is drained.
    """
    fut: asyncio.Future = loop.create_future()
    rows: list[Any] = []

    def _resolve(value):
        if not fut.done():
            fut.set_result(value)

    def _reject(exc):
        if not fut.done():
            fut.set_exception(exc)

    def _on_page(page):
        try:
            rows.extend(page or [])
            if response_future.has_more_pages:
                response_future.start_fetching_next_page()
            else:
                loop.call_soon_threadsafe(_resolve, rows)
        except Exception as e:
            # nothing else would ever settle the future
            loop.call_soon_threadsafe(_reject, e)

    def _on_error(exc):
        loop.call_soon_threadsafe(_reject, exc)

    response_future.add_callbacks(callback=_on_page, errback=_on_error)
    return fut


class CassandraGateway:
    def __init__(self, cluster: Optional[Cluster], session: Session):
        self.cluster = cluster
        self.session = session

    @classmethod
    def from_settings(cls, settings: Settings) -> "CassandraGateway":
        """
        Blocking: opens the cluster connection and binds the keyspace.
        """
        lb_policy = None
        if settings.CASSANDRA_LOCAL_DC:
            lb_policy = TokenAwarePolicy(DCAwareRoundRobinPolicy(local_dc=settings.CASSANDRA_LOCAL_DC))

        cluster = Cluster(
            contact_points=settings.contact_points,
            port=settings.CASSANDRA_PORT,
            load_balancing_policy=lb_policy,
            protocol_version=4,
        )
        try:
            session = cluster.connect()
            if settings.CASSANDRA_CREATE_SCHEMA:
                ensure_schema(session, settings.CASSANDRA_KEYSPACE)
            session.set_keyspace(settings.CASSANDRA_KEYSPACE)
        except Exception:
            cluster.shutdown()
            raise
        session.row_factory = dict_factory
        return cls(cluster, session)

    @classmethod
    async def connect(cls, settings: Settings) -> "CassandraGateway":
        logger.info(
            "Connecting to Cassandra at %s:%s keyspace=%s",
            settings.contact_points, settings.CASSANDRA_PORT, settings.CASSANDRA_KEYSPACE,
        )
        gateway = await asyncio.to_thread(cls.from_settings, settings)
        logger.info("Cassandra connected")
        return gateway

    async def prepare(self, cql: str) -> PreparedStatement:
        try:
            return await asyncio.to_thread(self.session.prepare, cql)
        except Exception as e:
            raise StatementPreparationError(str(e)) from e

    async def execute(self, statement, parameters: Optional[Sequence[Any]] = None) -> list[dict]:
        """
        Run a statement (plain CQL string or prepared statement) and return all rows as dicts.
        """
        loop = asyncio.get_running_loop()
        try:
            response_future = self.session.execute_async(statement, parameters)
            return await bridge_response_future(response_future, loop)
        except Exception as e:
            raise QueryExecutionError(str(e)) from e

    async def close(self) -> None:
        if self.cluster is not None:
            await asyncio.to_thread(self.cluster.shutdown)
            logger.info("Cassandra disconnected")


def ensure_schema(session: Session, keyspace: str) -> None:
    """
    Create the keyspace and products table when they are absent. Never alters
    an existing table.
    """
    session.execute(
        f"CREATE KEYSPACE IF NOT EXISTS {keyspace} "
        "WITH replication = {'class': 'SimpleStrategy', 'replication_factor': 1}"
    )
    session.execute(
        f"CREATE TABLE IF NOT EXISTS {keyspace}.products ("
        "product_id uuid PRIMARY KEY, "
        "product_name text, "
        "retail_price decimal)"
    )
    logger.info("Schema ensured for keyspace=%s", keyspace)
