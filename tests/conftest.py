import asyncio
import uuid
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.api.deps import gateway_dep
from app.db.cassandra import APPLIED_COLUMN, QueryExecutionError, StatementPreparationError
from app.domain.repositories import product_repo
from app.main import app


class FakePrepared:
    def __init__(self, cql):
        self.query_string = cql


class FakeGateway:
    """
    In-memory stand-in for CassandraGateway that understands the four
    statements issued by ProductRepo.
    """

    def __init__(self):
        self.rows: dict[uuid.UUID, dict] = {}
        self.fail_prepare = False
        self.fail_execute = False
        self.executed: list[str] = []

    def seed(self, name, price) -> uuid.UUID:
        pid = uuid.uuid4()
        self.rows[pid] = {"product_id": pid, "product_name": name, "retail_price": Decimal(price) if price is not None else None}
        return pid

    async def prepare(self, cql):
        await asyncio.sleep(0)
        if self.fail_prepare:
            raise StatementPreparationError("prepare boom")
        return FakePrepared(cql)

    async def execute(self, statement, parameters=None):
        await asyncio.sleep(0)
        cql = statement.query_string if isinstance(statement, FakePrepared) else statement
        self.executed.append(cql)
        if self.fail_execute:
            raise QueryExecutionError("execute boom")

        if cql == product_repo.SELECT_ALL:
            return [dict(r) for r in self.rows.values()]
        if cql == product_repo.INSERT:
            pid, name, price = parameters
            self.rows[pid] = {"product_id": pid, "product_name": name, "retail_price": price}
            return []
        if cql == product_repo.UPDATE:
            name, price, pid = parameters
            if pid not in self.rows:
                return [{APPLIED_COLUMN: False}]
            self.rows[pid].update(product_name=name, retail_price=price)
            return [{APPLIED_COLUMN: True}]
        if cql == product_repo.DELETE:
            (pid,) = parameters
            self.rows.pop(pid, None)
            return []
        raise AssertionError(f"unexpected statement: {cql}")


@pytest.fixture
def gateway():
    fake = FakeGateway()
    app.dependency_overrides[gateway_dep] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def client(gateway):
    # no context manager: the lifespan (real Cassandra connection) is not run
    return TestClient(app)
