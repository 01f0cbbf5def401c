# app/api/deps.py
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request

from app.core.errors import ApiError, INVALID_ID, MISSING_ID
from app.db.cassandra import CassandraGateway
from app.domain.repositories.product_repo import ProductRepo


# Dependency for injecting the Cassandra gateway built by the lifespan
def gateway_dep(request: Request) -> CassandraGateway:
    gateway = getattr(request.app.state, "gateway", None)
    assert gateway is not None, "Cassandra gateway not initialized"
    return gateway


def product_repo_dep(gateway: CassandraGateway = Depends(gateway_dep)) -> ProductRepo:
    return ProductRepo(gateway)


def parse_product_id(raw: str | None) -> UUID:
    """
    Same rule for every path carrying an id: blank → missing, non-UUID → invalid.
    """
    if raw is None or not raw.strip():
        raise ApiError(400, MISSING_ID)
    try:
        return UUID(raw.strip())
    except ValueError:
        raise ApiError(400, INVALID_ID) from None


def product_id_dep(product_id: str = Path(...)) -> UUID:
    return parse_product_id(product_id)


RepoDep = Annotated[ProductRepo, Depends(product_repo_dep)]
ProductIdDep = Annotated[UUID, Depends(product_id_dep)]
