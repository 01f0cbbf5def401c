# app/domain/repositories/product_repo.py

from __future__ import annotations
from decimal import Decimal
from typing import List
from uuid import UUID

from app.db.cassandra import CassandraGateway, was_applied
from app.domain.models.product import Product

SELECT_ALL = "SELECT product_id, product_name, retail_price FROM products"
INSERT = "INSERT INTO products (product_id, product_name, retail_price) VALUES (?, ?, ?)"
# IF EXISTS turns the upsert into a conditional write, so a missing row is reported
UPDATE = "UPDATE products SET product_name = ?, retail_price = ? WHERE product_id = ? IF EXISTS"
DELETE = "DELETE FROM products WHERE product_id = ?"


class ProductRepo:
    """
    Product repository backed by the 'products' table of the configured keyspace.
    Statements are prepared per call and executed through the gateway; gateway
    errors propagate untouched.
    """

    def __init__(self, gateway: CassandraGateway):
        self.gateway = gateway

    async def list_all(self) -> List[Product]:
        rows = await self.gateway.execute(SELECT_ALL)
        return [Product.model_validate(row) for row in rows]

    async def insert(self, product_id: UUID, product_name: str, retail_price: Decimal) -> None:
        stmt = await self.gateway.prepare(INSERT)
        await self.gateway.execute(stmt, (product_id, product_name, retail_price))

    async def update(self, product_id: UUID, product_name: str, retail_price: Decimal) -> bool:
        """Returns False when no row with this id exists."""
        stmt = await self.gateway.prepare(UPDATE)
        rows = await self.gateway.execute(stmt, (product_name, retail_price, product_id))
        return was_applied(rows)

    async def delete(self, product_id: UUID) -> None:
        stmt = await self.gateway.prepare(DELETE)
        await self.gateway.execute(stmt, (product_id,))
