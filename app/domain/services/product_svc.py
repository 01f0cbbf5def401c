"""
Product CRUD use cases on top of ProductRepo.

Listing is a full-table scan filtered in process: every request reads the whole
table, so it only suits small collections. Cassandra cannot serve a
case-insensitive prefix match on a non-key column without a secondary index.
"""

import logging
import time
import uuid
from decimal import Decimal
from typing import List, Optional

from app.domain.models.product import Product
from app.domain.repositories.product_repo import ProductRepo

logger = logging.getLogger(__name__)


def _is_numeric(text: str) -> bool:
    try:
        float(text)
        return True
    except ValueError:
        return False


def matches_filter(product: Product, filter_text: Optional[str]) -> bool:
    """
    Empty filter matches everything. Otherwise a product matches when its
    lowercased name starts with the lowercased filter or, for a numeric filter,
    when the price as listed (float text, 20 -> "20.0") starts with the filter
    text verbatim. Null columns never match a non-empty filter.
    """
    if not filter_text:
        return True
    name = product.product_name
    if name is not None and name.lower().startswith(filter_text.lower()):
        return True
    price_text = product.price_text
    if price_text is not None and _is_numeric(filter_text):
        return price_text.startswith(filter_text)
    return False


async def list_products(repo: ProductRepo, filter_text: Optional[str] = None) -> List[Product]:
    t0 = time.perf_counter()
    products = await repo.list_all()
    matched = [p for p in products if matches_filter(p, filter_text)]
    logger.info(
        "list_products scanned=%s matched=%s filter=%r time=%.3fs",
        len(products), len(matched), filter_text, time.perf_counter() - t0,
    )
    return matched


async def create_product(repo: ProductRepo, product_name: str, retail_price: Decimal) -> uuid.UUID:
    # id is always generated here, never taken from the client
    product_id = uuid.uuid4()
    await repo.insert(product_id, product_name, retail_price)
    logger.info("create_product product_id=%s", product_id)
    return product_id


async def update_product(repo: ProductRepo, product_id: uuid.UUID, product_name: str, retail_price: Decimal) -> bool:
    applied = await repo.update(product_id, product_name, retail_price)
    logger.info("update_product product_id=%s applied=%s", product_id, applied)
    return applied


async def delete_product(repo: ProductRepo, product_id: uuid.UUID) -> None:
    await repo.delete(product_id)
    logger.info("delete_product product_id=%s", product_id)
