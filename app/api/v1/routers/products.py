# app/api/v1/routers/products.py

from typing import Optional
import time

from fastapi import APIRouter, Query

from app.api.deps import ProductIdDep, RepoDep
from app.api.v1.schemas.product import MessageOut, ProductCreatedOut, ProductIn, ProductListOut
from app.core.errors import ApiError, MISSING_ID, NOT_FOUND, PREPARE_FAILED
from app.db.cassandra import GatewayError, StatementPreparationError
from app.domain.services import product_svc

import logging
logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


def _backend_failure(exc: GatewayError, message: str) -> ApiError:
    """Log the stack trace and pick the 500 message for the failing step."""
    logger.exception("Backend failure: %s", exc)
    if isinstance(exc, StatementPreparationError):
        return ApiError(500, PREPARE_FAILED)
    return ApiError(500, message)


@router.get("/products", response_model=ProductListOut)
async def list_products(
    repo: RepoDep,
    filter_text: Optional[str] = Query(None, alias="filter", description="Name prefix (case-insensitive) or price prefix"),
):
    """
    Every product whose name, or price for a numeric filter, starts with `filter`.
    """
    logger.info("Request: list_products filter=%r", filter_text)
    start_time = time.perf_counter()
    try:
        products = await product_svc.list_products(repo, filter_text)
    except GatewayError as e:
        logger.exception("Backend failure: %s", e)
        # the driver's message goes back to the caller as-is
        raise ApiError(500, str(e))

    logger.info(
        "Response: list_products count=%s, elapsed_time=%.4fs",
        len(products), time.perf_counter() - start_time,
    )
    return {"products": products}


@router.post("/products", status_code=201, response_model=ProductCreatedOut)
async def add_product(payload: ProductIn, repo: RepoDep):
    logger.info("Request: add_product product_name=%r", payload.product_name)
    try:
        product_id = await product_svc.create_product(repo, payload.product_name, payload.retail_price)
    except GatewayError as e:
        raise _backend_failure(e, "Failed to add product")
    return {"message": "Product added successfully", "product_id": str(product_id)}


@router.put("/products/{product_id}", response_model=MessageOut)
async def update_product(product_id: ProductIdDep, payload: ProductIn, repo: RepoDep):
    logger.info("Request: update_product product_id=%s", product_id)
    try:
        applied = await product_svc.update_product(repo, product_id, payload.product_name, payload.retail_price)
    except GatewayError as e:
        raise _backend_failure(e, "Failed to update product")
    if not applied:
        raise ApiError(404, NOT_FOUND)
    return {"message": "Product updated successfully"}


@router.delete("/products/{product_id}", response_model=MessageOut)
async def remove_product(product_id: ProductIdDep, repo: RepoDep):
    """
    Idempotent: succeeds whether or not the row existed.
    """
    logger.info("Request: remove_product product_id=%s", product_id)
    try:
        await product_svc.delete_product(repo, product_id)
    except GatewayError as e:
        raise _backend_failure(e, "Failed to remove product")
    return {"message": "Product removed successfully"}


@router.api_route("/products/", methods=["PUT", "DELETE"], include_in_schema=False)
async def product_id_missing():
    # /products/ with an empty id segment never reaches the handlers above
    raise ApiError(400, MISSING_ID)
