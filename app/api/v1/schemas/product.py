# app/api/v1/schemas/product.py
from decimal import Decimal
from typing import List
from pydantic import BaseModel

from app.domain.models.product import Product


class ProductIn(BaseModel):
    # No checks on name emptiness or price sign
    product_name: str
    retail_price: Decimal


class ProductListOut(BaseModel):
    products: List[Product]


class MessageOut(BaseModel):
    message: str


class ProductCreatedOut(MessageOut):
    product_id: str
