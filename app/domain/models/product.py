from decimal import Decimal
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, field_serializer

class Product(BaseModel):
    product_id: UUID
    # columns outside the primary key may be null in storage
    product_name: Optional[str] = None
    retail_price: Optional[Decimal] = None

    model_config = {"frozen": True}  # immuable = safe

    @field_serializer("retail_price")
    def serialize_price(self, value: Optional[Decimal]) -> Optional[float]:
        # JSON clients expect a number, not Decimal's string form
        return float(value) if value is not None else None

    @property
    def price_text(self) -> Optional[str]:
        """Price as clients see it (the float form), e.g. 20 -> "20.0"."""
        if self.retail_price is None:
            return None
        return repr(float(self.retail_price))
