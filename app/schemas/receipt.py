"""
app/schemas/receipt.py

Purpose: Receipt creation payload

Line totals, subtotal and total are computed server-side.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class ReceiptItemInput(BaseModel):
    name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0, description="Unit price")


class ReceiptCreation(BaseModel):
    store_id: str = Field(..., min_length=1)
    items: List[ReceiptItemInput] = Field(..., min_length=1)
    tax: float = Field(0.0, ge=0)
    metadata: Optional[Dict[str, str]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "store_id": "store-001",
                "items": [{"name": "Coffee", "quantity": 2, "price": 3.5}],
                "tax": 0.56,
                "metadata": {"register": "3"}
            }
        }
    )
