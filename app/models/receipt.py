"""
app/models/receipt.py

Purpose: Receipt records

- ReceiptItem line with a computed total
- Receipt owned by a user and issued by a store
- Store reference record
"""

from pydantic import BaseModel, Field
from typing import Dict, List, Optional
from datetime import datetime

from utils.time_utils import utc_now
from utils.token_utils import generate_receipt_id


class ReceiptItem(BaseModel):
    name: str
    quantity: int
    price: float = Field(..., description="Unit price")
    total: float = Field(..., description="quantity * price, rounded to cents")


class Receipt(BaseModel):
    id: str = Field(default_factory=generate_receipt_id)
    user_id: str
    store_id: str
    items: List[ReceiptItem] = Field(default_factory=list)
    subtotal: float
    tax: float
    total: float
    created_at: datetime = Field(default_factory=utc_now)
    metadata: Optional[Dict[str, str]] = None


class Store(BaseModel):
    id: str
    name: str
    address: str
