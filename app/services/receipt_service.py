"""
app/services/receipt_service.py

Purpose: Receipt management for authenticated users

- Computes line totals, subtotal and total
- Persists receipts under their owner
- Lists a user's receipts, newest first
"""

from typing import List

from app.core.logging import get_logger
from app.models.receipt import Receipt, ReceiptItem
from app.models.user import User
from app.repositories.cache_repository import CacheRepository
from app.schemas.receipt import ReceiptCreation

logger = get_logger(__name__)


def _to_cents(amount: float) -> float:
    return round(amount, 2)


class ReceiptService:

    def __init__(self, repository: CacheRepository):
        self.repository = repository

    async def create_receipt(self, user: User, creation: ReceiptCreation) -> Receipt:
        items = [
            ReceiptItem(
                name=item.name,
                quantity=item.quantity,
                price=item.price,
                total=_to_cents(item.quantity * item.price)
            )
            for item in creation.items
        ]
        subtotal = _to_cents(sum(item.total for item in items))
        tax = _to_cents(creation.tax)

        receipt = Receipt(
            user_id=user.id,
            store_id=creation.store_id,
            items=items,
            subtotal=subtotal,
            tax=tax,
            total=_to_cents(subtotal + tax),
            metadata=creation.metadata,
        )

        await self.repository.store_receipt(receipt)
        logger.info(f"Receipt {receipt.id} created for user {user.id}")
        return receipt

    async def list_receipts(self, user: User) -> List[Receipt]:
        receipts = await self.repository.get_user_receipts(user.id)
        return sorted(receipts, key=lambda r: r.created_at, reverse=True)
