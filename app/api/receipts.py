"""
app/api/receipts.py

Purpose: Receipt endpoints for the authenticated user

- POST /receipts: creates a receipt
- GET /receipts: lists the user's receipts (best-effort, newest first)
"""

from typing import List
from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_receipt_service
from app.models.receipt import Receipt
from app.models.user import User
from app.schemas.receipt import ReceiptCreation
from app.services.receipt_service import ReceiptService

router = APIRouter(prefix="/receipts")


@router.post("", response_model=Receipt, status_code=201)
async def create_receipt(
    creation: ReceiptCreation,
    user: User = Depends(get_current_user),
    service: ReceiptService = Depends(get_receipt_service),
):
    return await service.create_receipt(user, creation)


@router.get("", response_model=List[Receipt])
async def list_receipts(
    user: User = Depends(get_current_user),
    service: ReceiptService = Depends(get_receipt_service),
):
    return await service.list_receipts(user)
