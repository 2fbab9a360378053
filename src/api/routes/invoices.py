"""Invoice routes. Mounted for the frontend; not implemented yet."""

from fastapi import APIRouter, Depends, HTTPException, status

from api.security import get_current_identity

router = APIRouter(
    prefix="/api/invoices",
    tags=["invoices"],
    dependencies=[Depends(get_current_identity)],
)


def _not_implemented():
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not implemented")


@router.get("")
async def list_invoices():
    _not_implemented()


@router.post("")
async def create_invoice():
    _not_implemented()


@router.get("/{invoice_id}")
async def get_invoice(invoice_id: str):
    _not_implemented()
