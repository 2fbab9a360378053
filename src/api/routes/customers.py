"""Customer routes. Mounted for the frontend; not implemented yet."""

from fastapi import APIRouter, Depends, HTTPException, status

from api.security import get_current_identity

router = APIRouter(
    prefix="/api/customers",
    tags=["customers"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("")
async def list_customers():
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not implemented")


@router.get("/{customer_id}")
async def get_customer(customer_id: str):
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not implemented")
