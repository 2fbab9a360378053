"""QuickBooks Online OAuth routes.

The token exchange with Intuit is out of scope for this service; both
steps of the flow answer 501 so the frontend gets a stable error shape.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from api.security import get_current_identity

router = APIRouter(prefix="/auth/quickbooks", tags=["quickbooks"])


@router.get("/connect", dependencies=[Depends(get_current_identity)])
async def connect():
    """Start the OAuth authorization-code flow."""
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not implemented")


@router.get("/callback")
async def callback(code: str | None = None, state: str | None = None, realmId: str | None = None):
    """OAuth redirect target."""
    raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail="Not implemented")
