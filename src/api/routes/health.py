"""
Health check API route
"""

from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends

from config.settings import STORE_BACKEND
from services.users_service import UserStore, get_user_store

router = APIRouter()

@router.get("/")
async def health_check(store: UserStore = Depends(get_user_store)):
    """Health check - reports unhealthy only when the store cannot be reached"""
    if not await store.ping():
        raise HTTPException(status_code=503, detail="Health check failed: store unreachable")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "store": STORE_BACKEND
    }
