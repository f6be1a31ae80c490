"""
User API routes
Input is validated here before anything reaches the store; store results are mapped to status codes.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends

from models.user import UserCreateRequest, UserResponse
from services.users_service import UserStore, get_user_store
from utils.error_handling import set_endpoint_context
from utils.validation import validate_user_payload, parse_user_id

router = APIRouter()
logger = logging.getLogger(__name__)

def _to_response(record: dict) -> UserResponse:
    return UserResponse(id=record.get("id"), name=record["name"], email=record["email"])

@router.get("", response_model=List[UserResponse])
async def list_users(store: UserStore = Depends(get_user_store)):
    """List all users in insertion order"""
    set_endpoint_context("list_users")

    result = await store.get_all()
    if not result.success:
        logger.error(f"Failed to list users: {result.error}")
        raise HTTPException(status_code=500, detail=f"Service error: {result.error}")

    return [_to_response(record) for record in result.data or []]

@router.post("", response_model=UserResponse)
async def create_user(
    request: UserCreateRequest,
    store: UserStore = Depends(get_user_store)
):
    """Create a new user"""
    set_endpoint_context("create_user")

    validation = validate_user_payload(request.name, request.email)
    if not validation.valid:
        logger.info(f"Rejected user payload: {validation.summary()}")
        raise HTTPException(
            status_code=400,
            detail=[error.to_dict() for error in validation.errors]
        )

    result = await store.create(name=request.name, email=request.email)
    if not result.success or not result.data:
        logger.error(f"Failed to create user: {result.error}")
        raise HTTPException(status_code=500, detail=f"Service error: {result.error}")

    return _to_response(result.data[0])

@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    store: UserStore = Depends(get_user_store)
):
    """Get user by ID"""
    set_endpoint_context("get_user")

    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        raise HTTPException(status_code=400, detail=f"Invalid user id: {user_id}")

    result = await store.get_by_id(parsed_id)
    if result.is_not_found:
        raise HTTPException(status_code=404, detail="User not found")
    if not result.success or not result.data:
        logger.error(f"Failed to get user {parsed_id}: {result.error}")
        raise HTTPException(status_code=500, detail=f"Service error: {result.error}")

    return _to_response(result.data[0])
