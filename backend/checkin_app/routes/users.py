from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from checkin_app.core.config import settings
from checkin_app.core.dependencies import get_user_service, get_checkin_service
from checkin_app.schemas.user import UserCreate, UserUpdate, UserResponse, UserProfileResponse
from checkin_app.schemas.checkin import CheckinResponse
from checkin_app.services import UserService, CheckinService

router = APIRouter()

@router.post("/", response_model=UserResponse, status_code=201)
def create_user(
    user: UserCreate,
    service: UserService = Depends(get_user_service)
):
    """
    Register a new user
    """
    return service.create_user(user)

@router.get("/{user_id}", response_model=UserProfileResponse)
def get_user_profile(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """
    Get user profile with check-in, venue and friend counts
    """
    return service.get_profile(user_id)

@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    user_update: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    """
    Update user profile; only the fields sent are changed
    """
    return service.update_user(user_id, user_update)

@router.get("/{user_id}/checkins", response_model=List[CheckinResponse])
def get_user_checkins(
    user_id: int,
    limit: Optional[int] = Query(None, ge=1, le=settings.FEED_MAX_LIMIT),
    service: CheckinService = Depends(get_checkin_service)
):
    """
    List a user's check-ins, newest first
    """
    return service.user_checkins(user_id, limit=limit)
