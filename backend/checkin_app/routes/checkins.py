from fastapi import APIRouter, Depends
from checkin_app.core.dependencies import get_checkin_service
from checkin_app.schemas.checkin import CheckinCreate, CheckinResponse
from checkin_app.services import CheckinService

router = APIRouter()

@router.post("/", response_model=CheckinResponse, status_code=201)
def create_checkin(
    checkin: CheckinCreate,
    service: CheckinService = Depends(get_checkin_service)
):
    """
    Check a user in at a venue
    """
    return service.create_checkin(checkin)
