"""
Notification Endpoints
"""
from typing import List

from fastapi import APIRouter, Depends

from application.services.applications import IApplicationService
from domain.value_objects import Actor
from presentation.api.v1.container import get_application_service
from presentation.api.v1.dependencies import get_current_actor
from presentation.api.v1.schemas.applications import NotificationResponse


router = APIRouter()


@router.get("/notifications", response_model=List[NotificationResponse])
async def list_notifications(
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    """Notifications of the authenticated user, newest first"""
    notifications = await service.list_notifications(actor)
    return [NotificationResponse.from_entity(n) for n in notifications]
