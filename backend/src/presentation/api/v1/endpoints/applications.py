"""
Application Endpoints
Submission, triage and bulk status updates
"""
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from application.services.applications import IApplicationService
from domain.value_objects import Actor
from presentation.api.v1.container import get_application_service
from presentation.api.v1.dependencies import get_current_actor
from presentation.api.v1.schemas.applications import (
    ApplicationCreateRequest,
    ApplicationResponse,
    ApplicationUpdateRequest,
    BulkStatusUpdateRequest,
    BulkStatusUpdateResponse,
    CanApplyResponse,
    StatusUpdateRequest,
)


router = APIRouter()


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: ApplicationCreateRequest,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    """Submit an application; a second one for the same job offer is a 409"""
    application = await service.create_application(
        request.job_offer_id,
        actor,
        cover_letter=request.cover_letter,
        resume_url=request.resume_url,
    )
    return ApplicationResponse.from_entity(application)


@router.get("/check/{job_offer_id}", response_model=CanApplyResponse)
async def check_can_apply(
    job_offer_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    """Advisory check; the create call remains authoritative"""
    return CanApplyResponse(can_apply=await service.can_user_apply(job_offer_id, actor))


@router.get("/my", response_model=List[ApplicationResponse])
async def list_my_applications(
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    applications = await service.list_my_applications(actor)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.get("/job/{job_offer_id}", response_model=List[ApplicationResponse])
async def list_job_applications(
    job_offer_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    applications = await service.list_job_applications(job_offer_id, actor)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.get("/job/{job_offer_id}/stats")
async def job_application_stats(
    job_offer_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    return await service.job_application_stats(job_offer_id, actor)


@router.get("/company/{company_id}", response_model=List[ApplicationResponse])
async def list_company_applications(
    company_id: UUID,
    status_filter: Optional[str] = Query(None, alias="status"),
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    """Applications across the company's job offers; owner or admin only"""
    applications = await service.list_company_applications(company_id, actor, status=status_filter)
    return [ApplicationResponse.from_entity(a) for a in applications]


@router.get("/company/{company_id}/stats")
async def company_application_stats(
    company_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    return await service.company_application_stats(company_id, actor)


@router.put("/bulk/status", response_model=BulkStatusUpdateResponse)
async def bulk_update_status(
    request: BulkStatusUpdateRequest,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    """
    Update many applications at once.

    Always 200 for a well-formed request; per-item failures are listed in
    ``failed`` with a reason code (not_found, forbidden, terminal_state, ...).
    """
    result = await service.bulk_update_application_status(
        request.application_ids,
        request.status,
        actor
    )
    return BulkStatusUpdateResponse(
        succeeded=[i for i in request.application_ids if i in result.succeeded],
        failed=result.failed,
    )


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    return ApplicationResponse.from_entity(await service.get_application(application_id, actor))


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: UUID,
    request: ApplicationUpdateRequest,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    application = await service.update_application_content(
        application_id,
        actor,
        cover_letter=request.cover_letter,
        resume_url=request.resume_url,
    )
    return ApplicationResponse.from_entity(application)


@router.put("/{application_id}/status", response_model=ApplicationResponse)
async def update_application_status(
    application_id: UUID,
    request: StatusUpdateRequest,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    application = await service.update_application_status(application_id, request.status, actor)
    return ApplicationResponse.from_entity(application)


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: UUID,
    actor: Actor = Depends(get_current_actor),
    service: IApplicationService = Depends(get_application_service)
):
    await service.delete_application(application_id, actor)
