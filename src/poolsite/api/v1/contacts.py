"""Contact form submissions (leads) and their follow-up notes."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status
from starlette.requests import Request

from src.poolsite.api.dependencies import AdminUser, ContactServiceDep
from src.poolsite.core.config import get_settings
from src.poolsite.core.rate_limit import limiter
from src.poolsite.models import Contact
from src.poolsite.models.enums import ContactStatus
from src.poolsite.schemas.contact import (
    ContactAssign,
    ContactCreate,
    ContactRead,
    ContactSubmitted,
    ContactUpdate,
)
from src.poolsite.schemas.pagination import PaginatedResponse
from src.poolsite.schemas.project_data import (
    CommunicationAddedResponse,
    ContactCommunicationCreate,
    FollowUpAddedResponse,
    FollowUpCreate,
    NotesResponse,
    Qualification,
)

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _contact_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")


async def _get_contact_or_404(service: ContactServiceDep, contact_id: UUID) -> Contact:
    contact = await service.get(contact_id)
    if contact is None:
        raise _contact_not_found()
    return contact


@router.post(
    "",
    response_model=ContactSubmitted,
    status_code=status.HTTP_201_CREATED,
    summary="Submit contact form",
    description="Public endpoint used by the website contact form. Rate limited per IP.",
    responses={
        201: {"description": "Submission stored"},
        429: {"description": "Too many submissions"},
    },
)
@limiter.limit(get_settings().contact_rate_limit)
async def submit_contact(
    request: Request,
    data: ContactCreate,
    service: ContactServiceDep,
) -> ContactSubmitted:
    contact = await service.submit(data)
    return ContactSubmitted(id=contact.id)


@router.get(
    "",
    response_model=PaginatedResponse[ContactRead],
    summary="List contacts",
    description="Newest first, with cursor-based pagination.",
)
async def list_contacts(
    service: ContactServiceDep,
    _admin: AdminUser,
    cursor: Annotated[str | None, Query(description="Cursor for pagination")] = None,
    limit: Annotated[int, Query(ge=1, le=100, description="Max items to return")] = 20,
    status_filter: Annotated[ContactStatus | None, Query(alias="status")] = None,
    search: Annotated[
        str | None, Query(max_length=255, description="Matches name, email or message")
    ] = None,
) -> PaginatedResponse[ContactRead]:
    try:
        contacts, next_cursor, has_more = await service.list_contacts(
            cursor,
            limit,
            status=status_filter.value if status_filter else None,
            search=search,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return PaginatedResponse(
        items=[ContactRead.model_validate(c) for c in contacts],
        next_cursor=next_cursor,
        has_more=has_more,
    )


@router.get(
    "/{contact_id}",
    response_model=ContactRead,
    responses={404: {"description": "Contact not found"}},
)
async def get_contact(
    contact_id: UUID,
    service: ContactServiceDep,
    _admin: AdminUser,
) -> ContactRead:
    return ContactRead.model_validate(await _get_contact_or_404(service, contact_id))


@router.put(
    "/{contact_id}",
    response_model=ContactRead,
    responses={404: {"description": "Contact not found"}},
)
async def update_contact(
    contact_id: UUID,
    data: ContactUpdate,
    service: ContactServiceDep,
    _admin: AdminUser,
) -> ContactRead:
    contact = await _get_contact_or_404(service, contact_id)
    return ContactRead.model_validate(await service.update(contact, data))


@router.delete(
    "/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Contact not found"}},
)
async def delete_contact(
    contact_id: UUID,
    service: ContactServiceDep,
    _admin: AdminUser,
) -> None:
    contact = await _get_contact_or_404(service, contact_id)
    await service.delete(contact)


@router.post(
    "/{contact_id}/assign",
    response_model=ContactRead,
    summary="Assign contact",
    description="Assign to a back-office user, or pass null to unassign.",
    responses={
        400: {"description": "Assigned user not found"},
        404: {"description": "Contact not found"},
    },
)
async def assign_contact(
    contact_id: UUID,
    data: ContactAssign,
    service: ContactServiceDep,
    _admin: AdminUser,
) -> ContactRead:
    contact = await _get_contact_or_404(service, contact_id)
    try:
        contact = await service.assign(contact, data.assigned_to)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ContactRead.model_validate(contact)


@router.post(
    "/{contact_id}/communications",
    response_model=CommunicationAddedResponse,
    summary="Log communication with the lead",
    responses={404: {"description": "Contact not found"}},
)
async def add_contact_communication(
    contact_id: UUID,
    data: ContactCommunicationCreate,
    service: ContactServiceDep,
    admin: AdminUser,
) -> CommunicationAddedResponse:
    result = await service.add_communication(contact_id, data, admin)
    if result is None:
        raise _contact_not_found()
    contact, communication = result
    return CommunicationAddedResponse(communication=communication, notes=contact.notes)


@router.post(
    "/{contact_id}/follow-ups",
    response_model=FollowUpAddedResponse,
    summary="Schedule follow-up",
    description="Assigned to the current user unless assignedTo is given.",
    responses={404: {"description": "Contact not found"}},
)
async def add_follow_up(
    contact_id: UUID,
    data: FollowUpCreate,
    service: ContactServiceDep,
    admin: AdminUser,
) -> FollowUpAddedResponse:
    result = await service.add_follow_up(contact_id, data, admin)
    if result is None:
        raise _contact_not_found()
    contact, follow_up = result
    return FollowUpAddedResponse(follow_up=follow_up, notes=contact.notes)


@router.put(
    "/{contact_id}/qualification",
    response_model=NotesResponse,
    summary="Update lead qualification",
    description="Only the given fields are merged into the stored qualification.",
    responses={404: {"description": "Contact not found"}},
)
async def update_qualification(
    contact_id: UUID,
    data: Qualification,
    service: ContactServiceDep,
    _admin: AdminUser,
) -> NotesResponse:
    contact = await service.update_qualification(contact_id, data)
    if contact is None:
        raise _contact_not_found()
    return NotesResponse(notes=contact.notes)
