"""Study group API router."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Request, status

from ...auth.dependencies import CurrentUser
from ..models.study_group_models import (
    AddMembersRequest,
    CreateStudyGroupRequest,
    StudyGroupResponse,
    UpdateStudyGroupRequest,
)
from ..services.study_group_service import StudyGroupService

router = APIRouter(prefix="/study-groups", tags=["Study Groups"])


def get_study_group_service(request: Request) -> StudyGroupService:
    return request.app.state.services.study_group_service


StudyGroups = Annotated[StudyGroupService, Depends(get_study_group_service)]


@router.post("", response_model=StudyGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_group(
    body: CreateStudyGroupRequest,
    current_user: CurrentUser,
    service: StudyGroups,
) -> StudyGroupResponse:
    """Create a group owned by the caller."""
    group = await service.create_group(current_user.user_id, body.name, body.description)
    return StudyGroupResponse.from_group(group)


@router.get("/student/{student_id}", response_model=List[StudyGroupResponse])
async def list_student_groups(
    student_id: str,
    current_user: CurrentUser,
    service: StudyGroups,
) -> List[StudyGroupResponse]:
    groups = await service.list_for_student(student_id)
    return [StudyGroupResponse.from_group(group) for group in groups]


@router.put("/{group_id}", response_model=StudyGroupResponse)
async def update_group(
    group_id: str,
    body: UpdateStudyGroupRequest,
    current_user: CurrentUser,
    service: StudyGroups,
) -> StudyGroupResponse:
    group = await service.update_group(
        group_id, current_user.user_id, body.model_dump(exclude_unset=True)
    )
    return StudyGroupResponse.from_group(group)


@router.post("/{group_id}/members", response_model=StudyGroupResponse)
async def add_members(
    group_id: str,
    body: AddMembersRequest,
    current_user: CurrentUser,
    service: StudyGroups,
) -> StudyGroupResponse:
    group = await service.add_members(group_id, current_user.user_id, body.member_ids)
    return StudyGroupResponse.from_group(group)
