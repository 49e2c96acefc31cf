"""Student profile API router."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Request

from ...auth.dependencies import CurrentUser
from ..models.student_models import StudentProfileResponse, SubjectResponse, UpdateProfileRequest
from ..services.student_service import StudentService

router = APIRouter(prefix="/students", tags=["Students"])


def get_student_service(request: Request) -> StudentService:
    return request.app.state.services.student_service


Students = Annotated[StudentService, Depends(get_student_service)]


@router.get("/profile", response_model=StudentProfileResponse)
async def get_profile(current_user: CurrentUser, service: Students) -> StudentProfileResponse:
    profile = await service.get_profile(current_user.user_id)
    return StudentProfileResponse.from_profile(profile)


@router.put("/profile", response_model=StudentProfileResponse)
async def update_profile(
    body: UpdateProfileRequest,
    current_user: CurrentUser,
    service: Students,
) -> StudentProfileResponse:
    profile = await service.update_profile(
        current_user.user_id,
        career=body.career,
        current_semester=body.current_semester,
        subjects=body.subjects,
    )
    return StudentProfileResponse.from_profile(profile)


@router.get("/subjects", response_model=List[SubjectResponse])
async def list_subjects(current_user: CurrentUser, service: Students) -> List[SubjectResponse]:
    """All known subjects, ordered by name."""
    return [SubjectResponse.from_subject(s) for s in await service.list_subjects()]
