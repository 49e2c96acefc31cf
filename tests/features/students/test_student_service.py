"""Tests for the student profile service."""

from unittest.mock import AsyncMock

import pytest

from uniconnect.core.exceptions.domain import NotFoundError
from uniconnect.features.students.entities.student import Subject
from uniconnect.features.students.services.student_service import StudentService
from uniconnect.features.users.entities.user import User


@pytest.fixture
def mock_user_repository():
    return AsyncMock()


@pytest.fixture
def mock_subject_repository():
    return AsyncMock()


@pytest.fixture
def service(mock_user_repository, mock_subject_repository):
    return StudentService(mock_user_repository, mock_subject_repository)


@pytest.fixture
def student():
    return User(id="user-1", email="ana@uni.edu", name="Ana", career="Systems Engineering", current_semester=4)


class TestStudentService:
    
    @pytest.mark.asyncio
    async def test_get_profile(self, service, mock_user_repository, mock_subject_repository, student):
        mock_user_repository.get_by_id.return_value = student
        mock_subject_repository.list_for_user.return_value = [Subject(id="s1", name="Algebra")]
        
        profile = await service.get_profile("user-1")
        
        assert profile.career == "Systems Engineering"
        assert profile.current_semester == 4
        assert [s.name for s in profile.subjects] == ["Algebra"]
    
    @pytest.mark.asyncio
    async def test_get_profile_for_unknown_user(self, service, mock_user_repository):
        mock_user_repository.get_by_id.return_value = None
        
        with pytest.raises(NotFoundError):
            await service.get_profile("missing")
    
    @pytest.mark.asyncio
    async def test_update_replaces_subjects(self, service, mock_user_repository, mock_subject_repository, student):
        mock_user_repository.update_student_fields.return_value = student
        mock_subject_repository.replace_for_user.return_value = [Subject(id="s2", name="Physics")]
        
        profile = await service.update_profile("user-1", current_semester=5, subjects=["Physics"])
        
        mock_user_repository.update_student_fields.assert_awaited_once_with("user-1", None, 5)
        mock_subject_repository.replace_for_user.assert_awaited_once_with("user-1", ["Physics"])
        assert [s.name for s in profile.subjects] == ["Physics"]
    
    @pytest.mark.asyncio
    async def test_update_without_subjects_keeps_them(
        self, service, mock_user_repository, mock_subject_repository, student
    ):
        mock_user_repository.update_student_fields.return_value = student
        mock_subject_repository.list_for_user.return_value = []
        
        await service.update_profile("user-1", career="Law")
        
        mock_subject_repository.replace_for_user.assert_not_called()
        mock_subject_repository.list_for_user.assert_awaited_once_with("user-1")
    
    @pytest.mark.asyncio
    async def test_empty_subject_list_clears_them(
        self, service, mock_user_repository, mock_subject_repository, student
    ):
        mock_user_repository.update_student_fields.return_value = student
        mock_subject_repository.replace_for_user.return_value = []
        
        profile = await service.update_profile("user-1", subjects=[])
        
        mock_subject_repository.replace_for_user.assert_awaited_once_with("user-1", [])
        assert profile.subjects == []
    
    @pytest.mark.asyncio
    async def test_update_unknown_user(self, service, mock_user_repository):
        mock_user_repository.update_student_fields.return_value = None
        
        with pytest.raises(NotFoundError):
            await service.update_profile("missing", career="Law")
