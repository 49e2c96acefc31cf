"""Tests for the study group service."""

from unittest.mock import AsyncMock

import pytest

from uniconnect.core.exceptions.domain import ForbiddenError, NotFoundError, ValidationFailedError
from uniconnect.features.study_groups.entities.study_group import StudyGroup
from uniconnect.features.study_groups.services.study_group_service import StudyGroupService


@pytest.fixture
def mock_group_repository():
    return AsyncMock()


@pytest.fixture
def mock_user_repository():
    return AsyncMock()


@pytest.fixture
def service(mock_group_repository, mock_user_repository):
    return StudyGroupService(mock_group_repository, mock_user_repository)


@pytest.fixture
def group():
    return StudyGroup(id="group-1", name="Calculus crew", owner_id="owner-1")


class TestStudyGroupService:
    
    @pytest.mark.asyncio
    async def test_create_group(self, service, mock_group_repository, group):
        mock_group_repository.create.return_value = group
        
        result = await service.create_group("owner-1", "Calculus crew", None)
        
        assert result is group
        mock_group_repository.create.assert_awaited_once_with("owner-1", "Calculus crew", None)
    
    @pytest.mark.asyncio
    async def test_owner_can_update(self, service, mock_group_repository, group):
        mock_group_repository.get_by_id.return_value = group
        mock_group_repository.update.return_value = group
        
        await service.update_group("group-1", "owner-1", {"name": "Calc II"})
        
        mock_group_repository.update.assert_awaited_once_with("group-1", {"name": "Calc II"})
    
    @pytest.mark.asyncio
    async def test_non_owner_cannot_update(self, service, mock_group_repository, group):
        mock_group_repository.get_by_id.return_value = group
        
        with pytest.raises(ForbiddenError, match="Only the owner can edit this group"):
            await service.update_group("group-1", "someone-else", {"name": "Mine now"})
        
        mock_group_repository.update.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_update_missing_group(self, service, mock_group_repository):
        mock_group_repository.get_by_id.return_value = None
        
        with pytest.raises(NotFoundError, match="Study group not found"):
            await service.update_group("nope", "owner-1", {})
    
    @pytest.mark.asyncio
    async def test_add_members(self, service, mock_group_repository, mock_user_repository, group):
        mock_group_repository.get_by_id.return_value = group
        mock_group_repository.add_members.return_value = group
        mock_user_repository.find_existing_ids.return_value = {"u2", "u3"}
        
        await service.add_members("group-1", "owner-1", ["u2", "u3", "u2"])
        
        mock_group_repository.add_members.assert_awaited_once_with("group-1", ["u2", "u3"])
    
    @pytest.mark.asyncio
    async def test_add_unknown_members(self, service, mock_group_repository, mock_user_repository, group):
        mock_group_repository.get_by_id.return_value = group
        mock_user_repository.find_existing_ids.return_value = {"u2"}
        
        with pytest.raises(NotFoundError) as exc_info:
            await service.add_members("group-1", "owner-1", ["u2", "ghost"])
        
        assert exc_info.value.details == {"missing_ids": ["ghost"]}
        mock_group_repository.add_members.assert_not_called()
    
    @pytest.mark.asyncio
    async def test_non_owner_cannot_add_members(self, service, mock_group_repository, group):
        mock_group_repository.get_by_id.return_value = group
        
        with pytest.raises(ForbiddenError, match="Only the owner can add members"):
            await service.add_members("group-1", "intruder", ["u2"])
    
    @pytest.mark.asyncio
    async def test_add_no_members(self, service, mock_group_repository, group):
        mock_group_repository.get_by_id.return_value = group
        
        with pytest.raises(ValidationFailedError):
            await service.add_members("group-1", "owner-1", [])
        
        mock_group_repository.add_members.assert_not_called()
