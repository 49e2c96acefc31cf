"""Tests for identity resolution on sign-in."""

from dataclasses import replace

import pytest

from uniconnect.features.auth.services.identity_resolver import GoogleIdentityResolver
from uniconnect.features.auth.services.simple_identity_resolver import SimpleIdentityResolver
from uniconnect.features.users.entities.user import AuthProvider


class TestGoogleIdentityResolver:
    
    @pytest.fixture
    def resolver(self):
        return GoogleIdentityResolver()
    
    @pytest.mark.asyncio
    async def test_first_sign_in_creates_user_and_identity(self, resolver, auth_store, google_identity):
        async with auth_store.transaction() as repos:
            user = await resolver.resolve(google_identity, repos)
        
        assert user.email == "ana@uni.edu"
        assert user.name == "Ana Student"
        assert user.avatar_url == "https://example.com/ana.png"
        identity = auth_store.state.identities[(AuthProvider.GOOGLE, "google-sub-123")]
        assert identity.user_id == user.id
        assert identity.hosted_domain == "uni.edu"
    
    @pytest.mark.asyncio
    async def test_repeat_sign_in_updates_profile_without_new_identity(
        self, resolver, auth_store, google_identity
    ):
        async with auth_store.transaction() as repos:
            first = await resolver.resolve(google_identity, repos)
        
        renamed = replace(google_identity, name="Ana Renamed", email="ana.r@uni.edu")
        async with auth_store.transaction() as repos:
            second = await resolver.resolve(renamed, repos)
        
        assert second.id == first.id
        assert second.name == "Ana Renamed"
        assert second.email == "ana.r@uni.edu"
        assert len(auth_store.state.identities) == 1
        assert len(auth_store.state.users) == 1
    
    @pytest.mark.asyncio
    async def test_missing_claims_keep_stored_values(self, resolver, auth_store, google_identity):
        async with auth_store.transaction() as repos:
            await resolver.resolve(google_identity, repos)
            user = await resolver.resolve(replace(google_identity, name=None, avatar_url=None), repos)
        
        assert user.name == "Ana Student"
        assert user.avatar_url == "https://example.com/ana.png"
    
    @pytest.mark.asyncio
    async def test_existing_email_is_linked(self, resolver, auth_store, google_identity):
        existing = auth_store.add_user(email="ana@uni.edu", name="Old Name")
        
        async with auth_store.transaction() as repos:
            user = await resolver.resolve(google_identity, repos)
        
        assert user.id == existing.id
        assert user.name == "Ana Student"
        assert auth_store.state.identities[(AuthProvider.GOOGLE, "google-sub-123")].user_id == existing.id
        assert len(auth_store.state.users) == 1
    
    @pytest.mark.asyncio
    async def test_failure_rolls_back_created_user(self, resolver, auth_store, google_identity):
        with pytest.raises(RuntimeError):
            async with auth_store.transaction() as repos:
                await resolver.resolve(google_identity, repos)
                raise RuntimeError("session insert failed")
        
        assert auth_store.state.users == {}
        assert auth_store.state.identities == {}


class TestSimpleIdentityResolver:
    
    @pytest.fixture
    def resolver(self):
        return SimpleIdentityResolver()
    
    @pytest.mark.asyncio
    async def test_creates_user(self, resolver, auth_store):
        async with auth_store.transaction() as repos:
            user = await resolver.resolve("bob@uni.edu", "  Bob ", repos)
        
        assert user.email == "bob@uni.edu"
        assert user.name == "Bob"
        assert auth_store.state.identities == {}
    
    @pytest.mark.asyncio
    async def test_reuses_user_and_updates_name(self, resolver, auth_store, sample_user):
        async with auth_store.transaction() as repos:
            user = await resolver.resolve(sample_user.email, "Ana Maria", repos)
        
        assert user.id == sample_user.id
        assert user.name == "Ana Maria"
        assert len(auth_store.state.users) == 1
