"""Tests for Google ID token verification."""

import pytest

from uniconnect.core.exceptions.auth import DomainNotAllowedError, InvalidCredentialError
from uniconnect.features.auth.adapters.google_verifier import GoogleCredentialVerifier

CLIENT_ID = "web-client.apps.googleusercontent.com"


def make_claims(**overrides):
    claims = {
        "sub": "1234567890",
        "email": "ana@uni.edu",
        "email_verified": True,
        "iss": "https://accounts.google.com",
        "aud": CLIENT_ID,
        "hd": "uni.edu",
        "name": "Ana Student",
        "picture": "https://example.com/ana.png",
    }
    claims.update(overrides)
    return {k: v for k, v in claims.items() if v is not None}


def verifier_returning(claims, allowed_domains=()):
    calls = []
    
    def token_verifier(id_token, audience):
        calls.append((id_token, list(audience)))
        return claims
    
    verifier = GoogleCredentialVerifier([CLIENT_ID], allowed_domains, token_verifier=token_verifier)
    return verifier, calls


class TestGoogleCredentialVerifier:
    
    @pytest.mark.asyncio
    async def test_valid_token_yields_identity(self):
        verifier, calls = verifier_returning(make_claims())
        
        identity = await verifier.verify("id-token")
        
        assert identity.subject_id == "1234567890"
        assert identity.email == "ana@uni.edu"
        assert identity.email_verified is True
        assert identity.hosted_domain == "uni.edu"
        assert identity.name == "Ana Student"
        assert identity.avatar_url == "https://example.com/ana.png"
        assert calls == [("id-token", [CLIENT_ID])]
    
    @pytest.mark.asyncio
    async def test_library_rejection_is_invalid_credential(self):
        def token_verifier(id_token, audience):
            raise ValueError("Token expired")
        
        verifier = GoogleCredentialVerifier([CLIENT_ID], token_verifier=token_verifier)
        
        with pytest.raises(InvalidCredentialError, match="Invalid Google token"):
            await verifier.verify("id-token")
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["sub", "email"])
    async def test_missing_subject_or_email(self, missing):
        verifier, _ = verifier_returning(make_claims(**{missing: None}))
        
        with pytest.raises(InvalidCredentialError, match="Invalid Google payload"):
            await verifier.verify("id-token")
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [False, "false", None])
    async def test_unverified_email_is_rejected(self, value):
        verifier, _ = verifier_returning(make_claims(email_verified=value))
        
        with pytest.raises(InvalidCredentialError, match="not verified"):
            await verifier.verify("id-token")
    
    @pytest.mark.asyncio
    async def test_string_true_email_verified_is_accepted(self):
        verifier, _ = verifier_returning(make_claims(email_verified="true"))
        
        identity = await verifier.verify("id-token")
        
        assert identity.email_verified is True
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("issuer", ["accounts.google.com", "https://accounts.google.com"])
    async def test_both_google_issuers_are_accepted(self, issuer):
        verifier, _ = verifier_returning(make_claims(iss=issuer))
        
        identity = await verifier.verify("id-token")
        
        assert identity.issuer == issuer
    
    @pytest.mark.asyncio
    async def test_foreign_issuer_is_rejected(self):
        verifier, _ = verifier_returning(make_claims(iss="https://evil.example.com"))
        
        with pytest.raises(InvalidCredentialError, match="issuer"):
            await verifier.verify("id-token")
    
    def test_requires_client_id(self):
        with pytest.raises(ValueError):
            GoogleCredentialVerifier(["", ""], token_verifier=lambda t, a: {})


class TestDomainAllowList:
    
    @pytest.mark.asyncio
    async def test_empty_allow_list_accepts_any_domain(self):
        verifier, _ = verifier_returning(make_claims(email="bob@gmail.com", hd=None))
        
        identity = await verifier.verify("id-token")
        
        assert identity.email == "bob@gmail.com"
    
    @pytest.mark.asyncio
    async def test_email_domain_in_list_is_accepted(self):
        verifier, _ = verifier_returning(make_claims(hd=None), allowed_domains=["uni.edu"])
        
        identity = await verifier.verify("id-token")
        
        assert identity.email_domain == "uni.edu"
    
    @pytest.mark.asyncio
    async def test_hosted_domain_in_list_is_accepted(self):
        claims = make_claims(email="ana@alumni.uni.edu", hd="uni.edu")
        verifier, _ = verifier_returning(claims, allowed_domains=["uni.edu"])
        
        identity = await verifier.verify("id-token")
        
        assert identity.hosted_domain == "uni.edu"
    
    @pytest.mark.asyncio
    async def test_outside_domain_is_forbidden(self):
        verifier, _ = verifier_returning(
            make_claims(email="bob@gmail.com", hd=None), allowed_domains=["uni.edu"]
        )
        
        with pytest.raises(DomainNotAllowedError) as exc_info:
            await verifier.verify("id-token")
        
        assert exc_info.value.status_code == 403
    
    @pytest.mark.asyncio
    async def test_allow_list_is_case_insensitive(self):
        verifier, _ = verifier_returning(
            make_claims(email="Ana@UNI.EDU", hd=None), allowed_domains=[" Uni.Edu "]
        )
        
        identity = await verifier.verify("id-token")
        
        assert identity.email == "Ana@UNI.EDU"
    
    @pytest.mark.asyncio
    async def test_hosted_domain_alone_is_sufficient(self):
        allowed = ["university.edu"]
        
        rejected, _ = verifier_returning(make_claims(email="a@other.com", hd=None), allowed)
        with pytest.raises(DomainNotAllowedError):
            await rejected.verify("id-token")
        
        accepted, _ = verifier_returning(make_claims(email="a@other.com", hd="university.edu"), allowed)
        identity = await accepted.verify("id-token")
        assert identity.email == "a@other.com"
