"""Service container wiring repositories and services together.

Routers reach these through ``request.app.state.services``.
"""

import logging
from dataclasses import dataclass

from .config.settings import AppSettings
from .database.connection import DatabaseManager
from .features.auth.adapters.google_verifier import GoogleCredentialVerifier
from .features.auth.repositories.auth_store import PostgresAuthStore
from .features.auth.services.auth_gateway import AuthGateway
from .features.auth.services.session_rotation import SessionRotationEngine
from .features.auth.services.token_issuer import TokenIssuer
from .features.students.repositories.subject_repository import SubjectRepository
from .features.students.services.student_service import StudentService
from .features.study_groups.repositories.study_group_repository import StudyGroupRepository
from .features.study_groups.services.study_group_service import StudyGroupService
from .features.users.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    database: DatabaseManager
    token_issuer: TokenIssuer
    users: UserRepository
    auth_gateway: AuthGateway
    student_service: StudentService
    study_group_service: StudyGroupService


def build_services(settings: AppSettings, database: DatabaseManager) -> ServiceContainer:
    """Build every service for one running application."""
    token_issuer = TokenIssuer.from_settings(settings)
    store = PostgresAuthStore(database)
    users = UserRepository(database)
    
    verifier = GoogleCredentialVerifier(
        client_ids=settings.accepted_client_ids,
        allowed_domains=settings.allowed_domains,
    )
    auth_gateway = AuthGateway(
        store=store,
        credential_verifier=verifier,
        rotation_engine=SessionRotationEngine(store, token_issuer),
    )
    
    if not settings.allowed_domains:
        logger.warning("GOOGLE_ALLOWED_DOMAINS is empty; any verified Google account may register")
    
    return ServiceContainer(
        database=database,
        token_issuer=token_issuer,
        users=users,
        auth_gateway=auth_gateway,
        student_service=StudentService(users, SubjectRepository(database)),
        study_group_service=StudyGroupService(StudyGroupRepository(database), users),
    )
