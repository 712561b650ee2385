"""
Service layer for business logic.
"""
from diary_api.services.credential_store import CredentialStore
from diary_api.services.auth_service import AuthService
from diary_api.services.entry_service import EntryService

__all__ = [
    "CredentialStore",
    "AuthService",
    "EntryService",
]
