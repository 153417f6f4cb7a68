"""Login for the single configured administrator account."""

import logging
from datetime import datetime, timezone
from functools import lru_cache

from feedesk.auth.schemas import LoginRequest, LoginResponse, UserInfo
from feedesk.auth.security import create_access_token, hash_password, verify_password
from feedesk.core.config import settings
from feedesk.core.enums import UserRole
from feedesk.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

ADMIN_USER_ID = "1"


@lru_cache(maxsize=1)
def _hash_configured_password(plain_password: str) -> str:
    return hash_password(plain_password)


def admin_password_hash() -> str:
    """ADMIN_PASSWORD_HASH when configured, else ADMIN_PASSWORD hashed once per value."""
    if settings.admin_password_hash:
        return settings.admin_password_hash
    return _hash_configured_password(settings.admin_password)


def get_admin_user() -> UserInfo:
    return UserInfo(
        id=ADMIN_USER_ID,
        name=settings.admin_name,
        email=settings.admin_email,
        role=UserRole.ADMIN,
        institution_id=settings.institution_id,
    )


async def login_user(payload: LoginRequest) -> LoginResponse:
    admin = get_admin_user()
    if payload.email.lower() != admin.email.lower() or not verify_password(
        payload.password, admin_password_hash()
    ):
        logger.warning("Rejected login for %s", payload.email)
        raise AuthenticationError()

    issued_at = datetime.now(timezone.utc)
    access_token = create_access_token(
        subject={
            "sub": admin.id,
            "email": admin.email,
            "role": admin.role.value,
            "institution_id": admin.institution_id,
            "iat": int(issued_at.timestamp()),
        }
    )
    logger.info("User %s logged in", admin.email)
    return LoginResponse(access_token=access_token, user=admin, issued_at=issued_at)
