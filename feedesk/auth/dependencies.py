from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from feedesk.auth.schemas import CurrentUser
from feedesk.auth.security import decode_access_token
from feedesk.auth.services import get_admin_user


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login-oauth")


async def get_current_user(token: str = Depends(oauth2_scheme)) -> CurrentUser:
    """Resolve the authenticated user from the access token."""
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = decode_access_token(token)
    except JWTError:
        raise credentials_exception

    admin = get_admin_user()
    if payload.get("sub") != admin.id or payload.get("email") != admin.email:
        raise credentials_exception

    return CurrentUser(**admin.model_dump())
