from jose import jwt, JWTError
from datetime import datetime, timedelta, timezone
from fastapi import Request
from typing import Optional
import secrets
import logging

from .config import Settings
from .schemas import SessionClaims

logger = logging.getLogger(__name__)

ALGORITHM = 'HS256'
SESSION_COOKIE = 'session'
SESSION_MAX_AGE = timedelta(hours=24)
LOGIN_PATH = '/admin/login'


class AdminRequired(Exception):
    """Raised by the admin gate; the app turns it into a redirect to the login page."""


def create_session_token(secret: str, expires_delta: timedelta = SESSION_MAX_AGE) -> str:
    expire = datetime.now(timezone.utc) + expires_delta
    return jwt.encode({'isAdmin': True, 'exp': expire}, secret, algorithm=ALGORITHM)


def decode_session_token(token: Optional[str], secret: str) -> Optional[SessionClaims]:
    if not token:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except JWTError:
        return None
    return SessionClaims.model_validate(payload)


def is_admin(claims: Optional[SessionClaims]) -> bool:
    return claims is not None and claims.is_admin


def check_credentials(settings: Settings, username: str, password: str) -> bool:
    # an unset username or password disables login instead of matching blanks
    if not (settings.admin_username and settings.admin_password):
        return False
    user_ok = secrets.compare_digest(username.encode('utf-8'), settings.admin_username.encode('utf-8'))
    pass_ok = secrets.compare_digest(password.encode('utf-8'), settings.admin_password.encode('utf-8'))
    return user_ok and pass_ok


def set_session_cookie(response, token: str):
    response.set_cookie(
        SESSION_COOKIE,
        token,
        max_age=int(SESSION_MAX_AGE.total_seconds()),
        httponly=True,
        samesite='lax',
    )


def clear_session_cookie(response):
    response.delete_cookie(SESSION_COOKIE, httponly=True, samesite='lax')


def get_session_claims(request: Request) -> Optional[SessionClaims]:
    settings: Settings = request.app.state.settings
    return decode_session_token(request.cookies.get(SESSION_COOKIE), settings.session_secret)


def require_admin(request: Request) -> SessionClaims:
    claims = get_session_claims(request)
    if not is_admin(claims):
        raise AdminRequired()
    return claims
