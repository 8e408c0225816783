import hmac
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from hr_intranet.config import Settings


def create_token(session_id: str, settings: Settings) -> str:
    payload = {"sid": session_id}
    if settings.session_ttl_minutes > 0:
        payload["exp"] = datetime.now(timezone.utc) + timedelta(minutes=settings.session_ttl_minutes)
    return jwt.encode(payload, settings.secret_key, algorithm=settings.session_algorithm)


def decode_token(token: str | None, settings: Settings) -> str | None:
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.session_algorithm])
    except JWTError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) and session_id else None


def check_credentials(username: object, password: object, settings: Settings) -> bool:
    """Exact username match plus a constant-time password comparison."""
    if not isinstance(username, str) or not isinstance(password, str):
        return False
    if not settings.admin_password:
        return False
    password_ok = hmac.compare_digest(password.encode(), settings.admin_password.encode())
    return username == settings.admin_username and password_ok
