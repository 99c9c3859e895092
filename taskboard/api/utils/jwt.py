from typing import Optional

from jose import JWTError, jwt

from config import ApplicationConfig

JWT_ALGORITHM = "HS256"


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode a JWT issued by the identity provider

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid, expired or missing user_id
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except JWTError:
        return None
    if not payload.get("user_id"):
        return None
    return payload
