from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from app.core.errors import InvalidSignatureOrMalformed

ALGORITHM = "HS256"
# any HMAC variant is accepted for a shared secret
HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24


def create_access_token(
    data: dict,
    secret: str,
    expires_delta: Optional[timedelta] = None,
    algorithm: str = ALGORITHM
) -> str:
    to_encode = data.copy()
    if expires_delta is None:
        expires_delta = timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, secret, algorithm=algorithm)


def decode_access_token(token: str, secret: str, algorithms=None) -> dict:
    """
    Signature + exp check. Malformed, forged and expired tokens all end
    up as the same InvalidSignatureOrMalformed.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=list(algorithms or HMAC_ALGORITHMS)
        )
        return payload

    except JWTError as e:
        raise InvalidSignatureOrMalformed(str(e)) from e
