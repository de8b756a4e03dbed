from fastapi import Depends, HTTPException, status

from app.core.auth_context import get_current_token
from app.core.config import Settings, get_settings
from app.core.errors import InvalidSignatureOrMalformed
from app.core.security import decode_access_token
from app.core.session import SessionContext


def get_current_session(
    token: str = Depends(get_current_token),
    settings: Settings = Depends(get_settings)
) -> SessionContext:
    try:
        payload = decode_access_token(
            token,
            settings.JWT_SECRET,
            settings.JWT_ALGORITHMS
        )
    except InvalidSignatureOrMalformed:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        )

    if not payload.get("id") or not payload.get("userType"):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token"
        )

    return SessionContext.from_claims(payload)
