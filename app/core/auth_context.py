from fastapi import Depends, Request, HTTPException

from app.core.config import Settings, get_settings


def get_current_token(
    request: Request,
    settings: Settings = Depends(get_settings)
) -> str:
    # cookie (WEB)
    token = request.cookies.get(settings.TOKEN_COOKIE_NAME)

    # Authorization header (API clients)
    if not token:
        auth = request.headers.get("Authorization")
        if auth and auth.startswith("Bearer "):
            token = auth.split(" ", 1)[1]

    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")

    return token
