from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.core.logger import logger
from app.core.session import SessionContext
from app.dependencies.auth import get_current_session

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/logout")
def logout(request: Request, settings: Settings = Depends(get_settings)):
    try:
        response = JSONResponse({"message": "Logged out successfully"})
        # expired Set-Cookie, the browser drops its copy
        response.delete_cookie(settings.TOKEN_COOKIE_NAME, path="/")
    except Exception:
        logger.exception("LOGOUT FAILED")
        return JSONResponse({"error": "Failed to logout"}, status_code=500)

    had_token = settings.TOKEN_COOKIE_NAME in request.cookies
    logger.info(f"LOGOUT | had_token={had_token}")
    return response


@router.get("/session")
def get_session(
    request: Request,
    session: SessionContext = Depends(get_current_session),
    settings: Settings = Depends(get_settings)
):
    """
    Who the token says the caller is. Meant for the UI to show the right
    navigation, access decisions stay with the gate.
    """
    source = "cookie" if request.cookies.get(settings.TOKEN_COOKIE_NAME) else "header"

    logger.info(
        f"SESSION | user_id={session.user_id} | user_type={session.user_type} | source={source}"
    )

    return {
        "status": "authenticated",
        "user_id": session.user_id,
        "user_type": session.user_type,
        "token_source": source
    }
