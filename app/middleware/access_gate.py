"""
Access gate middleware.

Sits in front of every page and API route. Requests either pass through
untouched or get redirected to the login page; the gate never answers with
an error body, whatever the reason for the denial.
"""
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.status import HTTP_307_TEMPORARY_REDIRECT

from app.core.errors import AccessDenied
from app.core.gate import AccessGate
from app.core.policy import is_excluded_path


class AccessGateMiddleware(BaseHTTPMiddleware):

    def __init__(
        self,
        app,
        gate: AccessGate,
        cookie_name: str = "token",
        login_path: str = "/auth/login"
    ):
        super().__init__(app)
        self.gate = gate
        self.cookie_name = cookie_name
        self.login_path = login_path

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path

        if is_excluded_path(path):
            return await call_next(request)

        token = request.cookies.get(self.cookie_name)

        try:
            session = self.gate.check(path, token)
        except AccessDenied:
            return RedirectResponse(
                url=self._login_url(request),
                status_code=HTTP_307_TEMPORARY_REDIRECT
            )

        request.state.session = session
        return await call_next(request)

    def _login_url(self, request: Request) -> str:
        return str(request.url.replace(path=self.login_path, query="", fragment=""))
