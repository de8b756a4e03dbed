from typing import Optional, Sequence

from app.core.errors import NoCredential, IncompleteClaims, RoleMismatch
from app.core.policy import AccessPolicy, RouteRule, DEFAULT_RULES
from app.core.security import decode_access_token, HMAC_ALGORITHMS
from app.core.session import SessionContext


class AccessGate:
    """
    Per-request access decision.

    ``check`` returns None for public paths, the verified SessionContext for
    everything it lets through, and raises an AccessDenied subclass
    otherwise. It keeps no state between calls.
    """

    def __init__(
        self,
        secret: str,
        algorithms: Optional[Sequence[str]] = None,
        rules: Sequence[RouteRule] = DEFAULT_RULES
    ):
        self.secret = secret
        self.algorithms = list(algorithms or HMAC_ALGORITHMS)
        self.policy = AccessPolicy(rules)

    def check(self, path: str, token: Optional[str]) -> Optional[SessionContext]:
        if self.policy.is_public(path):
            return None

        if not token:
            raise NoCredential()

        payload = decode_access_token(token, self.secret, self.algorithms)

        if not payload.get("id") or not payload.get("userType"):
            raise IncompleteClaims()

        session = SessionContext.from_claims(payload)

        if not self.policy.can_access(path, session.user_type):
            raise RoleMismatch(session.user_type)

        return session
