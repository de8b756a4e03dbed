"""
Route access policy.

Paths are classified by an ordered table of prefix rules, first match wins.
A new scoped area is one more ``RouteRule`` in the table, nothing else.
"""
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from app.core.session import STARTUP, INVESTOR

PUBLIC = "public"
AUTHENTICATED = "authenticated"

# Static assets never reach the gate.
EXCLUDED_PATH_PATTERN = re.compile(
    r"^/(?:_next/static|_next/image|favicon\.ico"
    r"|.*\.(?:png|jpg|jpeg|webp|svg|gif))"
)


@dataclass(frozen=True)
class RouteRule:
    prefix: str
    scope: str                   # PUBLIC | "startup" | "investor"
    exact: bool = False

    def matches(self, path: str) -> bool:
        if self.exact:
            return path == self.prefix
        return path.startswith(self.prefix)


DEFAULT_RULES = (
    RouteRule("/", PUBLIC, exact=True),
    RouteRule("/auth", PUBLIC),
    RouteRule("/api/auth", PUBLIC),
    RouteRule("/startups", STARTUP),
    RouteRule("/investor", INVESTOR),
)


def is_excluded_path(path: str) -> bool:
    return EXCLUDED_PATH_PATTERN.match(path) is not None


class AccessPolicy:
    def __init__(self, rules: Sequence[RouteRule] = DEFAULT_RULES):
        self.rules = tuple(rules)

    def match(self, path: str) -> Optional[RouteRule]:
        for rule in self.rules:
            if rule.matches(path):
                return rule
        return None

    def classify(self, path: str) -> str:
        rule = self.match(path)
        if rule is None:
            return AUTHENTICATED
        return rule.scope

    def is_public(self, path: str) -> bool:
        return self.classify(path) == PUBLIC

    def can_access(self, path: str, user_type: Optional[str]) -> bool:
        if not user_type:
            return False

        scope = self.classify(path)
        if scope in (PUBLIC, AUTHENTICATED):
            return True
        return scope == user_type
