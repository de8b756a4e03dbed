from dataclasses import dataclass

STARTUP = "startup"
INVESTOR = "investor"
USER_TYPES = (STARTUP, INVESTOR)


@dataclass
class SessionContext:
    user_id: str
    user_type: str           # "startup" | "investor"

    @classmethod
    def from_claims(cls, payload: dict) -> "SessionContext":
        return cls(
            user_id=payload["id"],
            user_type=payload["userType"]
        )
