"""
Gate denial reasons.

Every reason ends in the same redirect to the login page, the classes only
exist so the gate can say internally why it said no.
"""


class AccessDenied(Exception):
    reason = "denied"


class NoCredential(AccessDenied):
    reason = "no_credential"


class InvalidSignatureOrMalformed(AccessDenied):
    reason = "invalid_token"


class IncompleteClaims(AccessDenied):
    reason = "incomplete_claims"


class RoleMismatch(AccessDenied):
    reason = "role_mismatch"
