"""
Caller identification for mutating product routes.

Admin callers present ``Authorization: Bearer <token>``; tokens come from
the ``API_TOKENS`` setting. Reads are public and never consult this.
"""

from __future__ import annotations

import hmac

from flask import request


def _bearer_token(header: str | None) -> str:
    scheme, _, token = (header or "").strip().partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


class TokenAuthorizer:
    def __init__(self, tokens: dict[str, str] | None = None):
        # token -> caller id
        self.tokens = dict(tokens or {})

    def caller_for_token(self, token: str) -> str | None:
        if not token:
            return None
        caller = None
        # Compare against every entry so timing does not reveal matches.
        for known, known_caller in self.tokens.items():
            if hmac.compare_digest(known.encode("utf-8"), token.encode("utf-8")):
                caller = known_caller
        return caller

    def current_caller_id(self) -> str | None:
        """Caller id of the current request, or None when anonymous."""
        return self.caller_for_token(_bearer_token(request.headers.get("Authorization")))
