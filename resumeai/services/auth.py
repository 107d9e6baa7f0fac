# resumeai/services/auth.py
from __future__ import annotations
import logging
import re
from typing import Optional

logger = logging.getLogger(__name__)

_BEARER_RE = re.compile(r"^Bearer (.+)$")


def bearer_token(header: Optional[str]) -> Optional[str]:
    """Pull the token out of an `Authorization: Bearer <token>` header value."""
    if not header or not isinstance(header, str):
        return None
    m = _BEARER_RE.match(header)
    if not m:
        return None
    return m.group(1).strip() or None


class TokenVerifier:
    """
    Confirms a bearer token with Supabase Auth and returns the principal id.
    Never raises: provider errors (expired, tampered, network) become None.
    """

    def __init__(self, supabase):
        self.supabase = supabase

    def verify(self, header: Optional[str]) -> Optional[str]:
        token = bearer_token(header)
        if not token:
            return None
        try:
            res = self.supabase.auth.get_user(token)
        except Exception:
            logger.warning("token verification failed", exc_info=True)
            return None
        user = getattr(res, "user", None) or {}
        auth_id = getattr(user, "id", None) or (user.get("id") if isinstance(user, dict) else None)
        if not auth_id:
            logger.info("token verified without a user id; treating as unauthenticated")
            return None
        return str(auth_id)
