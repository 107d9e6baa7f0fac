# resumeai/services/usage.py
from __future__ import annotations
import logging

logger = logging.getLogger(__name__)

INCREMENT_RPC = "increment_total_tokens"


class UsageRecorder:
    """
    Adds a request's token usage to the principal's `users.total_tokens`.
    The increment happens inside a Postgres function so it is atomic.
    Best-effort: failures are logged and never reach the caller.
    """

    def __init__(self, supabase):
        self.supabase = supabase

    def record(self, principal: str, total_tokens: int) -> bool:
        try:
            self.supabase.rpc(
                INCREMENT_RPC, {"p_user_id": principal, "p_amount": int(total_tokens)}
            ).execute()
            return True
        except Exception:
            logger.exception("usage increment failed for user %s (+%s tokens)", principal, total_tokens)
            return False
