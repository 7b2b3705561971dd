"""
Audit logging — records account and progress events.

Events go to a dedicated ``audit`` logger so they can be routed separately
from access logs.
"""

from __future__ import annotations

import logging

from flask import has_request_context, request

logger = logging.getLogger("audit")


def log_event(action: str, user_id: str | None = None, detail: str = "") -> None:
    """Emit one structured audit line for ``action``."""
    ip = (request.remote_addr or "") if has_request_context() else ""
    logger.info("audit: %s user_id=%s detail=%s ip=%s", action, user_id, detail, ip)
