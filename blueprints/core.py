"""Core routes — home, dashboard, health checks."""

from __future__ import annotations

import logging
import time

from flask import Blueprint, jsonify, render_template
from flask_login import login_required

from errors import StoreError
from helpers import account_service, catalog_service, current_user_id, progress_service

logger = logging.getLogger(__name__)

bp = Blueprint("core", __name__)


@bp.route("/")
def index():
    return render_template("index.html")


@bp.route("/dashboard")
@login_required
def dashboard():
    uid = current_user_id()
    user = account_service().find_by_id(uid)
    summary = progress_service().progress_summary(uid)
    materials = catalog_service().list_materials()
    return render_template("dashboard.html", user=user, summary=summary, materials=materials)


# ── Health checks ─────────────────────────────────────────

_start_time = time.time()


@bp.route("/health")
def health():
    uptime = int(time.time() - _start_time)
    return jsonify({"status": "ok", "uptime_seconds": uptime})


@bp.route("/ready")
def ready():
    try:
        users = account_service().count_users()
    except StoreError as exc:
        logger.error("Readiness check failed: %s", exc, exc_info=True)
        return jsonify({"status": "not_ready"}), 503
    return jsonify({"status": "ready", "users": users}), 200


@bp.route("/live")
def live():
    return jsonify({"status": "alive"}), 200
