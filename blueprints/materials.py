"""Material catalog, search, and completion routes."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, redirect, render_template, request, url_for
from flask_login import login_required

from audit import log_event
from helpers import catalog_service, current_user_id, progress_service

bp = Blueprint("materials", __name__)


@bp.record_once
def _exempt_api_from_csrf(state: Any) -> None:
    """Exempt the JSON completion endpoint; the form route stays protected."""
    csrf = state.app.extensions.get("csrf")
    if csrf:
        csrf.exempt(api_material_complete)


@bp.route("/materials")
def materials_list():
    q = request.args.get("q", "")
    catalog = catalog_service()
    return render_template(
        "materials.html",
        materials=catalog.list_materials(q),
        types=catalog.material_types(),
        q=q,
    )


@bp.route("/materials/<material_id>")
def material_detail(material_id):
    material = catalog_service().get_material(material_id)
    uid = current_user_id()
    completed = progress_service().is_completed(uid, material_id) if uid else False
    return render_template("material.html", material=material, completed=completed)


@bp.route("/materials/<material_id>/complete", methods=["POST"])
@login_required
def material_complete(material_id):
    _complete(material_id)
    return redirect(url_for("materials.material_detail", material_id=material_id))


# ── JSON API ──────────────────────────────────────────

@bp.route("/api/materials")
def api_materials():
    q = request.args.get("q", "")
    materials = catalog_service().list_materials(q)
    return jsonify({
        "q": q,
        "count": len(materials),
        "materials": [m.to_dict() for m in materials],
    })


@bp.route("/api/materials/<material_id>")
def api_material(material_id):
    return jsonify(catalog_service().get_material(material_id).to_dict())


@bp.route("/api/materials/<material_id>/complete", methods=["POST"])
@login_required
def api_material_complete(material_id):
    user, awarded = _complete(material_id)
    return jsonify({
        "points": user.points,
        "completed": user.completed,
        "awarded": awarded,
    })


@bp.route("/api/progress")
@login_required
def api_progress():
    summary = progress_service().progress_summary(current_user_id())
    return jsonify({
        "points": summary.points,
        "completed_count": summary.completed_count,
        "total_materials": summary.total_materials,
        "percent_complete": summary.percent_complete,
    })


def _complete(material_id: str):
    """Complete ``material_id`` for the session user; returns (user, points awarded)."""
    uid = current_user_id()
    result = progress_service().record_completion(uid, material_id)
    if result.awarded:
        log_event("material_completed", uid, f"material={material_id} points={result.user.points}")
    return result.user, result.awarded
