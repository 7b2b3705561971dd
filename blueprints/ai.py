"""AI tutor chat and grammar-correction routes (placeholder responses)."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, render_template, request
from flask_login import current_user, login_required

from tutor import correct_grammar, tutor_reply

bp = Blueprint("ai", __name__)


@bp.record_once
def _exempt_grammar_from_csrf(state: Any) -> None:
    """JSON clients call the grammar endpoint without a CSRF token."""
    csrf = state.app.extensions.get("csrf")
    if csrf:
        csrf.exempt(grammar)


@bp.route("/ai/chat")
@login_required
def chat_page():
    return render_template("ai_chat.html", response=None, input="")


@bp.route("/ai/chat", methods=["POST"])
@login_required
def chat_send():
    message = request.form.get("message", "")
    return render_template("ai_chat.html", response=tutor_reply(message), input=message)


@bp.route("/ai/grammar", methods=["POST"])
def grammar():
    if not current_user.is_authenticated:
        return jsonify({"error": "login required"}), 401
    if request.is_json:
        payload = request.get_json(silent=True)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return jsonify({"error": "body must be a JSON object"}), 400
        text = payload.get("text", "")
    else:
        text = request.form.get("text", "")
    if not isinstance(text, str):
        return jsonify({"error": "text must be a string"}), 400
    return jsonify(correct_grammar(text))
