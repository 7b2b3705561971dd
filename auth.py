"""
User sessions — Flask-Login blueprint.

Provides signup, login, and logout routes. Login is by email only; there are
no passwords. The session stores nothing but the user id, which is resolved
against the dataset on every request.
"""

from __future__ import annotations

from flask import Blueprint, jsonify, redirect, render_template, request, url_for
from flask_login import LoginManager, UserMixin, current_user, login_user, logout_user

from audit import log_event
from errors import DuplicateEmailError, NotFoundError, ValidationError
from extensions import limiter
from helpers import account_service, wants_json
from models import User as AccountUser

auth_bp = Blueprint("auth", __name__)
login_manager = LoginManager()
login_manager.login_view = "auth.login"


class SessionUser(UserMixin):
    """Wraps a dataset user for Flask-Login."""

    def __init__(self, id: str, name: str, email: str):
        self.id = id
        self.name = name
        self.email = email

    @staticmethod
    def from_account(user: AccountUser) -> SessionUser:
        return SessionUser(user.id, user.name, user.email)


@login_manager.user_loader
def load_user(user_id):
    try:
        return SessionUser.from_account(account_service().find_by_id(user_id))
    except NotFoundError:
        return None


@login_manager.unauthorized_handler
def unauthorized():
    if wants_json():
        return jsonify({"error": "login required"}), 401
    return redirect(url_for("auth.login", next=request.path))


@auth_bp.route("/signup", methods=["GET", "POST"])
@limiter.limit("10 per hour", methods=["POST"])
def signup():
    if current_user.is_authenticated:
        return redirect(url_for("core.dashboard"))

    if request.method == "POST":
        try:
            user = account_service().create_user(
                request.form.get("name"),
                request.form.get("email"),
            )
        except (ValidationError, DuplicateEmailError) as e:
            return render_template("signup.html", error=str(e)), 400

        log_event("signup", user.id, f"email={user.email}")
        login_user(SessionUser.from_account(user))
        return redirect(url_for("core.dashboard"))

    return render_template("signup.html", error=None)


@auth_bp.route("/login", methods=["GET", "POST"])
@limiter.limit("20 per 15 minutes", methods=["POST"])
def login():
    if current_user.is_authenticated:
        return redirect(url_for("core.dashboard"))

    if request.method == "POST":
        email = request.form.get("email", "")
        try:
            user = account_service().find_by_email(email)
        except NotFoundError:
            log_event("login_failed", None, f"email={email.strip()}")
            return render_template("login.html", error="No user found with that email."), 400

        login_user(SessionUser.from_account(user))
        log_event("login", user.id)
        next_page = request.args.get("next")
        if next_page and next_page.startswith("/") and not next_page.startswith("//"):
            return redirect(next_page)
        return redirect(url_for("core.dashboard"))

    return render_template("login.html", error=None)


@auth_bp.route("/logout")
def logout():
    if current_user.is_authenticated:
        log_event("logout", current_user.id)
    logout_user()
    return redirect(url_for("core.index"))
