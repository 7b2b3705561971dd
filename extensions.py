"""
Flask extensions shared across blueprints.

The limiter is created unbound here and attached in create_app() so route
modules can decorate views without importing the app.
"""

from __future__ import annotations

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

limiter = Limiter(key_func=get_remote_address, default_limits=["200 per hour"])
