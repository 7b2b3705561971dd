"""
Blueprint registration for StudyHub.

All blueprints are registered without URL prefixes.
"""

from __future__ import annotations


def register_blueprints(app):
    from blueprints.core import bp as core_bp
    from blueprints.materials import bp as materials_bp
    from blueprints.ai import bp as ai_bp

    app.register_blueprint(core_bp)
    app.register_blueprint(materials_bp)
    app.register_blueprint(ai_bp)
