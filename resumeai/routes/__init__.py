# resumeai/routes/__init__.py
from __future__ import annotations
from flask import Flask


def register_routes(app: Flask) -> None:
    from .functions import functions_bp

    app.register_blueprint(functions_bp)
