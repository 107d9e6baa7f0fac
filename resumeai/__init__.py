# resumeai/__init__.py
from __future__ import annotations
import logging
from datetime import datetime, timezone

from flask import Flask
from flask_cors import CORS

from .config import get_config
from .extensions import init_clients
from .routes import register_routes


def create_app(env: str | None = None, *, supabase=None, openai_client=None) -> Flask:
    """
    Build the Flask app hosting the serverless functions.
    `supabase` / `openai_client` may be injected (tests, local tooling);
    otherwise they are built from config.
    """
    config = get_config(env)
    app = Flask(__name__)
    app.config.from_object(config)
    app.config["RESUMEAI_CONFIG"] = config

    # CORS & logging
    CORS(app, origins=config.CORS_ORIGINS or "*")
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO))

    # Clients are built once here and reused by every request
    init_clients(app, supabase=supabase, openai_client=openai_client)

    register_routes(app)

    @app.get("/healthz")
    def health():
        return {"ok": True, "ts": datetime.now(timezone.utc).isoformat()}

    return app
