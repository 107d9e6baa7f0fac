# resumeai/extensions.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from openai import OpenAI
from supabase import Client, create_client

from resumeai.services.auth import TokenVerifier
from resumeai.services.usage import UsageRecorder

logger = logging.getLogger(__name__)

EXTENSION_KEY = "resumeai"


@dataclass
class Clients:
    """Everything a function handler talks to, built once per process."""

    verifier: TokenVerifier
    usage: UsageRecorder
    openai: Optional[OpenAI]


# Small factory to build a Supabase client from config
def init_supabase(config) -> Client:
    url = config.SUPABASE_URL
    key = config.SUPABASE_SERVICE_ROLE_KEY
    if not url or not key:
        raise RuntimeError("Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY")
    return create_client(url, key)


# OpenAI client, or None when no key is configured (handlers answer 500 for that)
def init_openai(config) -> Optional[OpenAI]:
    api_key = config.OPENAI_API_KEY
    if not api_key:
        logger.warning("OPENAI_API_KEY not set; completion functions will fail with 500")
        return None
    kwargs = {"api_key": api_key, "max_retries": 0}
    if config.OPENAI_BASE_URL:
        kwargs["base_url"] = config.OPENAI_BASE_URL
    return OpenAI(**kwargs)


def build_clients(supabase, openai_client: Optional[OpenAI]) -> Clients:
    return Clients(
        verifier=TokenVerifier(supabase),
        usage=UsageRecorder(supabase),
        openai=openai_client,
    )


def init_clients(app, supabase=None, openai_client=None) -> Clients:
    """
    Attach the client bundle to `app` exactly once. Later calls return the
    existing bundle untouched.
    """
    existing = app.extensions.get(EXTENSION_KEY)
    if existing is not None:
        return existing
    config = app.config["RESUMEAI_CONFIG"]
    if supabase is None:
        supabase = init_supabase(config)
    if openai_client is None:
        openai_client = init_openai(config)
    clients = build_clients(supabase, openai_client)
    app.extensions[EXTENSION_KEY] = clients
    return clients


def get_clients(app) -> Clients:
    clients = app.extensions.get(EXTENSION_KEY)
    if clients is None:
        raise RuntimeError("resumeai clients not initialised; call init_clients(app) first")
    return clients
