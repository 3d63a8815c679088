"""
GitHub token lookup: environment first, then AWS Secrets Manager.
"""

from __future__ import annotations

import importlib
import json
import os

from .config import Settings

TOKEN_KEY = "GITHUB_TOKEN"


def _boto3():
    # Allow tests to monkeypatch module-level `boto3` symbol.
    return globals().get("boto3") or importlib.import_module("boto3")


def _from_secrets_manager(secret_id: str) -> str | None:
    client = _boto3().client("secretsmanager")
    resp = client.get_secret_value(SecretId=secret_id)
    raw = resp.get("SecretString") or ""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        # Plain-text secret holding just the token
        return raw.strip() or None
    if isinstance(data, dict):
        token = data.get(TOKEN_KEY)
        return str(token) if token else None
    if isinstance(data, str):
        return data.strip() or None
    return None


def load_github_token(settings: Settings) -> str | None:
    token = os.getenv(TOKEN_KEY)
    if token:
        return token
    if settings.token_secret_name:
        return _from_secrets_manager(settings.token_secret_name)
    return None
