"""
Entry points for GitHub ``issue_comment`` events -> /assign, /unassign.

- ``lambda_handler``: AWS Lambda Function URL set as a GitHub webhook target.
- ``main``: GitHub Actions step (reads ``GITHUB_EVENT_PATH``) or local CLI.
"""

from __future__ import annotations

import argparse
import base64
import json
import logging
import time
from pathlib import Path
from typing import Any

from .config import Settings, load_settings
from .credentials import load_github_token
from .dispatcher import dispatch, triage
from .github import GitHubClient
from .models import Event, PayloadError, RepoRef, event_from_payload, repo_from_payload

logger = logging.getLogger(__name__)

COMMENT_EVENT = "issue_comment"
COMMENT_ACTION = "created"


def _configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    logger.setLevel(level)
    root = logging.getLogger()
    if root.level and root.level > level:
        root.setLevel(level)


def _rid(context: Any) -> str | None:
    try:
        return getattr(context, "aws_request_id", None)
    except Exception:
        return None


def _log(msg: str, **fields: Any) -> None:
    try:
        rec = {"msg": msg, **fields}
        logger.info(json.dumps(rec, ensure_ascii=False))
    except Exception:
        # Fallback to plain log
        logger.info("%s | %s", msg, fields)


def _response(status: int, body: dict[str, Any]) -> dict[str, Any]:
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, ensure_ascii=False),
    }


def _get_body(event: dict[str, Any]) -> dict[str, Any]:
    body = event.get("body")
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body or b"", validate=True)
        if isinstance(body, (bytes, bytearray)):
            body = body.decode("utf-8")
        data = json.loads(body or "{}")
    except ValueError:
        # binascii.Error, UnicodeDecodeError, JSONDecodeError and non-ASCII str input
        return {}
    return data if isinstance(data, dict) else {}


def _get_header(event: dict[str, Any], name: str) -> str | None:
    headers = event.get("headers") or {}
    for k, v in headers.items():
        if k.lower() == name.lower():
            return v
    return None


def _build_client(settings: Settings) -> GitHubClient | None:
    token = load_github_token(settings)
    if not token:
        return None
    return GitHubClient(settings.github_api_url, token, timeout=settings.http_timeout_seconds)


def _log_target(ev: Event, repo: RepoRef) -> dict[str, Any]:
    return {"repo": repo.full_name, "issue": ev.issue.number, "commenter": ev.commenter}


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    settings = load_settings()
    _configure_logging(settings)
    start_ts = time.time()
    rid = _rid(context)

    # 1) Only freshly created issue comments
    event_name = _get_header(event, "X-GitHub-Event")
    if event_name != COMMENT_EVENT:
        _log("ignored_event_type", rid=rid, event=event_name)
        return _response(200, {"result": "ignored"})

    payload = _get_body(event)
    if payload.get("action") != COMMENT_ACTION:
        _log("ignored_action", rid=rid, action=payload.get("action"))
        return _response(200, {"result": "ignored"})

    # 2) Normalize
    try:
        ev = event_from_payload(payload)
        repo = repo_from_payload(payload, settings.github_repository)
    except PayloadError as e:
        _log("ignored_bad_payload", rid=rid, error=str(e))
        return _response(200, {"result": "ignored"})

    # 3) Bot / unrecognized text need no API access
    ignored = triage(ev)
    if ignored is not None:
        _log(ignored.value, rid=rid, **_log_target(ev, repo))
        return _response(200, {"result": ignored.value})

    # 4) Client
    client = _build_client(settings)
    if client is None:
        _log("config_error_missing_token", rid=rid)
        return _response(500, {"error": "config_error", "detail": "GITHUB_TOKEN not found"})

    # 5) Dispatch
    try:
        outcome = dispatch(ev, repo, client)
    except Exception as e:
        logger.exception("GitHub call failed")
        _log("github_error", rid=rid, error=str(e), **_log_target(ev, repo))
        return _response(500, {"error": f"github call failed: {e}"})

    _log(
        "dispatched",
        rid=rid,
        outcome=outcome.value,
        ms_total=int((time.time() - start_ts) * 1000),
        **_log_target(ev, repo),
    )
    return _response(200, {"result": outcome.value})


def _parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="issue-assign-bot",
        description="Handle /assign and /unassign issue comments from a GitHub event payload",
    )
    parser.add_argument(
        "--event-path",
        default=settings.event_path,
        help="Path to the event JSON (default: $GITHUB_EVENT_PATH)",
    )
    parser.add_argument(
        "--event-name",
        default=settings.event_name or COMMENT_EVENT,
        help="GitHub event name (default: $GITHUB_EVENT_NAME or issue_comment)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(message)s")
    _configure_logging(settings)

    parser = _parser(settings)
    args = parser.parse_args(argv)
    if not args.event_path:
        parser.error("no event payload: pass --event-path or set GITHUB_EVENT_PATH")

    if args.event_name != COMMENT_EVENT:
        _log("ignored_event_type", event=args.event_name)
        return 0

    try:
        payload = json.loads(Path(args.event_path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        parser.error(f"cannot read event payload {args.event_path}: {e}")
    if not isinstance(payload, dict):
        parser.error(f"event payload in {args.event_path} is not a JSON object")

    if payload.get("action") != COMMENT_ACTION:
        _log("ignored_action", action=payload.get("action"))
        return 0

    try:
        ev = event_from_payload(payload)
        repo = repo_from_payload(payload, settings.github_repository)
    except PayloadError as e:
        parser.error(str(e))

    ignored = triage(ev)
    if ignored is not None:
        _log(ignored.value, **_log_target(ev, repo))
        return 0

    client = _build_client(settings)
    if client is None:
        _log("config_error_missing_token")
        raise SystemExit("GITHUB_TOKEN is not set and no GITHUB_TOKEN_SECRET_NAME configured")

    # Remote failures propagate and fail the workflow step.
    outcome = dispatch(ev, repo, client)
    _log("dispatched", outcome=outcome.value, **_log_target(ev, repo))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
