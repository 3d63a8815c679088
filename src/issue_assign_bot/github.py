"""
Minimal GitHub REST client (issues endpoints) using stdlib urllib.
"""

from __future__ import annotations

import json
import urllib.parse
import urllib.request
from typing import Any

API_VERSION = "2022-11-28"


class GitHubClient:
    def __init__(self, api_url: str, token: str, timeout: int = 8) -> None:
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    # ----- Helpers -----
    def _issue_url(self, owner: str, repo: str, issue_number: int, suffix: str) -> str:
        return (
            f"{self.api_url}/repos/{urllib.parse.quote(owner)}/{urllib.parse.quote(repo)}"
            f"/issues/{int(issue_number)}/{suffix}"
        )

    def _send_json(self, method: str, url: str, payload: dict[str, Any]) -> Any:
        req = urllib.request.Request(
            url,
            data=json.dumps(payload).encode("utf-8"),
            method=method,
            headers={
                "Accept": "application/vnd.github+json",
                "Authorization": f"Bearer {self.token}",
                "Content-Type": "application/json",
                "User-Agent": "IssueAssignBot/1.0",
                "X-GitHub-Api-Version": API_VERSION,
            },
        )
        with urllib.request.urlopen(req, timeout=self.timeout) as resp:  # nosec B310
            data = resp.read()
        try:
            return json.loads(data.decode("utf-8"))
        except Exception:
            return {}

    # ----- Public APIs -----
    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> Any:
        url = self._issue_url(owner, repo, issue_number, "comments")
        return self._send_json("POST", url, {"body": body})

    def add_assignees(
        self, owner: str, repo: str, issue_number: int, assignees: list[str]
    ) -> Any:
        url = self._issue_url(owner, repo, issue_number, "assignees")
        return self._send_json("POST", url, {"assignees": list(assignees)})

    def remove_assignees(
        self, owner: str, repo: str, issue_number: int, assignees: list[str]
    ) -> Any:
        url = self._issue_url(owner, repo, issue_number, "assignees")
        return self._send_json("DELETE", url, {"assignees": list(assignees)})
