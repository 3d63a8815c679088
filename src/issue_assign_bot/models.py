"""
Event snapshot types and GitHub payload normalization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class PayloadError(ValueError):
    """Raised when a webhook payload lacks the fields a comment event needs."""


@dataclass(frozen=True)
class Issue:
    number: int
    assignees: tuple[str, ...] = ()
    labels: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Event:
    comment_text: str
    commenter: str
    commenter_is_bot: bool
    issue: Issue


@dataclass(frozen=True)
class RepoRef:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


def label_names(raw_labels: list[Any] | None) -> frozenset[str]:
    """Labels arrive either as bare strings or as objects with a ``name``."""
    names: set[str] = set()
    for lbl in raw_labels or []:
        if isinstance(lbl, str):
            names.add(lbl)
        elif isinstance(lbl, dict) and lbl.get("name"):
            names.add(str(lbl["name"]))
    return frozenset(names)


def assignee_logins(raw_assignees: list[Any] | None) -> tuple[str, ...]:
    logins: list[str] = []
    for a in raw_assignees or []:
        if isinstance(a, str):
            logins.append(a)
        elif isinstance(a, dict) and a.get("login"):
            logins.append(str(a["login"]))
    return tuple(logins)


def event_from_payload(payload: dict[str, Any]) -> Event:
    """Build an :class:`Event` from a GitHub ``issue_comment`` payload.

    Expected shape:
      - payload["comment"]["body"], payload["comment"]["user"]["login" | "type"]
      - payload["issue"]["number" | "assignees" | "labels"]
    """
    comment = payload.get("comment")
    issue = payload.get("issue")
    if not isinstance(comment, dict) or not isinstance(issue, dict):
        raise PayloadError("payload has no comment/issue object")

    user = comment.get("user") or {}
    login = user.get("login")
    if not login:
        raise PayloadError("comment author login missing")

    try:
        number = int(issue.get("number"))
    except (TypeError, ValueError) as e:
        raise PayloadError(f"invalid issue number: {issue.get('number')!r}") from e

    return Event(
        comment_text=(comment.get("body") or "").strip(),
        commenter=str(login),
        commenter_is_bot=user.get("type") == "Bot",
        issue=Issue(
            number=number,
            assignees=assignee_logins(issue.get("assignees")),
            labels=label_names(issue.get("labels")),
        ),
    )


def repo_from_payload(payload: dict[str, Any], fallback: str | None = None) -> RepoRef:
    repository = payload.get("repository") or {}
    owner = (repository.get("owner") or {}).get("login")
    name = repository.get("name")
    if owner and name:
        return RepoRef(owner=str(owner), repo=str(name))
    # GITHUB_REPOSITORY style "owner/repo"
    if fallback and "/" in fallback:
        owner, name = fallback.split("/", 1)
        if owner and name:
            return RepoRef(owner=owner, repo=name)
    raise PayloadError("repository owner/name not found")
