"""
/assign and /unassign decision logic.

The dispatcher reads a single event snapshot and issues at most one assignee
mutation followed by one reply comment. Nothing is retried and nothing is
caught here: tracker failures propagate to whoever invoked the handler.
"""

from __future__ import annotations

import enum
from typing import Protocol

from . import commands
from .commands import Command
from .models import Event, RepoRef


class IssueTracker(Protocol):
    def create_comment(self, owner: str, repo: str, issue_number: int, body: str) -> object: ...

    def add_assignees(
        self, owner: str, repo: str, issue_number: int, assignees: list[str]
    ) -> object: ...

    def remove_assignees(
        self, owner: str, repo: str, issue_number: int, assignees: list[str]
    ) -> object: ...


class Outcome(enum.Enum):
    IGNORED_BOT = "ignored_bot"
    IGNORED_NO_COMMAND = "ignored_no_command"
    NOT_APPROVED = "not_approved"
    ASSIGNED = "assigned"
    ALREADY_ASSIGNED = "already_assigned"
    UNASSIGNED = "unassigned"
    NOT_ASSIGNEE = "not_assignee"


def triage(event: Event) -> Outcome | None:
    """Return the ignore outcome for events that need no tracker at all, else None."""
    # Replying to other automation would loop.
    if event.commenter_is_bot:
        return Outcome.IGNORED_BOT
    if commands.parse_command(event.comment_text) is Command.UNRECOGNIZED:
        return Outcome.IGNORED_NO_COMMAND
    return None


def dispatch(event: Event, repo: RepoRef, tracker: IssueTracker) -> Outcome:
    if event.commenter_is_bot:
        return Outcome.IGNORED_BOT
    cmd = commands.parse_command(event.comment_text)
    if cmd is Command.UNRECOGNIZED:
        return Outcome.IGNORED_NO_COMMAND

    issue = event.issue
    commenter = event.commenter

    def reply(body: str) -> None:
        tracker.create_comment(repo.owner, repo.repo, issue.number, body)

    if cmd is Command.ASSIGN:
        if commands.APPROVAL_LABEL not in issue.labels:
            reply(commands.not_approved_reply())
            return Outcome.NOT_APPROVED
        # Read-then-write; a concurrent assignment in between is not detected.
        if issue.assignees:
            reply(commands.already_assigned_reply(issue.assignees))
            return Outcome.ALREADY_ASSIGNED
        tracker.add_assignees(repo.owner, repo.repo, issue.number, [commenter])
        reply(commands.assigned_reply(commenter))
        return Outcome.ASSIGNED

    if commenter not in issue.assignees:
        reply(commands.not_assignee_reply())
        return Outcome.NOT_ASSIGNEE
    tracker.remove_assignees(repo.owner, repo.repo, issue.number, [commenter])
    reply(commands.unassigned_reply(commenter))
    return Outcome.UNASSIGNED
