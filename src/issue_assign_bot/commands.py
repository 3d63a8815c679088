"""
Command parsing and reply rendering utilities.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable

APPROVAL_LABEL = "approved"


class Command(enum.Enum):
    ASSIGN = "/assign"
    UNASSIGN = "/unassign"
    UNRECOGNIZED = ""


def parse_command(text: str | None) -> Command:
    # Whole comment must be the command; no arguments, case-sensitive.
    if not text:
        return Command.UNRECOGNIZED
    stripped = text.strip()
    for cmd in (Command.ASSIGN, Command.UNASSIGN):
        if stripped == cmd.value:
            return cmd
    return Command.UNRECOGNIZED


def mention_list(logins: Iterable[str]) -> str:
    return ", ".join(f"@{login}" for login in logins)


def not_approved_reply() -> str:
    return (
        "⛔ This issue is not approved yet.\n\n"
        f"A maintainer must add the `{APPROVAL_LABEL}` label before assignment."
    )


def assigned_reply(commenter: str) -> str:
    return f"✅ @{commenter} has been assigned to this issue."


def already_assigned_reply(assignees: Iterable[str]) -> str:
    return (
        f"⚠️ This issue is already assigned to {mention_list(assignees)}.\n\n"
        f"If you are no longer working on it, please comment `{Command.UNASSIGN.value}`."
    )


def unassigned_reply(commenter: str) -> str:
    return f"🔓 @{commenter} has unassigned themselves. The issue is now available."


def not_assignee_reply() -> str:
    return "❌ Only the currently assigned user can unassign themselves."
