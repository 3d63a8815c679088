"""
Issue Assign Bot

Where: GitHub Actions step or AWS Lambda Function URL (GitHub webhook target).
What:  Handle `/assign` and `/unassign` issue comments, gated by the `approved` label.
Why:   Let contributors claim approved issues without maintainer round-trips.
"""

__all__ = [
    "commands",
    "config",
    "credentials",
    "dispatcher",
    "github",
    "handler",
    "models",
]
