import pytest

from issue_assign_bot.models import (
    PayloadError,
    RepoRef,
    event_from_payload,
    label_names,
    repo_from_payload,
)


def _payload(**overrides):
    body = {
        "action": "created",
        "comment": {"body": "  /assign \n", "user": {"login": "bob", "type": "User"}},
        "issue": {
            "number": 42,
            "assignees": [{"login": "alice"}],
            "labels": [{"name": "approved"}, {"name": "good first issue"}],
        },
        "repository": {"name": "widgets", "owner": {"login": "acme"}},
    }
    body.update(overrides)
    return body


def test_event_from_payload_normalizes():
    ev = event_from_payload(_payload())
    assert ev.comment_text == "/assign"
    assert ev.commenter == "bob"
    assert ev.commenter_is_bot is False
    assert ev.issue.number == 42
    assert ev.issue.assignees == ("alice",)
    assert ev.issue.labels == frozenset({"approved", "good first issue"})


def test_bot_author_detected():
    ev = event_from_payload(
        _payload(comment={"body": "/assign", "user": {"login": "ci[bot]", "type": "Bot"}})
    )
    assert ev.commenter_is_bot is True


def test_labels_strings_and_objects_agree():
    assert label_names(["approved"]) == label_names([{"name": "approved"}])
    assert label_names([{"color": "fff"}, None, "x"]) == frozenset({"x"})


def test_missing_assignees_and_labels_are_empty():
    ev = event_from_payload(_payload(issue={"number": 1}))
    assert ev.issue.assignees == ()
    assert ev.issue.labels == frozenset()


@pytest.mark.parametrize(
    "overrides",
    [
        {"comment": None},
        {"issue": None},
        {"comment": {"body": "/assign", "user": {}}},
        {"issue": {"number": "abc"}},
    ],
)
def test_event_from_payload_rejects_incomplete(overrides):
    with pytest.raises(PayloadError):
        event_from_payload(_payload(**overrides))


def test_repo_from_payload():
    assert repo_from_payload(_payload()) == RepoRef("acme", "widgets")
    assert repo_from_payload({}, "octo/cat") == RepoRef("octo", "cat")
    assert repo_from_payload(_payload()).full_name == "acme/widgets"
    with pytest.raises(PayloadError):
        repo_from_payload({}, "no-slash")
