import pytest

_GITHUB_ENV = (
    "GITHUB_API_URL",
    "GITHUB_EVENT_NAME",
    "GITHUB_EVENT_PATH",
    "GITHUB_REPOSITORY",
    "GITHUB_TOKEN",
    "GITHUB_TOKEN_SECRET_NAME",
)


@pytest.fixture(autouse=True)
def _clean_github_env(monkeypatch):
    # Tests may run inside an Actions job that exports these.
    for name in _GITHUB_ENV:
        monkeypatch.delenv(name, raising=False)
