import pytest

from gitcommitlint.commit_message import CommitMessageValidator
from gitcommitlint.config import Config


@pytest.fixture
def config(monkeypatch):
    """Default configuration, unaffected by the caller's environment."""
    for name in [
        "GIT_COMMIT_LINT_MAX_SUBJECT_LENGTH",
        "GIT_COMMIT_LINT_MAX_BODY_LINE_LENGTH",
        "GIT_COMMIT_LINT_PAST_TENSE_WORDS",
        "GIT_COMMIT_LINT_FOOTER_KEYS",
        "GIT_COMMIT_LINT_STRIP_COMMENTS",
        "GIT_COMMIT_LINT_STRICT",
        "GIT_COMMIT_LINT_ALWAYS_LOG",
        "GIT_COMMIT_LINT_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)
    return Config()


@pytest.fixture
def validator(config):
    return CommitMessageValidator(config)


@pytest.fixture
def full_message():
    """A canonical message with a body paragraph and a footer block."""
    return (
        "feat(api): add cursor pagination\n"
        "\n"
        "Large result sets are now returned in pages so that clients\n"
        "no longer time out on big projects.\n"
        "\n"
        "BREAKING CHANGE: list endpoints return a page object\n"
        "Closes #42"
    )


@pytest.fixture
def config_file(tmp_path):
    """Write a .gitcommitlint.toml into a temporary directory."""
    def _write(content: str):
        path = tmp_path / ".gitcommitlint.toml"
        path.write_text(content)
        return path

    return _write
