"""Exception hierarchy for git-types."""

from .redaction import redact_userinfo


class GitError(Exception):
    """Base exception for git-types errors."""


class InvalidUrl(GitError, ValueError):
    """String is not a recognised git remote URL.

    ``value`` keeps the rejected input verbatim; the message redacts any
    credentials embedded in it.
    """

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid git url: {redact_userinfo(repr(value))}")


class InvalidRefName(GitError, ValueError):
    """String is not a valid git reference name."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid reference name: {value!r}")
