"""Validated string types for git remote URLs and reference names."""

from .branch import BranchName, is_valid_reference_name
from .errors import GitError, InvalidRefName, InvalidUrl
from .url import GitUrl, is_valid_git_url

__all__ = [
    "BranchName",
    "GitError",
    "GitUrl",
    "InvalidRefName",
    "InvalidUrl",
    "is_valid_git_url",
    "is_valid_reference_name",
]
