"""Git URL value object - A validated git remote URL."""

import re
from dataclasses import dataclass

from .errors import InvalidUrl

# Adapted from https://github.com/jonschlinkert/is-git-url:
#   (?:git|ssh|https?|git@[-\w.]+):(//)?(.*?)(\.git)(/?|#[-\w.]+)$
# The suffix is located from the end of the string and the scheme is then
# searched once on the same line, so matching stays linear in the input.
GIT_URL_SCHEME = re.compile(r"(?:git|ssh|https?|git@[-\w.]+):")
GIT_URL_REF = re.compile(r"[-\w.]+")
GIT_SUFFIX = ".git"


def _find_suffix(url: str) -> int:
    """Return the index of the last ``.git`` an allowed tail can follow, or -1.

    The tail after ``.git`` is empty, a single ``/``, or ``#`` and a ref.
    """
    if url.endswith(GIT_SUFFIX):
        return len(url) - len(GIT_SUFFIX)
    if url.endswith(GIT_SUFFIX + "/"):
        return len(url) - len(GIT_SUFFIX) - 1

    # A ref holds no '#', so only the last one can start it
    ref_start = url.rfind("#")
    if ref_start < 0 or not url.endswith(GIT_SUFFIX, 0, ref_start):
        return -1
    if GIT_URL_REF.fullmatch(url, ref_start + 1) is None:
        return -1
    return ref_start - len(GIT_SUFFIX)


def is_valid_git_url(url: str) -> bool:
    """Check whether a string looks like a git remote URL.

    Accepts scp-like addresses (git@host:path) and git, ssh, http and
    https URLs ending in ``.git``, optionally followed by ``/`` or a
    ``#ref`` suffix. Bare paths and file:// or rsync:// URLs are rejected.

    Args:
        url: Candidate URL

    Returns:
        True if valid, False otherwise
    """
    suffix = _find_suffix(url)
    if suffix < 0:
        return False

    # The path between scheme and suffix never spans a newline
    line_start = url.rfind("\n", 0, suffix) + 1
    return GIT_URL_SCHEME.search(url, line_start, suffix) is not None


@dataclass(frozen=True)
class GitUrl:
    """A git remote URL.

    The string is kept exactly as given; no normalization is applied.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate git url."""
        if not is_valid_git_url(self.value):
            raise InvalidUrl(self.value)

    @classmethod
    def parse(cls, value: str) -> "GitUrl":
        """Build a GitUrl, raising InvalidUrl if value does not match."""
        return cls(value)

    def __str__(self) -> str:
        return self.value
