"""Branch name value object - A validated git reference name."""

from dataclasses import dataclass

from .errors import InvalidRefName

INVALID_REFERENCE_CHARS = frozenset(" ~^:\\")
INVALID_REFERENCE_START = "-"
INVALID_REFERENCE_END = "."
INVALID_REFERENCE_SEQUENCES = ("/.", "@{", "..")
RESERVED_REFERENCE_NAMES = frozenset({"@"})


def _is_ascii_control(char: str) -> bool:
    code = ord(char)
    return code < 0x20 or code == 0x7F


def is_valid_reference_name(name: str) -> bool:
    """Validate a git reference name.

    This is the practical subset of git-check-ref-format(1) rules:

    - must not start with ``-`` or end with ``.``
    - no ASCII control characters, spaces, ``~``, ``^``, ``:`` or ``\\``
    - no ``/.``, ``@{`` or ``..`` sequences
    - must not be the single character ``@``

    Args:
        name: Reference name to validate

    Returns:
        True if valid, False otherwise
    """
    return (
        not name.startswith(INVALID_REFERENCE_START)
        and not name.endswith(INVALID_REFERENCE_END)
        and not any(
            _is_ascii_control(c) or c in INVALID_REFERENCE_CHARS for c in name
        )
        and not any(seq in name for seq in INVALID_REFERENCE_SEQUENCES)
        and name not in RESERVED_REFERENCE_NAMES
    )


@dataclass(frozen=True)
class BranchName:
    """A git branch name.

    BranchName is immutable; build a new one to change the value.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate branch name."""
        if not is_valid_reference_name(self.value):
            raise InvalidRefName(self.value)

    @classmethod
    def parse(cls, value: str) -> "BranchName":
        """Build a BranchName, raising InvalidRefName if value breaks a rule."""
        return cls(value)

    def __str__(self) -> str:
        return self.value
