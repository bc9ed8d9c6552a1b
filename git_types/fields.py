"""Pydantic field types for git-types values.

The core value objects do not depend on pydantic; this module adapts them
so they can be used as model field annotations or loaded from JSON text.

    class CheckoutRequest(BaseModel):
        repo: GitUrlField
        branch: BranchNameField
"""

import logging
from typing import Annotated, Any, Union

from pydantic import PlainSerializer, PlainValidator, TypeAdapter, ValidationError

from .branch import BranchName
from .redaction import redact_userinfo
from .url import GitUrl

logger = logging.getLogger(__name__)


def _validate_branch_name(value: Any) -> BranchName:
    if isinstance(value, BranchName):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Reference name must be a string, got {type(value).__name__}")
    return BranchName(value)


def _validate_git_url(value: Any) -> GitUrl:
    if isinstance(value, GitUrl):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Git url must be a string, got {type(value).__name__}")
    return GitUrl(value)


BranchNameField = Annotated[
    BranchName,
    PlainValidator(_validate_branch_name),
    PlainSerializer(lambda v: v.value, return_type=str),
]

GitUrlField = Annotated[
    GitUrl,
    PlainValidator(_validate_git_url),
    PlainSerializer(lambda v: v.value, return_type=str),
]

_branch_name_adapter = TypeAdapter(BranchNameField)
_git_url_adapter = TypeAdapter(GitUrlField)


def load_branch_name(document: Union[str, bytes]) -> BranchName:
    """Deserialize a BranchName from a JSON string value, e.g. ``'"main"'``.

    Raises:
        pydantic.ValidationError: If the document is not a JSON string or
            the string is not a valid reference name. The error message
            carries the InvalidRefName description.
    """
    try:
        return _branch_name_adapter.validate_json(document)
    except ValidationError as e:
        logger.debug(f"Rejected branch name document {document!r}: {e}")
        raise


def load_git_url(document: Union[str, bytes]) -> GitUrl:
    """Deserialize a GitUrl from a JSON string value.

    Raises:
        pydantic.ValidationError: If the document is not a JSON string or
            the string is not a valid git url.
    """
    try:
        return _git_url_adapter.validate_json(document)
    except ValidationError as e:
        logger.debug(redact_userinfo(f"Rejected git url document {document!r}: {e}"))
        raise
