"""
Noteful Backend — Request Body Validation
===========================================

What:  Field-presence checks for create and update bodies.
Why:   Incomplete requests are rejected before they reach a store.
How:   Plain functions over the parsed body dict; failures raise
       ValidationError, which the global handler turns into a 400.

Two shapes:
    require_fields      Every declared field present. Checked in declared
                        order; the first missing field is reported.
    require_any_field   At least one updatable field carries a truthy value.

Presence strictness differs by resource and is kept that way:
    - Folder create treats an empty string as missing (truthiness).
    - Note create treats only absent/None as missing, so `folder_id: 0`
      or `content: ""` pass.
"""

import logging
from typing import Any, Mapping, Sequence

from noteful.exceptions import ValidationError

logger = logging.getLogger(__name__)

FOLDER_REQUIRED_FIELDS = ("name",)
FOLDER_UPDATABLE_FIELDS = ("name",)
NOTE_REQUIRED_FIELDS = ("name", "folder_id", "content")
NOTE_UPDATABLE_FIELDS = ("name", "folder_id", "content")


def _is_missing(value: Any, strict_null: bool) -> bool:
    if strict_null:
        return value is None
    return not value


def require_fields(
    body: Mapping[str, Any],
    fields: Sequence[str],
    strict_null: bool = True,
) -> None:
    """
    Fail on the first field (in `fields` order) that is missing from `body`.

    Args:
        body: Parsed request body
        fields: Required field names, in the order they should be checked
        strict_null: True → only None counts as missing;
                     False → any falsy value counts as missing

    Raises:
        ValidationError: "Missing '<field>' in request body"
    """
    for field in fields:
        if _is_missing(body.get(field), strict_null):
            logger.error("'%s' is required", field)
            raise ValidationError(
                message=f"Missing '{field}' in request body",
                field=field,
            )


def describe_fields(fields: Sequence[str]) -> str:
    """
    Human-readable field list for error messages.

        ("name",)                       → 'name'
        ("name", "content")             → either 'name' or 'content'
        ("name", "folder_id", "content") → either 'name', 'folder_id', or 'content'
    """
    quoted = [f"'{field}'" for field in fields]
    if len(quoted) == 1:
        return quoted[0]
    if len(quoted) == 2:
        return f"either {quoted[0]} or {quoted[1]}"
    return "either " + ", ".join(quoted[:-1]) + f", or {quoted[-1]}"


def require_any_field(body: Mapping[str, Any], fields: Sequence[str]) -> None:
    """
    Fail unless at least one of `fields` holds a truthy value.

    Raises:
        ValidationError: "Request body must contain <field list>"
    """
    if any(body.get(field) for field in fields):
        return
    logger.error("Invalid update without required fields")
    raise ValidationError(
        message=f"Request body must contain {describe_fields(fields)}",
        fields=fields,
    )
