"""
Schema for exceptions the provider serialises into otherwise successful
response bodies.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

GIT_ITEM_NOT_FOUND = "GitItemNotFoundException"
GIT_UNRESOLVABLE_TO_COMMIT = "GitUnresolvableToCommitException"


class WrappedException(BaseModel):
    """Serialised provider exception, identified by its typeKey."""

    type_key: str = Field(..., alias="typeKey")
    type_name: Optional[str] = Field(default=None, alias="typeName")
    message: Optional[str] = None
    error_code: Optional[int] = Field(default=None, alias="errorCode")
    event_id: Optional[int] = Field(default=None, alias="eventId")
    help_link: Optional[str] = Field(default=None, alias="helpLink")
    stack_trace: Optional[str] = Field(default=None, alias="stackTrace")
    custom_properties: Optional[Dict[str, Any]] = Field(
        default=None, alias="customProperties"
    )
    inner_exception: Optional[WrappedException] = Field(
        default=None, alias="innerException"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )


def parse_wrapped_exception(text: str) -> Optional[WrappedException]:
    """Parse text as a wrapped exception payload.

    Args:
        text: Raw response body

    Returns:
        The parsed exception, or None when the text is not JSON or does not
        match the schema
    """
    try:
        return WrappedException.model_validate_json(text)
    except ValidationError:
        return None
