"""Shared field types for the entity schemas."""

from datetime import datetime, timezone
from typing import Annotated

from bson import ObjectId
from pydantic import AfterValidator


def _check_object_id(value: str) -> str:
    if not ObjectId.is_valid(value):
        raise ValueError("must be a 24 character hex identifier")
    return value


def _normalize_timestamp(value: datetime) -> datetime:
    # BSON dates are UTC with millisecond precision; naive values are UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


# Identifier of another document, transported as a hex string.
ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]

# Point in time as MongoDB stores it, so a value reads back unchanged.
Timestamp = Annotated[datetime, AfterValidator(_normalize_timestamp)]
