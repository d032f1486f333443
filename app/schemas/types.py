"""Shared field types for request schemas."""

from typing import Annotated

from pydantic import Field, StringConstraints

# Largest value a signed 64-bit INTEGER column can bind
MAX_ROW_ID = 2**63 - 1

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
OptionalStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=255)] | None
RowId = Annotated[int, Field(ge=1, le=MAX_ROW_ID)]
