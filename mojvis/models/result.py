"""Structured validation outcomes.

Rule functions never raise for invalid input. They return either ``VALID``
or a :class:`Rejection` carrying a machine-readable code and an English
error message; translating the code for end users is the caller's job.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from mojvis.models.enums import RejectionCode


class Valid(BaseModel):
    """Successful validation outcome."""

    valid: Literal[True] = True

    model_config = ConfigDict(frozen=True)


class Rejection(BaseModel):
    """Failed validation outcome."""

    valid: Literal[False] = False
    code: RejectionCode = Field(description="Which rule failed")
    error: str = Field(description="Human-readable explanation (English)")
    field: str | None = Field(
        default=None, description="Input field the rule failed on, if any"
    )

    model_config = ConfigDict(frozen=True)


ValidationResult = Valid | Rejection

VALID = Valid()
