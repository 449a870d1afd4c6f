"""Selection request definition and input validation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import ValidationError


class SelectionRequest(BaseModel):
    """Request to select the first ``target_count`` logical rows.

    Attributes:
        target_count: Number of leading rows to select, starting at the
            first row of the displayed page
    """

    target_count: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, raw: Any) -> SelectionRequest:
        """Build a request from raw user input.

        Accepts ints, integral floats and numeric strings. Negative,
        fractional, boolean, empty and non-numeric input is rejected rather
        than truncated.

        Args:
            raw: Value typed into the row-count box

        Returns:
            Validated SelectionRequest

        Raises:
            ValidationError: If raw is not a non-negative integer
        """
        if isinstance(raw, SelectionRequest):
            return raw
        if raw is None or isinstance(raw, bool):
            raise ValidationError(f"Row count must be a non-negative integer, got {raw!r}")
        if isinstance(raw, str):
            raw = raw.strip()
            if not raw:
                raise ValidationError("Row count must not be empty")
        try:
            return cls(target_count=raw)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Row count must be a non-negative integer, got {raw!r}"
            ) from e
