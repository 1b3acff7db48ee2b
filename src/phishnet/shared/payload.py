"""Where: src/phishnet/shared/payload.py
What: Pydantic base model shared by every decoded API payload.
Why: Give envelopes and records one set of parsing rules for JSON from the API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class PayloadModel(BaseModel):
    """Base for JSON payloads returned by the API.

    Unknown keys are ignored. Keys that are missing or ``null`` leave the
    field at its default, because the API sends ``null`` for empty values.
    Scalar fields use ``StrictInt`` and ``StrictStr``, so a string or a
    boolean never stands in for a number.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


__all__ = ["PayloadModel"]
