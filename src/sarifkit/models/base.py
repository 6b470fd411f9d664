# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Base classes shared by every SARIF object model."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    SerializerFunctionWrapHandler,
    StrictStr,
    model_serializer,
)


class SarifModel(BaseModel):
    """A closed SARIF object: unknown wire keys are rejected on decode.

    Attribute names are the camelCase wire names, so ``model_validate`` and
    ``model_dump(by_alias=True)`` both speak the wire format directly.
    Assignments are validated like decoded input, and floats must be finite
    since JSON has no NaN or Infinity.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_by_name=True,
        validate_by_alias=True,
        validate_assignment=True,
        allow_inf_nan=False,
    )

    @model_serializer(mode="wrap")
    def _wire_form(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        # Open objects re-emit every captured key, compact mode included.
        if self.__pydantic_extra__:
            for key, value in self.__pydantic_extra__.items():
                data.setdefault(key, value)
        return data


class PropertyBag(SarifModel):
    """Open-ended metadata attached to most SARIF objects.

    ``tags`` is typed; any other key is kept verbatim as an arbitrary JSON
    value and re-emitted on encode.
    """

    model_config = ConfigDict(extra="allow")

    __pydantic_extra__: dict[str, JsonValue] = Field(init=False)

    tags: list[StrictStr] = Field(default_factory=list)

    @property
    def additional_properties(self) -> dict[str, JsonValue]:
        """The keys other than ``tags``."""
        return self.__pydantic_extra__ if self.__pydantic_extra__ is not None else {}
