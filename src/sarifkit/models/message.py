# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Message objects."""

from __future__ import annotations

from pydantic import Field, StrictStr

from sarifkit.models.base import PropertyBag, SarifModel


class SarifMessage(SarifModel):
    """User-facing text, either inline or looked up by ``id``."""

    arguments: list[StrictStr] = Field(
        default_factory=list,
        description="Values substituted into the {0}, {1}, ... placeholders",
    )
    id: StrictStr = ""
    markdown: StrictStr = ""
    properties: PropertyBag | None = None
    text: StrictStr = ""


class SarifMultiformatMessageString(SarifModel):
    """A message string available as plain text and optionally Markdown."""

    markdown: StrictStr = ""
    properties: PropertyBag | None = None
    text: StrictStr
