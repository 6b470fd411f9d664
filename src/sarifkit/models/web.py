# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""HTTP request and response objects, for web analysis tools."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt, StrictStr

from sarifkit.models.artifact import SarifArtifactContent
from sarifkit.models.base import PropertyBag, SarifModel


class SarifWebRequest(SarifModel):
    body: SarifArtifactContent | None = None
    headers: dict[str, StrictStr] = Field(default_factory=dict)
    index: StrictInt = 0
    method: StrictStr = ""
    parameters: dict[str, StrictStr] = Field(default_factory=dict)
    properties: PropertyBag | None = None
    protocol: StrictStr = ""
    target: StrictStr = ""
    version: StrictStr = ""


class SarifWebResponse(SarifModel):
    body: SarifArtifactContent | None = None
    headers: dict[str, StrictStr] = Field(default_factory=dict)
    index: StrictInt = 0
    noResponseReceived: StrictBool = False
    properties: PropertyBag | None = None
    protocol: StrictStr = ""
    reasonPhrase: StrictStr = ""
    statusCode: StrictInt = 0
    version: StrictStr = ""
