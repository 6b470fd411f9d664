# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""The document root and inlined external property bundles."""

from __future__ import annotations

from pydantic import Field, StrictStr

from sarifkit.models.artifact import SarifArtifact
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.graph import SarifGraph
from sarifkit.models.invocation import SarifInvocation
from sarifkit.models.location import SarifAddress, SarifLogicalLocation
from sarifkit.models.result import SarifResult, SarifThreadFlowLocation
from sarifkit.models.run import SarifConversion, SarifRun
from sarifkit.models.tool import SarifToolComponent
from sarifkit.models.web import SarifWebRequest, SarifWebResponse


class SarifExternalProperties(SarifModel):
    """A bundle of run properties that a producer split out of the main log."""

    addresses: list[SarifAddress] = Field(default_factory=list)
    artifacts: list[SarifArtifact] = Field(default_factory=list)
    conversion: SarifConversion | None = None
    driver: SarifToolComponent | None = None
    extensions: list[SarifToolComponent] = Field(default_factory=list)
    externalizedProperties: PropertyBag | None = None
    graphs: list[SarifGraph] = Field(default_factory=list)
    guid: StrictStr = ""
    invocations: list[SarifInvocation] = Field(default_factory=list)
    logicalLocations: list[SarifLogicalLocation] = Field(default_factory=list)
    policies: list[SarifToolComponent] = Field(default_factory=list)
    properties: PropertyBag | None = None
    results: list[SarifResult] = Field(default_factory=list)
    runGuid: StrictStr = ""
    schema_: StrictStr = Field("", alias="schema")
    taxonomies: list[SarifToolComponent] = Field(default_factory=list)
    threadFlowLocations: list[SarifThreadFlowLocation] = Field(default_factory=list)
    translations: list[SarifToolComponent] = Field(default_factory=list)
    version: StrictStr = ""
    webRequests: list[SarifWebRequest] = Field(default_factory=list)
    webResponses: list[SarifWebResponse] = Field(default_factory=list)


class SarifLog(SarifModel):
    """Root of a SARIF document.

    The schema URI is ``schema_`` in Python and ``$schema`` on the wire.
    """

    inlineExternalProperties: list[SarifExternalProperties] = Field(default_factory=list)
    properties: PropertyBag | None = None
    runs: list[SarifRun]
    schema_: StrictStr = Field("", alias="$schema")
    version: StrictStr
