# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""A run: one execution of one tool and everything it produced."""

from __future__ import annotations

from pydantic import Field, StrictInt, StrictStr

from sarifkit.models.artifact import SarifArtifact, SarifArtifactLocation
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.graph import SarifGraph
from sarifkit.models.invocation import SarifInvocation
from sarifkit.models.location import SarifAddress, SarifLogicalLocation
from sarifkit.models.message import SarifMessage
from sarifkit.models.result import SarifResult, SarifThreadFlowLocation
from sarifkit.models.tool import SarifTool, SarifToolComponent
from sarifkit.models.web import SarifWebRequest, SarifWebResponse


class SarifConversion(SarifModel):
    """How a log was translated from another tool's native output."""

    analysisToolLogFiles: list[SarifArtifactLocation] = Field(default_factory=list)
    invocation: SarifInvocation | None = None
    properties: PropertyBag | None = None
    tool: SarifTool


class SarifRunAutomationDetails(SarifModel):
    correlationGuid: StrictStr = ""
    description: SarifMessage | None = None
    guid: StrictStr = ""
    id: StrictStr = ""
    properties: PropertyBag | None = None


class SarifSpecialLocations(SarifModel):
    displayBase: SarifArtifactLocation | None = None
    properties: PropertyBag | None = None


class SarifVersionControlDetails(SarifModel):
    asOfTimeUtc: StrictStr = ""
    branch: StrictStr = ""
    mappedTo: SarifArtifactLocation | None = None
    properties: PropertyBag | None = None
    repositoryUri: StrictStr
    revisionId: StrictStr = ""
    revisionTag: StrictStr = ""


class SarifExternalPropertyFileReference(SarifModel):
    guid: StrictStr = ""
    itemCount: StrictInt = 0
    location: SarifArtifactLocation | None = None
    properties: PropertyBag | None = None


class SarifExternalPropertyFileReferences(SarifModel):
    """Where the parts of a run split out into external property files live."""

    addresses: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    artifacts: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    conversion: SarifExternalPropertyFileReference | None = None
    driver: SarifExternalPropertyFileReference | None = None
    extensions: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    externalizedProperties: SarifExternalPropertyFileReference | None = None
    graphs: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    invocations: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    logicalLocations: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    policies: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    properties: PropertyBag | None = None
    results: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    taxonomies: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    threadFlowLocations: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    translations: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    webRequests: list[SarifExternalPropertyFileReference] = Field(default_factory=list)
    webResponses: list[SarifExternalPropertyFileReference] = Field(default_factory=list)


class SarifRun(SarifModel):
    addresses: list[SarifAddress] = Field(default_factory=list)
    artifacts: list[SarifArtifact] = Field(default_factory=list)
    automationDetails: SarifRunAutomationDetails | None = None
    baselineGuid: StrictStr = ""
    columnKind: StrictStr = ""
    conversion: SarifConversion | None = None
    defaultEncoding: StrictStr = ""
    defaultSourceLanguage: StrictStr = ""
    externalPropertyFileReferences: SarifExternalPropertyFileReferences | None = None
    graphs: list[SarifGraph] = Field(default_factory=list)
    invocations: list[SarifInvocation] = Field(default_factory=list)
    language: StrictStr = ""
    logicalLocations: list[SarifLogicalLocation] = Field(default_factory=list)
    newlineSequences: list[StrictStr] = Field(default_factory=list)
    originalUriBaseIds: dict[str, SarifArtifactLocation] = Field(default_factory=dict)
    policies: list[SarifToolComponent] = Field(default_factory=list)
    properties: PropertyBag | None = None
    redactionTokens: list[StrictStr] = Field(default_factory=list)
    results: list[SarifResult] = Field(default_factory=list)
    runAggregates: list[SarifRunAutomationDetails] = Field(default_factory=list)
    specialLocations: SarifSpecialLocations | None = None
    taxonomies: list[SarifToolComponent] = Field(default_factory=list)
    threadFlowLocations: list[SarifThreadFlowLocation] = Field(default_factory=list)
    tool: SarifTool
    translations: list[SarifToolComponent] = Field(default_factory=list)
    versionControlProvenance: list[SarifVersionControlDetails] = Field(default_factory=list)
    webRequests: list[SarifWebRequest] = Field(default_factory=list)
    webResponses: list[SarifWebResponse] = Field(default_factory=list)
