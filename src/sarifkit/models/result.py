# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Results and the code flows, suppressions and provenance attached to them."""

from __future__ import annotations

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from sarifkit.models.artifact import SarifArtifactLocation, SarifAttachment, SarifFix
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.graph import SarifGraph, SarifGraphTraversal
from sarifkit.models.location import SarifLocation, SarifPhysicalLocation, SarifStack
from sarifkit.models.message import SarifMessage, SarifMultiformatMessageString
from sarifkit.models.tool import SarifReportingDescriptorReference
from sarifkit.models.web import SarifWebRequest, SarifWebResponse


class SarifThreadFlowLocation(SarifModel):
    """One step of a thread flow."""

    executionOrder: StrictInt = 0
    executionTimeUtc: StrictStr = ""
    importance: StrictStr = ""
    index: StrictInt = 0
    kinds: list[StrictStr] = Field(default_factory=list)
    location: SarifLocation | None = None
    module: StrictStr = ""
    nestingLevel: StrictInt = 0
    properties: PropertyBag | None = None
    stack: SarifStack | None = None
    state: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    taxa: list[SarifReportingDescriptorReference] = Field(default_factory=list)
    webRequest: SarifWebRequest | None = None
    webResponse: SarifWebResponse | None = None


class SarifThreadFlow(SarifModel):
    id: StrictStr = ""
    immutableState: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    initialState: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    locations: list[SarifThreadFlowLocation]
    message: SarifMessage | None = None
    properties: PropertyBag | None = None


class SarifCodeFlow(SarifModel):
    message: SarifMessage | None = None
    properties: PropertyBag | None = None
    threadFlows: list[SarifThreadFlow]


class SarifSuppression(SarifModel):
    guid: StrictStr = ""
    justification: StrictStr = ""
    kind: StrictStr
    location: SarifLocation | None = None
    properties: PropertyBag | None = None
    state: StrictStr = ""


class SarifResultProvenance(SarifModel):
    conversionSources: list[SarifPhysicalLocation] = Field(default_factory=list)
    firstDetectionRunGuid: StrictStr = ""
    firstDetectionTimeUtc: StrictStr = ""
    invocationIndex: StrictInt = 0
    lastDetectionRunGuid: StrictStr = ""
    lastDetectionTimeUtc: StrictStr = ""
    properties: PropertyBag | None = None


class SarifResult(SarifModel):
    """A single finding reported by a tool."""

    analysisTarget: SarifArtifactLocation | None = None
    attachments: list[SarifAttachment] = Field(default_factory=list)
    baselineState: StrictStr = ""
    codeFlows: list[SarifCodeFlow] = Field(default_factory=list)
    correlationGuid: StrictStr = ""
    fingerprints: dict[str, StrictStr] = Field(default_factory=dict)
    fixes: list[SarifFix] = Field(default_factory=list)
    graphTraversals: list[SarifGraphTraversal] = Field(default_factory=list)
    graphs: list[SarifGraph] = Field(default_factory=list)
    guid: StrictStr = ""
    hostedViewerUri: StrictStr = ""
    kind: StrictStr = ""
    level: StrictStr = ""
    locations: list[SarifLocation] = Field(default_factory=list)
    message: SarifMessage
    occurrenceCount: StrictInt = 0
    partialFingerprints: dict[str, StrictStr] = Field(default_factory=dict)
    properties: PropertyBag | None = None
    provenance: SarifResultProvenance | None = None
    rank: StrictFloat = 0.0
    relatedLocations: list[SarifLocation] = Field(default_factory=list)
    rule: SarifReportingDescriptorReference | None = None
    ruleId: StrictStr = ""
    ruleIndex: StrictInt = Field(0, description="Index into tool.driver.rules; not range-checked")
    stacks: list[SarifStack] = Field(default_factory=list)
    suppressions: list[SarifSuppression] = Field(default_factory=list)
    taxa: list[SarifReportingDescriptorReference] = Field(default_factory=list)
    webRequest: SarifWebRequest | None = None
    webResponse: SarifWebResponse | None = None
    workItemUris: list[StrictStr] = Field(default_factory=list)
