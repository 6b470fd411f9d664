# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Artifacts, regions within them, and changes to them."""

from __future__ import annotations

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.message import SarifMessage, SarifMultiformatMessageString


class SarifArtifactContent(SarifModel):
    binary: StrictStr = Field("", description="Base64-encoded bytes")
    properties: PropertyBag | None = None
    rendered: SarifMultiformatMessageString | None = None
    text: StrictStr = ""


class SarifArtifactLocation(SarifModel):
    """A file or other artifact, by URI or by index into ``run.artifacts``."""

    description: SarifMessage | None = None
    index: StrictInt = 0
    properties: PropertyBag | None = None
    uri: StrictStr = ""
    uriBaseId: StrictStr = ""


class SarifArtifact(SarifModel):
    contents: SarifArtifactContent | None = None
    description: SarifMessage | None = None
    encoding: StrictStr = ""
    hashes: dict[str, StrictStr] = Field(default_factory=dict)
    lastModifiedTimeUtc: StrictStr = ""
    length: StrictInt = 0
    location: SarifArtifactLocation | None = None
    mimeType: StrictStr = ""
    offset: StrictInt = 0
    parentIndex: StrictInt = 0
    properties: PropertyBag | None = None
    roles: list[StrictStr] = Field(default_factory=list)
    sourceLanguage: StrictStr = ""


class SarifRegion(SarifModel):
    """A contiguous span of an artifact, by line/column or by offset."""

    byteLength: StrictInt = 0
    byteOffset: StrictInt = 0
    charLength: StrictInt = 0
    charOffset: StrictInt = 0
    endColumn: StrictInt = 0
    endLine: StrictInt = 0
    message: SarifMessage | None = None
    properties: PropertyBag | None = None
    snippet: SarifArtifactContent | None = None
    sourceLanguage: StrictStr = ""
    startColumn: StrictInt = 0
    startLine: StrictInt = 0


class SarifRectangle(SarifModel):
    """An area within an image attachment."""

    bottom: StrictFloat = 0.0
    left: StrictFloat = 0.0
    message: SarifMessage | None = None
    properties: PropertyBag | None = None
    right: StrictFloat = 0.0
    top: StrictFloat = 0.0


class SarifReplacement(SarifModel):
    deletedRegion: SarifRegion
    insertedContent: SarifArtifactContent | None = None
    properties: PropertyBag | None = None


class SarifArtifactChange(SarifModel):
    artifactLocation: SarifArtifactLocation
    properties: PropertyBag | None = None
    replacements: list[SarifReplacement]


class SarifFix(SarifModel):
    """A proposed fix, expressed as edits to one or more artifacts."""

    artifactChanges: list[SarifArtifactChange]
    description: SarifMessage | None = None
    properties: PropertyBag | None = None


class SarifAttachment(SarifModel):
    artifactLocation: SarifArtifactLocation
    description: SarifMessage | None = None
    properties: PropertyBag | None = None
    rectangles: list[SarifRectangle] = Field(default_factory=list)
    regions: list[SarifRegion] = Field(default_factory=list)
