# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Physical, logical and stack locations."""

from __future__ import annotations

from pydantic import Field, StrictInt, StrictStr

from sarifkit.models.artifact import SarifArtifactLocation, SarifRegion
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.message import SarifMessage


class SarifAddress(SarifModel):
    """A physical or virtual address, or a range of addresses."""

    absoluteAddress: StrictInt = 0
    fullyQualifiedName: StrictStr = ""
    index: StrictInt = 0
    kind: StrictStr = ""
    length: StrictInt = 0
    name: StrictStr = ""
    offsetFromParent: StrictInt = 0
    parentIndex: StrictInt = Field(0, description="Index within run.addresses of the parent")
    properties: PropertyBag | None = None
    relativeAddress: StrictInt = 0


class SarifLogicalLocation(SarifModel):
    """A named program construct such as a function, class or namespace."""

    decoratedName: StrictStr = ""
    fullyQualifiedName: StrictStr = ""
    index: StrictInt = 0
    kind: StrictStr = ""
    name: StrictStr = ""
    parentIndex: StrictInt = Field(0, description="Index within run.logicalLocations of the parent")
    properties: PropertyBag | None = None


class SarifPhysicalLocation(SarifModel):
    address: SarifAddress | None = None
    artifactLocation: SarifArtifactLocation | None = None
    contextRegion: SarifRegion | None = None
    properties: PropertyBag | None = None
    region: SarifRegion | None = None


class SarifLocationRelationship(SarifModel):
    description: SarifMessage | None = None
    kinds: list[StrictStr] = Field(default_factory=list)
    properties: PropertyBag | None = None
    target: StrictInt = Field(description="The id of the related location")


class SarifLocation(SarifModel):
    annotations: list[SarifRegion] = Field(default_factory=list)
    id: StrictInt = 0
    logicalLocations: list[SarifLogicalLocation] = Field(default_factory=list)
    message: SarifMessage | None = None
    physicalLocation: SarifPhysicalLocation | None = None
    properties: PropertyBag | None = None
    relationships: list[SarifLocationRelationship] = Field(default_factory=list)


class SarifStackFrame(SarifModel):
    location: SarifLocation | None = None
    module: StrictStr = ""
    parameters: list[StrictStr] = Field(default_factory=list)
    properties: PropertyBag | None = None
    threadId: StrictInt = 0


class SarifStack(SarifModel):
    """A call stack, innermost frame first."""

    frames: list[SarifStackFrame]
    message: SarifMessage | None = None
    properties: PropertyBag | None = None
