# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tool, tool component and rule metadata."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from sarifkit.models.artifact import SarifArtifactLocation
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.message import SarifMessage, SarifMultiformatMessageString


class SarifToolComponentReference(SarifModel):
    guid: StrictStr = ""
    index: StrictInt = 0
    name: StrictStr = ""
    properties: PropertyBag | None = None


class SarifReportingDescriptorReference(SarifModel):
    """Points at a rule, notification or taxon by id, index or guid."""

    guid: StrictStr = ""
    id: StrictStr = ""
    index: StrictInt = 0
    properties: PropertyBag | None = None
    toolComponent: SarifToolComponentReference | None = None


class SarifReportingConfiguration(SarifModel):
    enabled: StrictBool = False
    level: StrictStr = ""
    parameters: PropertyBag | None = None
    properties: PropertyBag | None = None
    rank: StrictFloat = 0.0


class SarifReportingDescriptorRelationship(SarifModel):
    description: SarifMessage | None = None
    kinds: list[StrictStr] = Field(default_factory=list)
    properties: PropertyBag | None = None
    target: SarifReportingDescriptorReference


class SarifReportingDescriptor(SarifModel):
    """Metadata for one rule, notification or taxon."""

    defaultConfiguration: SarifReportingConfiguration | None = None
    deprecatedGuids: list[StrictStr] = Field(default_factory=list)
    deprecatedIds: list[StrictStr] = Field(default_factory=list)
    deprecatedNames: list[StrictStr] = Field(default_factory=list)
    fullDescription: SarifMultiformatMessageString | None = None
    guid: StrictStr = ""
    help: SarifMultiformatMessageString | None = None
    helpUri: StrictStr = ""
    id: StrictStr
    messageStrings: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    name: StrictStr = ""
    properties: PropertyBag | None = None
    relationships: list[SarifReportingDescriptorRelationship] = Field(default_factory=list)
    shortDescription: SarifMultiformatMessageString | None = None


class SarifConfigurationOverride(SarifModel):
    configuration: SarifReportingConfiguration
    descriptor: SarifReportingDescriptorReference
    properties: PropertyBag | None = None


class SarifTranslationMetadata(SarifModel):
    downloadUri: StrictStr = ""
    fullDescription: SarifMultiformatMessageString | None = None
    fullName: StrictStr = ""
    informationUri: StrictStr = ""
    name: StrictStr
    properties: PropertyBag | None = None
    shortDescription: SarifMultiformatMessageString | None = None


class SarifToolComponent(SarifModel):
    """The driver of a run, or an extension, taxonomy, policy or translation."""

    associatedComponent: SarifToolComponentReference | None = None
    contents: list[StrictStr] = Field(default_factory=list)
    dottedQuadFileVersion: StrictStr = ""
    downloadUri: StrictStr = ""
    fullDescription: SarifMultiformatMessageString | None = None
    fullName: StrictStr = ""
    globalMessageStrings: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    guid: StrictStr = ""
    informationUri: StrictStr = ""
    isComprehensive: StrictBool = False
    language: StrictStr = ""
    localizedDataSemanticVersion: StrictStr = ""
    locations: list[SarifArtifactLocation] = Field(default_factory=list)
    minimumRequiredLocalizedDataSemanticVersion: StrictStr = ""
    name: StrictStr
    notifications: list[SarifReportingDescriptor] = Field(default_factory=list)
    organization: StrictStr = ""
    product: StrictStr = ""
    productSuite: StrictStr = ""
    properties: PropertyBag | None = None
    releaseDateUtc: StrictStr = ""
    rules: list[SarifReportingDescriptor] = Field(default_factory=list)
    semanticVersion: StrictStr = ""
    shortDescription: SarifMultiformatMessageString | None = None
    supportedTaxonomies: list[SarifToolComponentReference] = Field(default_factory=list)
    taxa: list[SarifReportingDescriptor] = Field(default_factory=list)
    translationMetadata: SarifTranslationMetadata | None = None
    version: StrictStr = ""


class SarifTool(SarifModel):
    driver: SarifToolComponent
    extensions: list[SarifToolComponent] = Field(default_factory=list)
    properties: PropertyBag | None = None
