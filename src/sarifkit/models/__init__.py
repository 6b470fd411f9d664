# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF 2.1.0 object model."""

from sarifkit.models.artifact import (
    SarifArtifact,
    SarifArtifactChange,
    SarifArtifactContent,
    SarifArtifactLocation,
    SarifAttachment,
    SarifFix,
    SarifRectangle,
    SarifRegion,
    SarifReplacement,
)
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.graph import (
    SarifEdge,
    SarifEdgeTraversal,
    SarifGraph,
    SarifGraphTraversal,
    SarifNode,
)
from sarifkit.models.invocation import SarifException, SarifInvocation, SarifNotification
from sarifkit.models.location import (
    SarifAddress,
    SarifLocation,
    SarifLocationRelationship,
    SarifLogicalLocation,
    SarifPhysicalLocation,
    SarifStack,
    SarifStackFrame,
)
from sarifkit.models.log import SarifExternalProperties, SarifLog
from sarifkit.models.message import SarifMessage, SarifMultiformatMessageString
from sarifkit.models.result import (
    SarifCodeFlow,
    SarifResult,
    SarifResultProvenance,
    SarifSuppression,
    SarifThreadFlow,
    SarifThreadFlowLocation,
)
from sarifkit.models.run import (
    SarifConversion,
    SarifExternalPropertyFileReference,
    SarifExternalPropertyFileReferences,
    SarifRun,
    SarifRunAutomationDetails,
    SarifSpecialLocations,
    SarifVersionControlDetails,
)
from sarifkit.models.tool import (
    SarifConfigurationOverride,
    SarifReportingConfiguration,
    SarifReportingDescriptor,
    SarifReportingDescriptorReference,
    SarifReportingDescriptorRelationship,
    SarifTool,
    SarifToolComponent,
    SarifToolComponentReference,
    SarifTranslationMetadata,
)
from sarifkit.models.web import SarifWebRequest, SarifWebResponse

__all__ = [
    "PropertyBag",
    "SarifAddress",
    "SarifArtifact",
    "SarifArtifactChange",
    "SarifArtifactContent",
    "SarifArtifactLocation",
    "SarifAttachment",
    "SarifCodeFlow",
    "SarifConfigurationOverride",
    "SarifConversion",
    "SarifEdge",
    "SarifEdgeTraversal",
    "SarifException",
    "SarifExternalProperties",
    "SarifExternalPropertyFileReference",
    "SarifExternalPropertyFileReferences",
    "SarifFix",
    "SarifGraph",
    "SarifGraphTraversal",
    "SarifInvocation",
    "SarifLocation",
    "SarifLocationRelationship",
    "SarifLog",
    "SarifLogicalLocation",
    "SarifMessage",
    "SarifModel",
    "SarifMultiformatMessageString",
    "SarifNode",
    "SarifNotification",
    "SarifPhysicalLocation",
    "SarifRectangle",
    "SarifRegion",
    "SarifReplacement",
    "SarifReportingConfiguration",
    "SarifReportingDescriptor",
    "SarifReportingDescriptorReference",
    "SarifReportingDescriptorRelationship",
    "SarifResult",
    "SarifResultProvenance",
    "SarifRun",
    "SarifRunAutomationDetails",
    "SarifSpecialLocations",
    "SarifStack",
    "SarifStackFrame",
    "SarifSuppression",
    "SarifThreadFlow",
    "SarifThreadFlowLocation",
    "SarifTool",
    "SarifToolComponent",
    "SarifToolComponentReference",
    "SarifTranslationMetadata",
    "SarifVersionControlDetails",
    "SarifWebRequest",
    "SarifWebResponse",
]
