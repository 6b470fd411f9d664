# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Graphs and paths through them.

Node and edge ids are plain strings; nothing here checks that an edge's
endpoints or a traversal's ``edgeId`` name an existing element.
"""

from __future__ import annotations

from pydantic import Field, StrictInt, StrictStr

from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.location import SarifLocation
from sarifkit.models.message import SarifMessage, SarifMultiformatMessageString


class SarifNode(SarifModel):
    children: list[SarifNode] = Field(default_factory=list)
    id: StrictStr
    label: SarifMessage | None = None
    location: SarifLocation | None = None
    properties: PropertyBag | None = None


class SarifEdge(SarifModel):
    id: StrictStr
    label: SarifMessage | None = None
    properties: PropertyBag | None = None
    sourceNodeId: StrictStr
    targetNodeId: StrictStr


class SarifGraph(SarifModel):
    description: SarifMessage | None = None
    edges: list[SarifEdge] = Field(default_factory=list)
    nodes: list[SarifNode] = Field(default_factory=list)
    properties: PropertyBag | None = None


class SarifEdgeTraversal(SarifModel):
    edgeId: StrictStr
    finalState: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    message: SarifMessage | None = None
    properties: PropertyBag | None = None
    stepOverEdgeCount: StrictInt = 0


class SarifGraphTraversal(SarifModel):
    description: SarifMessage | None = None
    edgeTraversals: list[SarifEdgeTraversal] = Field(default_factory=list)
    immutableState: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    initialState: dict[str, SarifMultiformatMessageString] = Field(default_factory=dict)
    properties: PropertyBag | None = None
    resultGraphIndex: StrictInt = 0
    runGraphIndex: StrictInt = 0
