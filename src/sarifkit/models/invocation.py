# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Tool invocations and the notifications they raise."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictInt, StrictStr

from sarifkit.models.artifact import SarifArtifactLocation
from sarifkit.models.base import PropertyBag, SarifModel
from sarifkit.models.location import SarifLocation, SarifStack
from sarifkit.models.message import SarifMessage
from sarifkit.models.tool import SarifConfigurationOverride, SarifReportingDescriptorReference


class SarifException(SarifModel):
    """A runtime exception thrown by the tool, not an error in this package."""

    innerExceptions: list[SarifException] = Field(default_factory=list)
    kind: StrictStr = ""
    message: StrictStr = ""
    properties: PropertyBag | None = None
    stack: SarifStack | None = None


class SarifNotification(SarifModel):
    associatedRule: SarifReportingDescriptorReference | None = None
    descriptor: SarifReportingDescriptorReference | None = None
    exception: SarifException | None = None
    level: StrictStr = ""
    locations: list[SarifLocation] = Field(default_factory=list)
    message: SarifMessage
    properties: PropertyBag | None = None
    threadId: StrictInt = 0
    timeUtc: StrictStr = ""


class SarifInvocation(SarifModel):
    """One execution of the tool: command line, environment, exit status."""

    account: StrictStr = ""
    arguments: list[StrictStr] = Field(default_factory=list)
    commandLine: StrictStr = ""
    endTimeUtc: StrictStr = ""
    environmentVariables: dict[str, StrictStr] = Field(default_factory=dict)
    executableLocation: SarifArtifactLocation | None = None
    executionSuccessful: StrictBool
    exitCode: StrictInt = 0
    exitCodeDescription: StrictStr = ""
    exitSignalName: StrictStr = ""
    exitSignalNumber: StrictInt = 0
    machine: StrictStr = ""
    notificationConfigurationOverrides: list[SarifConfigurationOverride] = Field(
        default_factory=list
    )
    processId: StrictInt = 0
    processStartFailureMessage: StrictStr = ""
    properties: PropertyBag | None = None
    responseFiles: list[SarifArtifactLocation] = Field(default_factory=list)
    ruleConfigurationOverrides: list[SarifConfigurationOverride] = Field(default_factory=list)
    startTimeUtc: StrictStr = ""
    stderr: SarifArtifactLocation | None = None
    stdin: SarifArtifactLocation | None = None
    stdout: SarifArtifactLocation | None = None
    stdoutStderr: SarifArtifactLocation | None = None
    toolConfigurationNotifications: list[SarifNotification] = Field(default_factory=list)
    toolExecutionNotifications: list[SarifNotification] = Field(default_factory=list)
    workingDirectory: SarifArtifactLocation | None = None
