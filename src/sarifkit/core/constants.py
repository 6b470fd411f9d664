# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF version constants and well-known enumerated values."""

from enum import StrEnum

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA_URI = (
    "https://docs.oasis-open.org/sarif/sarif/v2.1.0/errata01/os/schemas/sarif-schema-2.1.0.json"
)


class Level(StrEnum):
    NONE = "none"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


class ResultKind(StrEnum):
    NOT_APPLICABLE = "notApplicable"
    PASS = "pass"
    FAIL = "fail"
    REVIEW = "review"
    OPEN = "open"
    INFORMATIONAL = "informational"


class BaselineState(StrEnum):
    NEW = "new"
    UNCHANGED = "unchanged"
    UPDATED = "updated"
    ABSENT = "absent"


class SuppressionKind(StrEnum):
    IN_SOURCE = "inSource"
    EXTERNAL = "external"


class SuppressionState(StrEnum):
    ACCEPTED = "accepted"
    UNDER_REVIEW = "underReview"
    REJECTED = "rejected"


class ColumnKind(StrEnum):
    UTF16_CODE_UNITS = "utf16CodeUnits"
    UNICODE_CODE_POINTS = "unicodeCodePoints"


class Importance(StrEnum):
    IMPORTANT = "important"
    ESSENTIAL = "essential"
    UNIMPORTANT = "unimportant"


class ArtifactRole(StrEnum):
    ANALYSIS_TARGET = "analysisTarget"
    ATTACHMENT = "attachment"
    RESPONSE_FILE = "responseFile"
    RESULT_FILE = "resultFile"
    STANDARD_STREAM = "standardStream"
    TRACED_FILE = "tracedFile"
    UNMODIFIED = "unmodified"
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"
    UNCONTROLLED = "uncontrolled"
    DRIVER = "driver"
    EXTENSION = "extension"
    TRANSLATION = "translation"
    TAXONOMY = "taxonomy"
    POLICY = "policy"
    REFERENCED_ON_COMMAND_LINE = "referencedOnCommandLine"
    MEMORY_CONTENTS = "memoryContents"
    DIRECTORY = "directory"
    USER_SPECIFIED_CONFIGURATION = "userSpecifiedConfiguration"
    TOOL_SPECIFIED_CONFIGURATION = "toolSpecifiedConfiguration"
    DEBUG_OUTPUT_FILE = "debugOutputFile"


class ToolComponentContent(StrEnum):
    LOCALIZED_DATA = "localizedData"
    NON_LOCALIZED_DATA = "nonLocalizedData"


# Log formats accepted by setup_logging
LOG_FORMATS = ("json", "text")
